import numpy as np
import pytest

from colorpack.palettes.generator import generate_palette


@pytest.fixture
def rng():
    # fixed seed so failures reproduce
    return np.random.default_rng(20240611)


@pytest.fixture(scope="session")
def palette():
    return generate_palette()
