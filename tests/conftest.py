"""Shared fixtures for pixlabel tests."""

import numpy as np
import pytest

from pixlabel.core.backend import HAS_NUMBA, use_backend
from tests.helpers import breadth_first_labels


@pytest.fixture
def reference_labels():
    """Flood-fill reference labeler taking ``(image, offsets)``."""
    return breadth_first_labels


@pytest.fixture
def rng():
    """Seeded random number generator."""
    return np.random.default_rng(42)


@pytest.fixture(
    params=[
        "python",
        pytest.param("numba", marks=pytest.mark.skipif(not HAS_NUMBA, reason="Numba not available")),
    ]
)
def backend(request):
    """Run the test once per kernel backend."""
    with use_backend(request.param):
        yield request.param


@pytest.fixture
def staircase():
    """Two horizontal runs touching only at a diagonal."""
    return np.array(
        [
            [1, 1, 0, 0],
            [0, 0, 1, 1],
        ],
        dtype=bool,
    )


@pytest.fixture
def u_shape():
    """Two vertical arms joined at the bottom; needs more than one relaxation sweep."""
    return np.array(
        [
            [1, 0, 1],
            [1, 0, 1],
            [1, 1, 1],
        ],
        dtype=bool,
    )


@pytest.fixture
def spiral():
    """A long single-pixel snake that stresses label propagation."""
    return np.array(
        [
            [1, 1, 1, 1, 1, 1, 1],
            [0, 0, 0, 0, 0, 0, 1],
            [1, 1, 1, 1, 1, 0, 1],
            [1, 0, 0, 0, 1, 0, 1],
            [1, 0, 1, 1, 1, 0, 1],
            [1, 0, 0, 0, 0, 0, 1],
            [1, 1, 1, 1, 1, 1, 1],
        ],
        dtype=bool,
    )
