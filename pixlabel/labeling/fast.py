"""Connected-component labeling specialised for 4- and 8-connectivity."""

from __future__ import annotations

import logging

from pixlabel.core.exceptions import ConvergenceError
from pixlabel.core.grid import freeze, new_label_grid, to_bool_grid

from .compact import compact_labels
from .numba import relax_eight, relax_four, seed_rows

__all__ = ["label_eight_connected", "label_four_connected"]

logger = logging.getLogger(__name__)


def label_four_connected(image):
    """Label components joined through north, south, east and west steps.

    Parameters
    ----------
    image : array_like or BoolGridLike
        Binary image of shape ``(height, width)``. Non-zero is foreground.

    Returns
    -------
    ndarray
        Read-only int64 label grid; background is 0 and components are
        numbered ``1..K`` in row-major order of first appearance.
    """
    labels, _, _ = _label_fast(image, eight=False, max_sweeps=None)
    return labels


def label_eight_connected(image):
    """Label components joined through orthogonal or diagonal steps.

    Parameters
    ----------
    image : array_like or BoolGridLike
        Binary image of shape ``(height, width)``. Non-zero is foreground.

    Returns
    -------
    ndarray
        Read-only int64 label grid; background is 0 and components are
        numbered ``1..K`` in row-major order of first appearance.
    """
    labels, _, _ = _label_fast(image, eight=True, max_sweeps=None)
    return labels


def _label_fast(image, eight, max_sweeps):
    """Seed along rows, relax with pair sweeps, compact."""
    grid = to_bool_grid(image)
    labels = new_label_grid(grid.shape)
    logger.debug("Labeling %dx%d grid with %d-connectivity", *grid.shape, 8 if eight else 4)

    n_seeds = seed_rows(grid, labels)
    logger.debug("Row seeding assigned %d provisional labels", n_seeds)

    relax = relax_eight if eight else relax_four
    sweeps = relax(grid, labels, max_sweeps or 0)
    if sweeps < 0:
        raise ConvergenceError(max_sweeps)
    logger.debug("Relaxation converged after %d sweeps", sweeps)

    n_components = compact_labels(labels)
    return freeze(labels), n_components, sweeps
