"""Renumbering of raw labels into a dense range."""

import numpy as np

from pixlabel.core.constants import BACKGROUND_LABEL
from pixlabel.core.exceptions import InvalidArgumentError

__all__ = ["compact_labels"]


def compact_labels(labels):
    """Renumber foreground labels in place to ``1..K`` in first-seen order.

    Background (0) is left untouched. Distinct positive labels are renumbered
    in the order they are first met in a row-major scan, so the partition of
    cells is unchanged and the result does not depend on how large the
    intermediate labels were. Compacting an already compact grid is a no-op.

    Parameters
    ----------
    labels : ndarray
        Writable integer array of non-negative labels.

    Returns
    -------
    int
        Number ``K`` of distinct foreground labels.

    Raises
    ------
    InvalidArgumentError
        If ``labels`` is not a writable integer array or holds negative values.

    Examples
    --------
    >>> grid = np.array([[0, 40, 40], [7, 0, 40]])
    >>> compact_labels(grid)
    2
    >>> grid
    array([[0, 1, 1],
           [2, 0, 1]])
    """
    if not isinstance(labels, np.ndarray) or not np.issubdtype(labels.dtype, np.integer):
        raise InvalidArgumentError("labels must be an integer numpy array.")
    if not labels.flags.writeable:
        raise InvalidArgumentError("labels must be writable; compaction rewrites them in place.")
    if labels.size == 0:
        return 0

    flat = labels.reshape(-1)
    if flat.min() < 0:
        raise InvalidArgumentError("labels must be non-negative.")

    values, first_seen, inverse = np.unique(flat, return_index=True, return_inverse=True)
    foreground = np.flatnonzero(values != BACKGROUND_LABEL)
    order = foreground[np.argsort(first_seen[foreground], kind="stable")]

    mapping = np.zeros(values.size, dtype=labels.dtype)
    mapping[order] = np.arange(1, order.size + 1, dtype=labels.dtype)

    labels[...] = mapping[inverse.reshape(-1)].reshape(labels.shape)
    return int(order.size)
