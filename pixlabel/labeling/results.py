"""Result containers."""

from typing import NamedTuple

import numpy as np

from pixlabel.core.exceptions import InvalidArgumentError


class LabelResult(NamedTuple):
    """Container for a labeled image.

    Attributes
    ----------
    labels : ndarray
        Read-only int64 label grid; 0 is background, components are ``1..K``.
    n_components : int
        Number ``K`` of connected components.
    n_sweeps : int
        Relaxation sweeps run, including the final sweep that changed nothing.
        Always 0 for the union-find method.
    method : str
        Name of the equivalence-resolution method.
    connectivity : str
        ``"four"``, ``"eight"`` or ``"custom"``.
    """

    labels: np.ndarray
    n_components: int
    n_sweeps: int
    method: str
    connectivity: str

    @property
    def shape(self) -> tuple[int, int]:
        return self.labels.shape

    def component_sizes(self) -> np.ndarray:
        """Cell count per label; index 0 counts the background."""
        return np.bincount(self.labels.reshape(-1), minlength=self.n_components + 1)

    def bounding_boxes(self) -> np.ndarray:
        """Bounding box of each component.

        Returns
        -------
        ndarray
            Array of shape ``(n_components, 4)``; row ``k - 1`` holds
            ``(min_row, min_col, max_row, max_col)`` of label ``k``.
        """
        boxes = np.zeros((self.n_components, 4), dtype=np.int64)
        if self.n_components == 0:
            return boxes

        rows, cols = np.nonzero(self.labels)
        idx = self.labels[rows, cols] - 1

        boxes[:, 0] = np.iinfo(np.int64).max
        boxes[:, 1] = np.iinfo(np.int64).max
        boxes[:, 2] = -1
        boxes[:, 3] = -1
        np.minimum.at(boxes[:, 0], idx, rows)
        np.minimum.at(boxes[:, 1], idx, cols)
        np.maximum.at(boxes[:, 2], idx, rows)
        np.maximum.at(boxes[:, 3], idx, cols)
        return boxes

    def mask(self, label: int) -> np.ndarray:
        """Boolean mask of the cells carrying ``label``."""
        if not 0 <= label <= self.n_components:
            raise InvalidArgumentError(f"label={label} is not valid. Must be between 0 and {self.n_components}.")
        return self.labels == label
