"""Single entry point dispatching to the labeling algorithms."""

from __future__ import annotations

import logging

from pixlabel.core.config import LabelConfig
from pixlabel.core.constants import Connectivity, LabelMethod
from pixlabel.structure.neighborhood import Neighborhood

from .fast import _label_fast
from .generic import _label_relaxation
from .results import LabelResult
from .union_find import label_union_find

__all__ = ["label_components", "label_with_config"]

logger = logging.getLogger(__name__)


def label_components(
    image,
    connectivity=None,
    neighborhood: Neighborhood | None = None,
    method="relaxation",
    max_sweeps: int | None = None,
) -> LabelResult:
    """Label connected components and report how the labeling went.

    Parameters
    ----------
    image : array_like or BoolGridLike
        Binary image of shape ``(height, width)``. Non-zero is foreground.
    connectivity : {4, 8, "four", "eight", "custom"} or Connectivity, optional
        Adjacency to use. Defaults to 4-connectivity, or to ``"custom"`` when
        ``neighborhood`` is given.
    neighborhood : Neighborhood, optional
        Adjacency pattern for ``"custom"`` connectivity.
    method : {"relaxation", "union_find"} or LabelMethod, default="relaxation"
        ``"relaxation"`` uses the iterative minimum-label sweeps, with the
        specialised pair sweeps for 4- and 8-connectivity. ``"union_find"``
        uses a disjoint-set forest. Both give identical labels.
    max_sweeps : int, optional
        Upper bound on relaxation sweeps. Unbounded when omitted.

    Returns
    -------
    LabelResult
        Label grid, component count and run statistics.

    Raises
    ------
    InvalidArgumentError
        For an inconsistent configuration or a non-2D image.
    EmptyNeighborhoodError
        If a custom neighborhood defines no neighbor.
    ConvergenceError
        If relaxation needs more than ``max_sweeps`` sweeps.

    Examples
    --------
    >>> result = label_components([[1, 0, 1], [0, 1, 0]], connectivity=8)
    >>> result.n_components
    1
    """
    config = LabelConfig.from_options(
        connectivity=connectivity,
        neighborhood=neighborhood,
        method=method,
        max_sweeps=max_sweeps,
    )
    return label_with_config(image, config)


def label_with_config(image, config: LabelConfig) -> LabelResult:
    """Run the labeling described by a ``LabelConfig``."""
    config.validate()
    logger.debug("Labeling with config %s", config.to_dict())

    if config.method is LabelMethod.UNION_FIND:
        nbr = _resolve_neighborhood(config)
        labels, n_components = label_union_find(image, nbr)
        n_sweeps = 0
    elif config.connectivity is Connectivity.CUSTOM:
        labels, n_components, n_sweeps = _label_relaxation(image, config.neighborhood, config.max_sweeps)
    else:
        eight = config.connectivity is Connectivity.EIGHT
        labels, n_components, n_sweeps = _label_fast(image, eight=eight, max_sweeps=config.max_sweeps)

    return LabelResult(
        labels=labels,
        n_components=n_components,
        n_sweeps=n_sweeps,
        method=config.method.value,
        connectivity=config.connectivity.value,
    )


def _resolve_neighborhood(config):
    if config.connectivity is Connectivity.FOUR:
        return Neighborhood.four_connected()
    if config.connectivity is Connectivity.EIGHT:
        return Neighborhood.eight_connected()
    return config.neighborhood
