"""Connected-component labeling of binary images over configurable neighborhoods."""

from pixlabel.core import (
    HAS_NUMBA,
    BoolGridLike,
    BugEncounteredError,
    Connectivity,
    ConvergenceError,
    EmptyNeighborhoodError,
    InvalidArgumentError,
    LabelConfig,
    LabelMethod,
    get_backend,
    set_backend,
    use_backend,
)
from pixlabel.labeling import (
    LabelResult,
    compact_labels,
    label_components,
    label_eight_connected,
    label_four_connected,
    label_generic,
    label_union_find,
    label_with_config,
)
from pixlabel.structure import Neighbor, Neighborhood, merge_neighborhoods

__version__ = "0.1.0"

__all__ = [
    "HAS_NUMBA",
    "BoolGridLike",
    "BugEncounteredError",
    "Connectivity",
    "ConvergenceError",
    "EmptyNeighborhoodError",
    "InvalidArgumentError",
    "LabelConfig",
    "LabelMethod",
    "LabelResult",
    "Neighbor",
    "Neighborhood",
    "compact_labels",
    "get_backend",
    "label_components",
    "label_eight_connected",
    "label_four_connected",
    "label_generic",
    "label_union_find",
    "label_with_config",
    "merge_neighborhoods",
    "set_backend",
    "use_backend",
]
