"""Connected-component labeling."""

from . import format as _format  # noqa: F401
from .compact import compact_labels
from .fast import label_eight_connected, label_four_connected
from .generic import label_generic
from .label import label_components, label_with_config
from .results import LabelResult
from .union_find import label_union_find

__all__ = [
    "LabelResult",
    "compact_labels",
    "label_components",
    "label_eight_connected",
    "label_four_connected",
    "label_generic",
    "label_union_find",
    "label_with_config",
]
