"""Core utilities shared by the structure and labeling packages."""

from .backend import HAS_NUMBA, get_backend, set_backend, use_backend
from .config import LabelConfig, parse_connectivity, parse_method
from .constants import Connectivity, LabelMethod
from .exceptions import BugEncounteredError, ConvergenceError, EmptyNeighborhoodError, InvalidArgumentError
from .grid import BoolGridLike, to_bool_grid

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
    "get_backend",
    "parse_connectivity",
    "parse_method",
    "set_backend",
    "to_bool_grid",
    "use_backend",
]
