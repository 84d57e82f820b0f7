"""Constants and enumerations shared across pixlabel."""

from enum import Enum

BACKEND_ENV_VAR = "PIXLABEL_BACKEND"
BACKENDS = ("numba", "python")

LABEL_DTYPE = "int64"
BACKGROUND_LABEL = 0

FOREGROUND_GLYPH = "#"
BACKGROUND_GLYPH = "."


class Connectivity(Enum):
    """Adjacency used to join foreground cells."""

    FOUR = "four"
    EIGHT = "eight"
    CUSTOM = "custom"


class LabelMethod(Enum):
    """Algorithm used to resolve label equivalences."""

    RELAXATION = "relaxation"
    UNION_FIND = "union_find"


DEFAULT_CONNECTIVITY = Connectivity.FOUR
DEFAULT_METHOD = LabelMethod.RELAXATION
