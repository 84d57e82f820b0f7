"""Configuration classes for labeling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

import numpy as np

from .constants import DEFAULT_CONNECTIVITY, DEFAULT_METHOD, Connectivity, LabelMethod
from .exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from pixlabel.structure.neighborhood import Neighborhood

_CONNECTIVITY_ALIASES = {
    4: Connectivity.FOUR,
    8: Connectivity.EIGHT,
    "4": Connectivity.FOUR,
    "8": Connectivity.EIGHT,
}


def parse_connectivity(value) -> Connectivity:
    """Normalise ``4``, ``8``, ``"four"``, ``"eight"``, ``"custom"`` or an enum member."""
    if isinstance(value, Connectivity):
        return value
    if isinstance(value, bool):
        raise InvalidArgumentError(f"connectivity={value!r} is not valid. Must be 4, 8 or 'custom'.")
    if isinstance(value, (int, str)) and value in _CONNECTIVITY_ALIASES:
        return _CONNECTIVITY_ALIASES[value]
    if isinstance(value, str):
        try:
            return Connectivity(value.lower())
        except ValueError:
            pass
    raise InvalidArgumentError(f"connectivity={value!r} is not valid. Must be 4, 8 or 'custom'.")


def parse_method(value) -> LabelMethod:
    """Normalise ``"relaxation"``, ``"union_find"`` or an enum member."""
    if isinstance(value, LabelMethod):
        return value
    if isinstance(value, str):
        try:
            return LabelMethod(value.lower().replace("-", "_"))
        except ValueError:
            pass
    raise InvalidArgumentError(f"method={value!r} is not valid. Must be 'relaxation' or 'union_find'.")


@dataclass(frozen=True)
class LabelConfig:
    """Labeling config."""

    connectivity: Connectivity = DEFAULT_CONNECTIVITY
    method: LabelMethod = DEFAULT_METHOD
    max_sweeps: int | None = None
    neighborhood: Neighborhood | None = None

    def validate(self) -> None:
        """Raise ``InvalidArgumentError`` for inconsistent settings."""
        if self.max_sweeps is not None:
            sweeps = self.max_sweeps
            if isinstance(sweeps, bool) or not isinstance(sweeps, (int, np.integer)) or sweeps < 1:
                raise InvalidArgumentError(f"max_sweeps={self.max_sweeps!r} is not valid. Must be a positive integer.")

        if self.connectivity is Connectivity.CUSTOM and self.neighborhood is None:
            raise InvalidArgumentError("connectivity='custom' requires a neighborhood.")

        if self.connectivity is not Connectivity.CUSTOM and self.neighborhood is not None:
            raise InvalidArgumentError(
                f"A neighborhood was given together with connectivity='{self.connectivity.value}'. "
                "Use connectivity='custom' or drop the neighborhood."
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {k: v.value if isinstance(v, Enum) else v for k, v in self.__dict__.items()}

    @classmethod
    def from_options(cls, connectivity=None, neighborhood=None, method=DEFAULT_METHOD, max_sweeps=None):
        """Build and validate a config from loosely typed keyword options.

        When ``connectivity`` is omitted it is ``Connectivity.CUSTOM`` if a
        neighborhood is given and ``DEFAULT_CONNECTIVITY`` otherwise.
        """
        if connectivity is None:
            connectivity = DEFAULT_CONNECTIVITY if neighborhood is None else Connectivity.CUSTOM
        connectivity = parse_connectivity(connectivity)
        config = cls(
            connectivity=connectivity,
            method=parse_method(method),
            max_sweeps=max_sweeps,
            neighborhood=neighborhood,
        )
        config.validate()
        return config
