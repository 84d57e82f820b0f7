"""Kernel backend dispatch for labeling loops."""

from __future__ import annotations

import contextlib
import os
import warnings
from contextvars import ContextVar

from .constants import BACKEND_ENV_VAR, BACKENDS

try:
    import numba as nb

    HAS_NUMBA = True
except ImportError:
    HAS_NUMBA = False
    nb = None

__all__ = [
    "HAS_NUMBA",
    "get_backend",
    "set_backend",
    "use_backend",
]


def _default_backend():
    """Resolve the initial backend from the environment and numba availability."""
    fallback = "numba" if HAS_NUMBA else "python"
    requested = os.environ.get(BACKEND_ENV_VAR)
    if not requested:
        return fallback

    requested = requested.strip().lower()
    if requested not in BACKENDS:
        warnings.warn(
            f"{BACKEND_ENV_VAR}={requested!r} is not a known backend; using {fallback!r}.",
            UserWarning,
        )
        return fallback
    if requested == "numba" and not HAS_NUMBA:
        warnings.warn(
            f"{BACKEND_ENV_VAR}='numba' requested but numba is not installed; using 'python'.",
            UserWarning,
        )
        return "python"
    return requested


_active_backend: ContextVar[str] = ContextVar("pixlabel_backend", default=_default_backend())


def set_backend(name):
    """Set the active kernel backend.

    Parameters
    ----------
    name : {"numba", "python"}
        Backend to activate. Setting "numba" requires numba to be installed.
    """
    _active_backend.set(_validate_backend_name(name))


def get_backend():
    """Return the name of the active kernel backend.

    Returns
    -------
    str
        ``"numba"`` when compiled kernels are used, ``"python"`` otherwise.
    """
    return _active_backend.get()


@contextlib.contextmanager
def use_backend(name):
    """Context manager that temporarily activates a backend.

    The previous backend is restored when the context exits, even if an
    exception is raised.

    Parameters
    ----------
    name : {"numba", "python"}
        Backend to activate for the duration of the block.
    """
    token = _active_backend.set(_validate_backend_name(name))
    try:
        yield
    finally:
        _active_backend.reset(token)


def _validate_backend_name(name):
    """Validate and normalise a backend name.

    Parameters
    ----------
    name : str
        Backend name (case-insensitive).

    Returns
    -------
    str
        Normalised backend name (``"numba"`` or ``"python"``).
    """
    name = name.lower()
    if name not in BACKENDS:
        raise ValueError(f"Unknown backend {name!r}. Choose 'numba' or 'python'.")
    if name == "numba" and not HAS_NUMBA:
        raise ImportError("numba is not installed. Install with: pip install numba")
    return name
