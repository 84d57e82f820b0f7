"""Exception types raised by pixlabel."""

__all__ = [
    "BugEncounteredError",
    "ConvergenceError",
    "EmptyNeighborhoodError",
    "InvalidArgumentError",
]


class InvalidArgumentError(ValueError):
    """Malformed input such as an even-sized kernel or a non-2D grid."""


class EmptyNeighborhoodError(ValueError):
    """A neighborhood without any active cell was used where neighbors are required."""

    def __init__(self, message="Neighborhood does not define any neighbor."):
        super().__init__(message)


class BugEncounteredError(RuntimeError):
    """An internal invariant was violated.

    This signals a defect in pixlabel itself rather than bad user input and is
    never caught inside the package.
    """


class ConvergenceError(RuntimeError):
    """Label relaxation did not reach a fixed point within the allowed sweeps."""

    def __init__(self, max_sweeps):
        self.max_sweeps = max_sweeps
        super().__init__(f"Label relaxation did not converge within max_sweeps={max_sweeps}.")
