"""Exception hierarchy for seamcarver."""


class SeamCarverError(Exception):
    """Base exception for all seamcarver errors."""


class OutOfBoundsError(SeamCarverError, IndexError):
    """Raised when a pixel coordinate lies outside the current picture."""


class InvariantViolation(SeamCarverError, RuntimeError):
    """Raised when the topological order or relaxation state is inconsistent."""


class InvalidSeamError(InvariantViolation, ValueError):
    """Raised when a malformed seam is passed to seam removal."""
