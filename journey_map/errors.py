"""Central error types used across the application."""

from __future__ import annotations


class JourneyMapError(RuntimeError):
    """Base error for journey processing failures."""


class InvalidBoundsError(JourneyMapError, ValueError):
    """Raised when a bounding box or viewport cannot support a projection."""


class DomainError(JourneyMapError, ValueError):
    """Raised when a latitude lies outside the range the projection can map."""


class InvalidTimeDeltaError(JourneyMapError, ZeroDivisionError):
    """Raised when elapsed time between points is zero or negative."""


class EmptyTrajectoryError(JourneyMapError):
    """Raised when a trajectory has too few points for the requested operation."""


class JourneyFormatError(JourneyMapError):
    """Raised when the journey CSV structure or values are invalid."""


class RenderError(JourneyMapError):
    """Raised when a map image cannot be produced or written."""


__all__ = [
    "JourneyMapError",
    "InvalidBoundsError",
    "DomainError",
    "InvalidTimeDeltaError",
    "EmptyTrajectoryError",
    "JourneyFormatError",
    "RenderError",
]
