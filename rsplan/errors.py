from typing import Optional


class RSPlanError(Exception):
    """Base class for errors raised by rsplan."""


class ConfigurationError(RSPlanError, ValueError):
    """Vehicle or planning parameters that violate the planner preconditions."""


class PathGenerationError(RSPlanError, RuntimeError):
    """
    No Reeds–Shepp connection could be produced.

    Raised when a family generator fails its internal checks or when the
    families produce no candidate at all. Callers should treat the edge as
    non-expandable rather than retry with the same inputs.
    """

    def __init__(self, message: str, family: Optional[str] = None):
        super().__init__(message)
        self.family = family
