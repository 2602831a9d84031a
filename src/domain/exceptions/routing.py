class RoutingError(Exception):
    """Base exception for path calculation failures."""


class NoPathFound(RoutingError):
    """Raised when no feasible path exists between two stations."""


class StationNotFoundError(RoutingError):
    """Raised when a requested station is not a vertex of the path graph."""
