class EntityNotFoundError(LookupError):
    """Base exception for unknown station/line ids."""


class LineNotFoundError(EntityNotFoundError):
    pass


class StationRecordNotFoundError(EntityNotFoundError):
    pass


class ConflictError(Exception):
    """Base exception for requests that clash with existing records."""


class DuplicateLineError(ConflictError):
    pass


class StationInUseError(ConflictError):
    """Raised when deleting a station that a line still passes through."""


class InvalidNameError(ValueError):
    """Raised when a station or line is given a blank name."""
