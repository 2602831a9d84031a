class SectionError(ValueError):
    """Base exception for edits that would break a line's simple path."""


class InvalidSectionError(SectionError):
    """Raised when a section is malformed or cannot be split/merged as asked."""


class SectionNotConnectedError(SectionError):
    """Raised when neither endpoint of a new section is on the line."""


class SectionAlreadyExistsError(SectionError):
    """Raised when both endpoints of a new section are already on the line."""


class StationNotInLineError(SectionError):
    """Raised when removing a station the line does not pass through."""


class LastSectionRemovalError(SectionError):
    """Raised when a removal would leave the line without any section."""
