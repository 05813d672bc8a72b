"""Exceptions raised while parsing mbox archives."""

from typing import Optional


class MboxParseError(Exception):
    """
    Base exception for mbox parsing errors.

    Attributes:
        context: Offending line or header value, when known
        offset: Offset of the failing message in the archive, set by MailboxParser
    """

    def __init__(self, message: str, context: Optional[str] = None):
        super().__init__(message)
        self.context = context
        self.offset: Optional[int] = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.offset is not None:
            return f"{message} (message at offset {self.offset})"
        return message


class EmptyInputError(MboxParseError):
    """Raised when a message span contains no text."""

    pass


class MalformedMailerLineError(MboxParseError):
    """Raised when a `From ` line has too few tokens or does not start with `From`."""

    pass


class InvalidTimestampError(MboxParseError):
    """Raised when the date of a mailer line cannot be parsed."""

    pass


class InvalidHeaderDateError(MboxParseError):
    """Raised when a Date header is not a valid RFC 2822 date."""

    pass


class InvalidPersonError(MboxParseError):
    """Raised when no address grammar matches a From/Author value."""

    pass


class InvalidEmailError(MboxParseError):
    """Raised when an address does not split into exactly a user and a domain."""

    pass


class InvalidSubjectError(MboxParseError):
    """Reserved. Subject classification always falls back to a simple subject."""

    pass
