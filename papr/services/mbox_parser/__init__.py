"""mbox parsing services."""

from .base import (
    EmptyInputError,
    InvalidEmailError,
    InvalidHeaderDateError,
    InvalidPersonError,
    InvalidSubjectError,
    InvalidTimestampError,
    MalformedMailerLineError,
    MboxParseError,
)
from .body_parser import BodyParser
from .header_parser import HeaderParser
from .mailbox_parser import MailboxParser, parse_mailbox
from .mailer_parser import MailerParser
from .message_parser import MessageParser
from .person_parser import PersonParser, parse_email
from .splitter import MessageSplitter, Span
from .subject_parser import SubjectParser

__all__ = [
    "MboxParseError",
    "EmptyInputError",
    "MalformedMailerLineError",
    "InvalidTimestampError",
    "InvalidHeaderDateError",
    "InvalidPersonError",
    "InvalidEmailError",
    "InvalidSubjectError",
    "MessageSplitter",
    "Span",
    "MailerParser",
    "HeaderParser",
    "PersonParser",
    "parse_email",
    "SubjectParser",
    "BodyParser",
    "MessageParser",
    "MailboxParser",
    "parse_mailbox",
]
