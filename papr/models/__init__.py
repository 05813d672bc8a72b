"""Data models for parsed mbox archives"""

from .body import Body, FrontMatterBody, OnlyFrontMatterBody, SimpleBody
from .header import (
    AuthorHeader,
    DateHeader,
    Email,
    FromHeader,
    Header,
    OtherHeader,
    PatchSubject,
    Person,
    SimpleSubject,
    Subject,
    SubjectHeader,
    TaggedSubject,
)
from .message import Mailbox, Mailer, Message

__all__ = [
    "Mailbox",
    "Message",
    "Mailer",
    "Header",
    "FromHeader",
    "DateHeader",
    "AuthorHeader",
    "SubjectHeader",
    "OtherHeader",
    "Person",
    "Email",
    "Subject",
    "SimpleSubject",
    "TaggedSubject",
    "PatchSubject",
    "Body",
    "SimpleBody",
    "FrontMatterBody",
    "OnlyFrontMatterBody",
]
