"""Mailbox and message data models."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional, Type

from .body import Body
from .header import Header, Subject, SubjectHeader


@dataclass(frozen=True)
class Mailer:
    """
    Mailer line that starts a message in an mbox archive.

    Example: `From git@z Thu Jan  1 00:00:00 1970`, the line written by
    `git format-patch`.

    Attributes:
        daemon: Second token of the line (`git@z`)
        timestamp: UTC date of the line; the format carries no timezone
    """

    daemon: str
    timestamp: datetime


@dataclass(frozen=True)
class Message:
    """
    A single message of an mbox archive.

    Attributes:
        mailer: Mailer line, None when the message does not start with one
        headers: Headers in original order, duplicates kept
        body: Parsed body
        offset: Character offset of the message in the archive
    """

    mailer: Optional[Mailer]
    headers: List[Header]
    body: Body
    offset: int = 0

    def get_headers(self, header_type: Type) -> List[Header]:
        """Return all headers of the given variant, in order."""
        return [header for header in self.headers if isinstance(header, header_type)]

    @property
    def subject(self) -> Optional[Subject]:
        """Classification of the first Subject header, if any."""
        for header in self.get_headers(SubjectHeader):
            return header.subject
        return None

    def front_matter_only(self) -> "Message":
        return replace(self, body=self.body.front_matter_only())


@dataclass
class Mailbox:
    """
    Ordered messages of one archive.

    Attributes:
        messages: Parsed messages in archive order
        errors: Errors of skipped messages (non-strict parsing only)
    """

    messages: List[Message] = field(default_factory=list)
    errors: list = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self):
        return iter(self.messages)

    def front_matter_only(self) -> "Mailbox":
        return Mailbox(
            messages=[message.front_matter_only() for message in self.messages],
            errors=list(self.errors),
        )
