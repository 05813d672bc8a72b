"""Header data models: typed headers, persons and subjects."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Email:
    """
    Email address split into its two halves.

    Attributes:
        user: Local part (before `@` or ` at `)
        domain: Domain part
    """

    user: str
    domain: str


@dataclass(frozen=True)
class Person:
    """
    Sender or author of a message.

    Attributes:
        email: Parsed address
        name: Display name, or None when only an address was given
    """

    email: Email
    name: Optional[str] = None


@dataclass(frozen=True)
class SimpleSubject:
    """Subject without tags or patch metadata."""

    description: str


@dataclass(frozen=True)
class TaggedSubject:
    """Subject prefixed by one or more `tag:` segments, e.g. `net: ipv4: fix foo`."""

    tags: Tuple[str, ...]
    description: str


@dataclass(frozen=True)
class PatchSubject:
    """
    Subject of a patch mail, e.g. `[PATCH v2 3/7] net: fix foo`.

    Attributes:
        version: Series version (`v2` -> 2), None when absent
        index: (position, total) within the series, None for single patches
        tags: Extra bracket words followed by `tag:` prefixes, in order
        description: Remaining free text
    """

    version: Optional[int] = None
    index: Optional[Tuple[int, int]] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)
    description: str = ""


Subject = Union[SimpleSubject, TaggedSubject, PatchSubject]


@dataclass(frozen=True)
class FromHeader:
    person: Person

    key = "From"


@dataclass(frozen=True)
class DateHeader:
    date: datetime

    key = "Date"


@dataclass(frozen=True)
class AuthorHeader:
    person: Person

    key = "Author"


@dataclass(frozen=True)
class SubjectHeader:
    subject: Subject

    key = "Subject"


@dataclass(frozen=True)
class OtherHeader:
    """Any header without a dedicated variant. `key` keeps its original casing."""

    key: str
    value: str


Header = Union[FromHeader, DateHeader, AuthorHeader, SubjectHeader, OtherHeader]
