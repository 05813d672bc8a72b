"""Parsing of From/Author header values into persons and addresses."""

import re
from typing import Optional

from papr.models.header import Email, Person
from .base import InvalidEmailError, InvalidPersonError

OBFUSCATED_SEPARATOR = " at "

# Tried in order; the bare forms are subsets of the named ones.
PERSON_PATTERNS = [
    # John Doe <john.doe@email.com>
    re.compile(r'^(?P<name>[^<>]*?[^<>\s])\s*<(?P<email>[^<>"\s]+@[^<>"\s]+)>$'),
    # <john.doe@email.com>
    re.compile(r'^<(?P<email>[^<>"\s]+@[^<>"\s]+)>$'),
    # John Doe <"john.doe at email.com">
    re.compile(r'^(?P<name>[^<>"]*?[^<>"\s])\s*<?"(?P<email>[^<>"]+\sat\s[^<>"]+)">?$'),
    # "john.doe at email.com"
    re.compile(r'^<?"(?P<email>[^<>"]+\sat\s[^<>"]+)">?$'),
    # John Doe <john.doe at email.com>
    re.compile(r'^(?P<name>[^<>"]*?[^<>"\s])\s*<(?P<email>[^<>"]+\sat\s[^<>"]+)>$'),
    # <john.doe at email.com>
    re.compile(r'^<(?P<email>[^<>"]+\sat\s[^<>"]+)>$'),
]


def parse_email(value: str) -> Email:
    """
    Split an address into user and domain.

    Args:
        value: `user@domain` or the obfuscated `user at domain`

    Returns:
        Email with both halves trimmed

    Raises:
        InvalidEmailError: If the value does not split into exactly two non-empty parts

    Examples:
        >>> parse_email("john.doe@email.com")
        Email(user='john.doe', domain='email.com')
        >>> parse_email("john.doe at email.com")
        Email(user='john.doe', domain='email.com')
    """
    separator = "@" if "@" in value else OBFUSCATED_SEPARATOR
    parts = [part.strip() for part in value.split(separator)]

    if len(parts) != 2 or not all(parts):
        raise InvalidEmailError(f"Invalid email address: {value}", context=value)

    return Email(user=parts[0], domain=parts[1])


class PersonParser:
    """Parse `Name <address>` style values, including obfuscated addresses."""

    def parse(self, value: str) -> Person:
        """
        Parse a person from a header value.

        Args:
            value: Raw From/Author header value

        Returns:
            Person with optional display name

        Raises:
            InvalidPersonError: If no address grammar matches
            InvalidEmailError: If the matched address is malformed
        """
        value = value.strip()

        for pattern in PERSON_PATTERNS:
            match = pattern.match(value)
            if match is None:
                continue

            name: Optional[str] = match.groupdict().get("name")
            return Person(email=parse_email(match.group("email")), name=name or None)

        raise InvalidPersonError(f"Invalid person: {value}", context=value)
