"""Splitting and classification of message headers."""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Iterable, List, Optional, Tuple

from papr.models.header import (
    AuthorHeader,
    DateHeader,
    FromHeader,
    Header,
    OtherHeader,
    SubjectHeader,
)
from .base import InvalidHeaderDateError
from .person_parser import PersonParser
from .subject_parser import SubjectParser


def parse_header_date(value: str) -> datetime:
    """
    Parse an RFC 2822 date and normalize it to UTC.

    Raises:
        InvalidHeaderDateError: If the value is not a valid date

    Notes:
        - `-0000` dates come back naive from the stdlib and are taken as UTC
    """
    try:
        date = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError) as e:
        raise InvalidHeaderDateError(f"Invalid date header: {value} ({e})", context=value)

    if date is None:
        raise InvalidHeaderDateError(f"Invalid date header: {value}", context=value)

    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)

    return date.astimezone(timezone.utc)


class HeaderParser:
    """Turn header lines into typed Header variants, keeping order and duplicates."""

    def __init__(
        self,
        person_parser: Optional[PersonParser] = None,
        subject_parser: Optional[SubjectParser] = None,
    ):
        self.person_parser = person_parser or PersonParser()
        self.subject_parser = subject_parser or SubjectParser()
        self._classifiers = {
            "from": lambda value: FromHeader(person=self.person_parser.parse(value)),
            "date": lambda value: DateHeader(date=parse_header_date(value)),
            "author": lambda value: AuthorHeader(person=self.person_parser.parse(value)),
            "subject": lambda value: SubjectHeader(subject=self.subject_parser.parse(value)),
        }

    def split_headers(self, lines: Iterable[str]) -> List[Tuple[str, str]]:
        """
        Split header lines on their first colon.

        Args:
            lines: Header lines, without the terminating blank line

        Returns:
            (key, value) pairs, both trimmed; a line without a colon gives (line, "")
        """
        pairs = []
        for line in lines:
            key, _, value = line.partition(":")
            pairs.append((key.strip(), value.strip()))
        return pairs

    def classify(self, key: str, value: str) -> Header:
        """
        Classify one header by its case-insensitive key.

        Raises:
            InvalidHeaderDateError: Bad Date value
            InvalidPersonError: From/Author value matches no address grammar
            InvalidEmailError: From/Author address is malformed
        """
        classifier = self._classifiers.get(key.lower())
        if classifier is None:
            return OtherHeader(key=key, value=value)
        return classifier(value)

    def parse(self, lines: Iterable[str]) -> List[Header]:
        return [self.classify(key, value) for key, value in self.split_headers(lines)]
