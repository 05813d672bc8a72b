"""Message boundary detection in mbox archives."""

import logging
from dataclasses import dataclass
from typing import List

from papr.utils.line_utils import is_blank, line_at, next_line

logger = logging.getLogger(__name__)

MAILER_PREFIX = "From "
DIGEST_SEPARATOR = "--"


@dataclass(frozen=True)
class Span:
    """
    Slice of the archive holding one message.

    Attributes:
        offset: Start offset in the archive
        text: Message text, from its boundary up to the next one
    """

    offset: int
    text: str


class MessageSplitter:
    """
    Split an archive into message spans.

    Understands two boundary grammars:
        - a line starting with `From ` (plain mbox)
        - `--`, a version line made of digits and dots, a blank line, then a
          `From ` line (the signature `git format-patch` appends); the
          boundary is the start of the `From ` line
    """

    def find_boundaries(self, text: str) -> List[int]:
        """
        Find the offsets at which a message starts.

        Args:
            text: Whole archive

        Returns:
            Sorted, de-duplicated boundary offsets (possibly empty)
        """
        boundaries = set(self._mailer_boundaries(text))
        boundaries.update(self._digest_boundaries(text))
        return sorted(boundaries)

    def split(self, text: str) -> List[Span]:
        """
        Split the archive into spans.

        Args:
            text: Whole archive

        Returns:
            Spans in archive order; their texts concatenate back to `text`

        Notes:
            - The first span always starts at offset 0, so text before the
              first boundary is kept as its own span
            - Without boundaries (or for empty input) a single span covers
              the whole archive
        """
        starts = [offset for offset in self.find_boundaries(text) if offset > 0]
        starts.insert(0, 0)
        ends = starts[1:] + [len(text)]

        spans = [Span(offset=start, text=text[start:end]) for start, end in zip(starts, ends)]
        logger.debug("Split archive of %d chars into %d spans", len(text), len(spans))
        return spans

    def _mailer_boundaries(self, text: str) -> List[int]:
        boundaries = []
        if text.startswith(MAILER_PREFIX):
            boundaries.append(0)

        index = text.find("\n" + MAILER_PREFIX)
        while index != -1:
            boundaries.append(index + 1)
            index = text.find("\n" + MAILER_PREFIX, index + 1)

        return boundaries

    def _digest_boundaries(self, text: str) -> List[int]:
        boundaries = []
        candidates = [0] if line_at(text, 0) == DIGEST_SEPARATOR else []

        index = text.find("\n" + DIGEST_SEPARATOR + "\n")
        while index != -1:
            candidates.append(index + 1)
            index = text.find("\n" + DIGEST_SEPARATOR + "\n", index + 1)

        for separator in candidates:
            boundary = self._digest_boundary_after(text, separator)
            if boundary is not None:
                boundaries.append(boundary)

        return boundaries

    def _digest_boundary_after(self, text: str, separator: int):
        """Return the `From ` line offset if `--` at `separator` opens a digest boundary."""
        version = next_line(text, separator)
        if version is None:
            return None

        version_line = line_at(text, version)
        if not version_line or not all(char.isdigit() or char == "." for char in version_line):
            return None

        blank = next_line(text, version)
        if blank is None or not is_blank(line_at(text, blank)):
            return None

        mailer = next_line(text, blank)
        if mailer is None or not text.startswith(MAILER_PREFIX, mailer):
            return None

        return mailer
