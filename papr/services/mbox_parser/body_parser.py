"""Parsing of message bodies with an optional front-matter block."""

import re
from typing import List, Optional, Tuple

from papr.models.body import Body, Footer, FrontMatterBody, SimpleBody

DELIMITER_PATTERN = re.compile(r"^---[ \t]*$", re.MULTILINE)
FOOTER_SEPARATOR = ": "


def parse_footer(line: str) -> Optional[Footer]:
    """Return (key, value) for a `key: value` line, None otherwise."""
    key, separator, value = line.partition(FOOTER_SEPARATOR)
    if not separator or not key.strip():
        return None
    return key.strip(), value.strip()


class BodyParser:
    """
    Split a body on its first standalone `---` line.

    For a `git format-patch` mail the text above the delimiter is the commit
    message, the `key: value` lines right above it are trailers such as
    `Signed-off-by`, and the text below it is the diffstat and diff.
    """

    def parse(self, text: str) -> Body:
        delimiter = DELIMITER_PATTERN.search(text)
        if delimiter is None:
            return SimpleBody(text=text)

        front_matter, footers = self._split_footers(text[: delimiter.start()])

        return FrontMatterBody(
            front_matter=front_matter,
            footers=tuple(footers),
            body=text[delimiter.end() :].strip(),
        )

    def _split_footers(self, text: str) -> Tuple[str, List[Footer]]:
        """
        Consume the trailing run of `key: value` lines.

        Scans backward and stops at the first blank or non key-value line.

        Returns:
            Tuple of (trimmed front matter, footers in top-to-bottom order)
        """
        lines = text.splitlines()
        footers = []

        while lines:
            line = lines[-1]
            if not line.strip():
                break

            footer = parse_footer(line)
            if footer is None:
                break

            footers.append(footer)
            lines.pop()

        footers.reverse()
        return "\n".join(lines).strip(), footers
