"""Classification of Subject header values."""

import re
from typing import List, Optional, Tuple

from papr.models.header import PatchSubject, SimpleSubject, Subject, TaggedSubject

# [PATCH v2 3/7], [RFC PATCH net-next 0/4], [PATCHv3]
PATCH_PATTERN = re.compile(
    r"^\[(?P<head>[^\]]*\bPATCH(?:v\d+)?\b[^\]]*)\]\s*(?P<rest>.*)$", re.IGNORECASE
)
VERSION_TOKEN = re.compile(r"^(?:PATCH)?v(?P<version>\d+)$", re.IGNORECASE)
INDEX_TOKEN = re.compile(r"^(?P<position>\d+)/(?P<total>\d+)$")
PATCH_TOKEN = "PATCH"

# One or more `tag:` segments; a tag has no whitespace and its colon is
# followed by whitespace or the end of the value (so `http://` is no tag).
TAG_PREFIX = re.compile(r"^(?P<tags>(?:[^\s:]+:(?:\s+|$))+)(?P<description>.*)$")


def split_tags(prefix: str) -> List[str]:
    """Split a `a: b:` prefix on colons, dropping empty segments."""
    return [tag.strip() for tag in prefix.split(":") if tag.strip()]


class SubjectParser:
    """
    Classify subjects as patch, tagged or simple.

    Grammars are tried in that order and the first match wins. The simple
    grammar accepts anything, so classification never fails.
    """

    def parse(self, value: str) -> Subject:
        value = value.strip()

        for matcher in (self._match_patch, self._match_tagged):
            subject = matcher(value)
            if subject is not None:
                return subject

        return SimpleSubject(description=value)

    def _match_patch(self, value: str) -> Optional[PatchSubject]:
        match = PATCH_PATTERN.match(value)
        if match is None:
            return None

        version, index, bracket_tags = self._parse_patch_head(match.group("head"))
        tags, description = self._split_tag_prefix(match.group("rest"))

        return PatchSubject(
            version=version,
            index=index,
            tags=tuple(bracket_tags + tags),
            description=description,
        )

    def _match_tagged(self, value: str) -> Optional[TaggedSubject]:
        tags, description = self._split_tag_prefix(value)
        if not tags:
            return None
        return TaggedSubject(tags=tuple(tags), description=description)

    def _parse_patch_head(
        self, head: str
    ) -> Tuple[Optional[int], Optional[Tuple[int, int]], List[str]]:
        """
        Read the words inside the `[PATCH ...]` bracket.

        Returns:
            Tuple of (version, index, other words in order)
        """
        version = None
        index = None
        extra = []

        for token in head.split():
            version_match = VERSION_TOKEN.match(token)
            index_match = INDEX_TOKEN.match(token)

            if version_match:
                version = int(version_match.group("version"))
            elif index_match:
                index = (int(index_match.group("position")), int(index_match.group("total")))
            elif token.upper() != PATCH_TOKEN:
                extra.append(token)

        return version, index, extra

    def _split_tag_prefix(self, value: str) -> Tuple[List[str], str]:
        match = TAG_PREFIX.match(value)
        if match is None:
            return [], value.strip()
        return split_tags(match.group("tags")), match.group("description").strip()
