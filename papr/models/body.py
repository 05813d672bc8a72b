"""Message body data models."""

from dataclasses import dataclass
from typing import Tuple, Union

Footer = Tuple[str, str]


@dataclass(frozen=True)
class SimpleBody:
    """Body without a `---` delimiter."""

    text: str

    def front_matter_only(self) -> "SimpleBody":
        return self


@dataclass(frozen=True)
class FrontMatterBody:
    """
    Body split on a standalone `---` line.

    Attributes:
        front_matter: Text before the delimiter, minus trailing footers
        footers: `key: value` lines right above the delimiter, top to bottom
        body: Text after the delimiter (a diff, for patch mails)
    """

    front_matter: str
    footers: Tuple[Footer, ...]
    body: str

    def front_matter_only(self) -> "OnlyFrontMatterBody":
        """Drop the text after the delimiter, keeping front matter and footers."""
        return OnlyFrontMatterBody(front_matter=self.front_matter, footers=self.footers)


@dataclass(frozen=True)
class OnlyFrontMatterBody:
    """Projection of a FrontMatterBody used by the front-matter display mode."""

    front_matter: str
    footers: Tuple[Footer, ...]

    def front_matter_only(self) -> "OnlyFrontMatterBody":
        return self


Body = Union[SimpleBody, FrontMatterBody, OnlyFrontMatterBody]
