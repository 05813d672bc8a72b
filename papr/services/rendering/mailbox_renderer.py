"""Rendering of parsed mailboxes into styled terminal text."""

from email.utils import format_datetime
from typing import Optional

from rich.text import Text

from papr.config.papr_config import RendererConfig
from papr.models.body import Body, FrontMatterBody, OnlyFrontMatterBody, SimpleBody
from papr.models.header import (
    AuthorHeader,
    DateHeader,
    Email,
    FromHeader,
    Header,
    OtherHeader,
    PatchSubject,
    Person,
    Subject,
    SubjectHeader,
    TaggedSubject,
)
from papr.models.message import Mailbox, Mailer, Message

DELIMITER = "---"


class MailboxRenderer:
    """
    Render mailboxes as mbox text, styled per RendererConfig.

    With the default email/person settings the plain text output parses
    back into an equal model.
    """

    def __init__(self, config: Optional[RendererConfig] = None):
        """
        Initialize renderer.

        Args:
            config: Renderer settings (default: RendererConfig())
        """
        self.config = config or RendererConfig()

    def render_plain(self, mailbox: Mailbox, front_matter: bool = False) -> str:
        return self.render_mailbox(mailbox, front_matter=front_matter).plain

    def render_mailbox(self, mailbox: Mailbox, front_matter: bool = False) -> Text:
        """
        Render all messages of a mailbox.

        Args:
            mailbox: Parsed mailbox
            front_matter: Show only front matter, footers and configured headers

        Returns:
            rich Text; a newline is added between messages where the
            previous one does not end with one
        """
        rendered = Text()

        for message in mailbox.messages:
            if rendered.plain and not rendered.plain.endswith("\n"):
                rendered.append("\n")
            rendered.append_text(self.render_message(message, front_matter=front_matter))

        return rendered

    def render_message(self, message: Message, front_matter: bool = False) -> Text:
        headers = message.headers

        if front_matter:
            message = message.front_matter_only()
            allowed = {key.lower() for key in self.config.frontmatter.headers}
            if allowed:
                headers = [header for header in message.headers if header.key.lower() in allowed]

        rendered = Text()

        if message.mailer is not None:
            rendered.append_text(self.render_mailer(message.mailer))
            rendered.append("\n")

        for header in headers:
            rendered.append_text(self.render_header(header))
            rendered.append("\n")

        rendered.append("\n")
        rendered.append_text(self.render_body(message.body))
        return rendered

    def render_mailer(self, mailer: Mailer) -> Text:
        timestamp = mailer.timestamp
        date = f"{timestamp:%a %b} {timestamp.day:2d} {timestamp:%H:%M:%S %Y}"

        rendered = Text("From ")
        rendered.append(mailer.daemon, style=self._style("daemon"))
        rendered.append(" ")
        rendered.append(date, style=self._style("timestamp"))
        return rendered

    def render_header(self, header: Header) -> Text:
        rendered = Text()
        rendered.append(header.key, style=self._style("header_key"))
        rendered.append(": ")

        if isinstance(header, (FromHeader, AuthorHeader)):
            rendered.append_text(self.render_person(header.person))
        elif isinstance(header, DateHeader):
            rendered.append(format_datetime(header.date), style=self._style("date"))
        elif isinstance(header, SubjectHeader):
            rendered.append_text(self.render_subject(header.subject))
        elif isinstance(header, OtherHeader):
            rendered.append(header.value)
        else:
            raise TypeError(f"Unknown header type: {type(header).__name__}")

        return rendered

    def render_person(self, person: Person) -> Text:
        """
        Render `Name <address>`, or `<address>` without a name.

        Obfuscated separators (` at `) are quoted, `Name <"user at domain">`.
        """
        rendered = Text()

        if person.name:
            rendered.append(person.name, style=self._style("name"))
            if self.config.person.omit_email:
                return rendered
            rendered.append(" ")

        quote = "" if "@" in self.config.email.domain_separator else '"'
        rendered.append("<" + quote)
        rendered.append_text(self.render_email(person.email))
        rendered.append(quote + ">")
        return rendered

    def render_email(self, email: Email) -> Text:
        rendered = Text(email.user, style=self._style("user") or "")
        if self.config.email.omit_domain:
            return rendered

        rendered.append(self.config.email.domain_separator)
        rendered.append(email.domain, style=self._style("domain"))
        return rendered

    def render_subject(self, subject: Subject) -> Text:
        rendered = Text()

        if isinstance(subject, PatchSubject):
            rendered.append("[PATCH")
            if subject.version is not None:
                rendered.append(" ")
                rendered.append(f"v{subject.version}", style=self._style("subject_version"))
            if subject.index is not None:
                position, total = subject.index
                rendered.append(" ")
                rendered.append(f"{position}/{total}", style=self._style("subject_index"))
            rendered.append("] ")

        if isinstance(subject, (PatchSubject, TaggedSubject)):
            for tag in subject.tags:
                rendered.append(tag, style=self._style("subject_tag"))
                rendered.append(": ")

        rendered.append(subject.description, style=self._style("description"))
        return rendered

    def render_body(self, body: Body) -> Text:
        if isinstance(body, SimpleBody):
            return Text(body.text)

        if not isinstance(body, (FrontMatterBody, OnlyFrontMatterBody)):
            raise TypeError(f"Unknown body type: {type(body).__name__}")

        rendered = Text()
        if body.front_matter:
            rendered.append(body.front_matter)
            rendered.append("\n\n")

        for key, value in body.footers:
            rendered.append(key, style=self._style("footer_key"))
            rendered.append(": ")
            rendered.append(value, style=self._style("footer_value"))
            rendered.append("\n")

        rendered.append(DELIMITER, style=self._style("delimiter"))
        rendered.append("\n")

        if isinstance(body, FrontMatterBody):
            rendered.append(body.body)

        return rendered

    def _style(self, field: str) -> Optional[str]:
        """Return the configured style for a field, None when color is off or unset."""
        if not self.config.color:
            return None
        return getattr(self.config.styles, field) or None
