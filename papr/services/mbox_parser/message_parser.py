"""Parsing of a single message span."""

from typing import Optional

from papr.models.message import Message
from papr.utils.line_utils import is_blank
from .base import EmptyInputError
from .body_parser import BodyParser
from .header_parser import HeaderParser
from .mailer_parser import MailerParser


class MessageParser:
    """Parse one message into mailer line, headers and body."""

    def __init__(
        self,
        mailer_parser: Optional[MailerParser] = None,
        header_parser: Optional[HeaderParser] = None,
        body_parser: Optional[BodyParser] = None,
    ):
        self.mailer_parser = mailer_parser or MailerParser()
        self.header_parser = header_parser or HeaderParser()
        self.body_parser = body_parser or BodyParser()

    def parse(self, text: str, offset: int = 0) -> Message:
        """
        Parse a message.

        Args:
            text: Message text, from its `From ` line up to the next message
            offset: Offset of the message in the archive

        Returns:
            Parsed Message

        Raises:
            EmptyInputError: If `text` is empty
            MboxParseError: Any failure of the mailer, header or body parse;
                the whole message fails

        Notes:
            - Headers run until the first blank line; the body is everything
              after that line, or empty when there is none
        """
        if not text:
            raise EmptyInputError("Empty message")

        lines = text.splitlines(keepends=True)
        mailer = None
        position = 0

        if self.mailer_parser.is_mailer_line(lines[0]):
            mailer = self.mailer_parser.parse(lines[0])
            position = len(lines[0])
            lines = lines[1:]

        header_lines = []
        body_start = len(text)

        for line in lines:
            position += len(line)
            if is_blank(line):
                body_start = position
                break
            header_lines.append(line.rstrip("\r\n"))

        return Message(
            mailer=mailer,
            headers=self.header_parser.parse(header_lines),
            body=self.body_parser.parse(text[body_start:]),
            offset=offset,
        )
