"""mbox archive parser: boundaries, per-message parsing and error policy."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from papr.models.message import Mailbox, Message
from .base import MboxParseError
from .message_parser import MessageParser
from .splitter import MessageSplitter, Span

logger = logging.getLogger(__name__)


class MailboxParser:
    """
    Parse a whole archive into a Mailbox.

    Messages are independent once their span is known, so they can be
    parsed on a thread pool; results keep archive order either way.
    """

    def __init__(
        self,
        workers: int = 1,
        strict: bool = True,
        splitter: Optional[MessageSplitter] = None,
        message_parser: Optional[MessageParser] = None,
    ):
        """
        Initialize parser.

        Args:
            workers: Number of threads used for per-message parsing (1 = inline)
            strict: Abort on the first invalid message; when False, invalid
                messages are skipped and recorded in `Mailbox.errors`
            splitter: Custom boundary splitter
            message_parser: Custom message parser
        """
        if workers < 1:
            raise ValueError("workers must be at least 1")

        self.workers = workers
        self.strict = strict
        self.splitter = splitter or MessageSplitter()
        self.message_parser = message_parser or MessageParser()

    def parse(self, text: str) -> Mailbox:
        """
        Parse an archive.

        Args:
            text: Whole mbox archive

        Returns:
            Mailbox with messages in archive order

        Raises:
            MboxParseError: In strict mode, the first error, with `offset` set
                to the failing message
        """
        spans = self.splitter.split(text)

        # Blank preamble before the first boundary is not a message
        if len(spans) > 1 and not spans[0].text.strip():
            spans = spans[1:]

        if self.workers > 1 and len(spans) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                results = list(pool.map(self._parse_span, spans))
        else:
            results = [self._parse_span(span) for span in spans]

        messages: List[Message] = []
        errors: List[MboxParseError] = []

        for result in results:
            if isinstance(result, MboxParseError):
                if self.strict:
                    raise result
                logger.warning("Skipping invalid message: %s", result)
                errors.append(result)
            else:
                messages.append(result)

        logger.debug("Parsed %d messages (%d skipped)", len(messages), len(errors))
        return Mailbox(messages=messages, errors=errors)

    def _parse_span(self, span: Span):
        """Parse one span; parse errors are returned so results stay in order."""
        try:
            return self.message_parser.parse(span.text, offset=span.offset)
        except MboxParseError as e:
            e.offset = span.offset
            return e


def parse_mailbox(text: str, workers: int = 1, strict: bool = True) -> Mailbox:
    """Parse an mbox archive with a default MailboxParser."""
    return MailboxParser(workers=workers, strict=strict).parse(text)
