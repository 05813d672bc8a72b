"""papr - parse and highlight mbox archives of patch mails."""

from papr.models import Mailbox, Message
from papr.services.mbox_parser import MailboxParser, MboxParseError, parse_mailbox
from papr.services.rendering import MailboxRenderer

__version__ = "0.1.0"

__all__ = [
    "Mailbox",
    "Message",
    "MailboxParser",
    "MboxParseError",
    "MailboxRenderer",
    "parse_mailbox",
]
