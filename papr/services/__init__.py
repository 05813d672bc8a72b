"""Business logic services"""

from .mbox_parser import MailboxParser, MessageParser, MessageSplitter, parse_mailbox
from .rendering import MailboxRenderer

__all__ = [
    "MailboxParser",
    "MessageParser",
    "MessageSplitter",
    "parse_mailbox",
    "MailboxRenderer",
]
