"""Rendering services."""

from .mailbox_renderer import MailboxRenderer

__all__ = ["MailboxRenderer"]
