"""Message file parsing and unused key detection."""

from .reader import MessageFileError, MessageReader, parse_messages
from .searcher import MessageSearcher

__all__ = ["MessageFileError", "MessageReader", "MessageSearcher", "parse_messages"]
