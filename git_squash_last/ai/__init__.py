"""Suggesters that draft the squashed commit message."""

from .interface import MessageSuggester
from .claude import ClaudeSuggester
from .mock import MockSuggester

__all__ = ["MessageSuggester", "ClaudeSuggester", "MockSuggester"]
