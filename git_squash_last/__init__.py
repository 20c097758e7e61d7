"""
Git Squash Last - squash the last N commits into one

Lists the most recent commits, lets the user pick one of their messages or
write a new one, then soft-resets and commits.
"""

__version__ = "1.0.0"

from .core.config import SquashConfig
from .core.types import CommitInfo, MenuEntry, SquashPlan
from .git.operations import GitOperations
from .ai.interface import MessageSuggester
from .ai.claude import ClaudeSuggester
from .ai.mock import MockSuggester
from .tool import SquashTool

__all__ = [
    "SquashConfig",
    "CommitInfo",
    "MenuEntry",
    "SquashPlan",
    "GitOperations",
    "MessageSuggester",
    "ClaudeSuggester",
    "MockSuggester",
    "SquashTool"
]
