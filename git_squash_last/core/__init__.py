"""Core functionality for the squash tool."""

from .config import SquashConfig
from .types import (
    CommitInfo, EntryKind, MenuEntry, SquashPlan,
    SquashError, GitOperationError, NotEnoughCommitsError,
    InvalidAmountError, InvalidSelectionError, MessageValidationError
)
from .formatter import CommitFormatter

__all__ = [
    "SquashConfig",
    "CommitInfo", "EntryKind", "MenuEntry", "SquashPlan",
    "SquashError", "GitOperationError", "NotEnoughCommitsError",
    "InvalidAmountError", "InvalidSelectionError", "MessageValidationError",
    "CommitFormatter"
]
