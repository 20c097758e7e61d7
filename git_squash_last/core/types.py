"""Type definitions for the squash tool."""

from dataclasses import dataclass
from typing import List, Optional
from enum import Enum


@dataclass
class CommitInfo:
    """Information about a single commit."""
    hash: str
    subject: str
    message: str  # full message, subject and body
    author_name: str
    author_email: str
    timestamp: int  # committer time, unix seconds

    @property
    def short_hash(self) -> str:
        """Get short version of commit hash."""
        return self.hash[:8]


class EntryKind(Enum):
    """What choosing a menu entry means."""
    CUSTOM = "custom"
    SUGGEST = "suggest"
    COMMIT = "commit"


@dataclass
class MenuEntry:
    """Single line of the message selection menu."""
    label: str
    kind: EntryKind
    commit: Optional[CommitInfo] = None


@dataclass
class SquashPlan:
    """Everything needed to squash the last commits."""
    amount: int
    commits: List[CommitInfo]  # newest first
    base_hash: str
    head_hash: str

    @property
    def subjects(self) -> List[str]:
        return [commit.subject for commit in self.commits]

    def summary_stats(self) -> str:
        """Get summary statistics as string."""
        return f"{self.amount} commits → 1 commit on top of {self.base_hash[:8]}"


class SquashError(Exception):
    """Base exception for squash operations."""
    pass


class GitOperationError(SquashError):
    """Raised when git operations fail."""
    pass


class NotEnoughCommitsError(SquashError):
    """Raised when the history is too short for the requested squash."""
    pass


class InvalidAmountError(SquashError):
    """Raised when the number of commits to squash is not positive."""
    pass


class InvalidSelectionError(SquashError):
    """Raised when a menu index does not exist."""
    pass


class MessageValidationError(SquashError):
    """Raised when a typed commit message is rejected."""
    pass
