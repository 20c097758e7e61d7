"""Abstract interface for commit message suggesters."""

from abc import ABC, abstractmethod
from typing import List, Optional


class MessageSuggester(ABC):
    """Abstract interface for providers that draft the squashed commit message."""

    @abstractmethod
    async def suggest_message(self,
                              subjects: List[str],
                              diff_stats: str = "",
                              diff_content: Optional[str] = None) -> str:
        """Draft a commit message for the squashed commits.

        Args:
            subjects: Subjects of the commits being squashed, newest first
            diff_stats: Output of ``git diff --stat`` over the squashed range
            diff_content: The actual diff, if available

        Returns:
            Commit message with a single subject line and an optional body
        """
        pass
