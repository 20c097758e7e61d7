"""Mock suggester for testing and offline use."""

import logging
from typing import List, Optional
from .interface import MessageSuggester
from ..core.config import SquashConfig

logger = logging.getLogger(__name__)


class MockSuggester(MessageSuggester):
    """Builds a deterministic message from the commit subjects."""

    def __init__(self, config: Optional[SquashConfig] = None):
        self.config = config or SquashConfig()

    async def suggest_message(self,
                              subjects: List[str],
                              diff_stats: str = "",
                              diff_content: Optional[str] = None) -> str:
        logger.debug("Generating mock message from %d subjects", len(subjects))

        if not subjects:
            return "Squash commits"

        # Oldest commit usually names the change the later ones refine
        chronological = list(reversed(subjects))
        subject = chronological[0]
        if len(subject) > self.config.max_message_length:
            subject = subject[:self.config.max_message_length - 3] + "..."

        body = [f"- {s}" for s in chronological[1:]]
        if not body:
            return subject
        return subject + "\n\n" + "\n".join(body)
