"""Formatting of commit menu lines and validation of typed messages."""

import logging
import time
from typing import Optional
from .types import CommitInfo, MessageValidationError
from .config import SquashConfig

logger = logging.getLogger(__name__)

SECONDS_IN_HOUR = 3600


class CommitFormatter:
    """Renders commits for the selection menu and checks typed messages."""

    def __init__(self, config: SquashConfig):
        self.config = config

    def hours_ago(self, timestamp: int, now: Optional[int] = None) -> str:
        """Whole hours elapsed since timestamp, padded for column alignment."""
        if now is None:
            now = int(time.time())
        # int() truncates toward zero, so commits dated in the future show 0 or a negative count
        hours = int((now - timestamp) / SECONDS_IN_HOUR)
        return f"{hours} h".ljust(self.config.hour_column_width)

    def format_commit(self, commit: CommitInfo, now: Optional[int] = None) -> str:
        """Format a commit as a single menu line."""
        formatted = f"{self.hours_ago(commit.timestamp, now)} {commit.subject}"
        limit = self.config.max_message_length
        if len(formatted) > limit:
            formatted = formatted[:limit] + "..."
        return formatted

    def validate_message(self, message: str) -> str:
        """Return the stripped message or raise MessageValidationError."""
        stripped = message.strip()
        if not stripped:
            raise MessageValidationError("Message cannot be empty")
        limit = self.config.max_message_length
        if len(stripped) > limit:
            raise MessageValidationError(
                f"Message is too long, max is {limit}")
        return stripped

    def clip_subject(self, message: str) -> str:
        """Clip the subject line of a generated message to the length limit."""
        lines = message.strip().split('\n')
        subject = lines[0].strip()
        limit = self.config.max_message_length
        if len(subject) > limit:
            logger.debug("Clipping subject from %d to %d chars", len(subject), limit)
            subject = subject[:limit - 3] + "..."
        return '\n'.join([subject] + lines[1:])
