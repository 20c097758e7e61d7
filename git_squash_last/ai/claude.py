"""Claude message suggester implementation."""
import os
import re
import logging
from typing import List, Optional
from claude_code_sdk import (
    query,
    ClaudeCodeOptions,
    AssistantMessage,
    TextBlock,
    ClaudeSDKError,
    CLIConnectionError,
    CLIJSONDecodeError,
    CLINotFoundError,
    ProcessError,
)
from .interface import MessageSuggester
from ..core.config import SquashConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = ("You are an AI assistant that writes concise git commit messages "
                 "for commits that are being squashed together.")


class ClaudeSuggester(MessageSuggester):
    """Drafts squash commit messages with Claude."""

    def __init__(self, api_key: Optional[str] = None, config: Optional[SquashConfig] = None):
        self.api_key = api_key or os.environ.get('ANTHROPIC_API_KEY')
        if not self.api_key:
            raise ValueError(
                "ANTHROPIC_API_KEY environment variable must be set")

        self.config = config or SquashConfig()

    async def suggest_message(self,
                              subjects: List[str],
                              diff_stats: str = "",
                              diff_content: Optional[str] = None) -> str:
        """Generate a squash commit message using Claude."""
        logger.debug("Requesting suggestion for %d commits", len(subjects))

        context = self._build_context(subjects, diff_stats, diff_content)
        limit = self.config.max_message_length
        prompt = f"""These git commits are being squashed into one commit.

{context}

Write a commit message for the combined change:
- Subject line of at most {limit} characters, imperative mood, no trailing period
- Optionally a blank line and a short bullet list of the notable changes

Format your response exactly as:
<commit-message>
Subject line here

- optional body
</commit-message>"""

        try:
            async for message in query(
                    prompt=prompt,
                    options=ClaudeCodeOptions(
                        max_turns=1,
                        model=self.config.model,
                        system_prompt=SYSTEM_PROMPT)
            ):
                if not isinstance(message, AssistantMessage):
                    logger.debug("Skipping message type: %s", type(message).__name__)
                    continue

                text_parts = [block.text for block in message.content
                              if isinstance(block, TextBlock)]
                response_text = ' '.join(text_parts).strip()
                logger.debug("Response text: %s", response_text[:200])

                match = re.search(
                    r'<commit-message>\s*(.*?)\s*</commit-message>', response_text, re.DOTALL)
                if match:
                    suggestion = match.group(1).strip()
                    logger.debug("Generated suggestion (%d chars)", len(suggestion))
                    return suggestion
                logger.debug("No <commit-message> tags found in response")

            logger.warning("No valid commit message in Claude response")
        except CLINotFoundError as e:
            logger.error("Claude Code CLI not found: %s", e)
        except CLIConnectionError as e:
            logger.error("Cannot connect to Claude Code: %s", e)
        except CLIJSONDecodeError as e:
            logger.debug("Claude SDK JSON decode error: %s", e)
        except ProcessError as e:
            logger.error("Claude Code process error: %s", e)
        except ClaudeSDKError as e:
            logger.error("Claude SDK error: %s", e)

        return self._create_fallback_message(subjects)

    def _build_context(self, subjects: List[str], diff_stats: str, diff_content: Optional[str]) -> str:
        """Build context string for the prompt."""
        lines = [
            f"Commits being squashed: {len(subjects)}",
            "",
            "Original commit messages (newest first):"
        ]
        for subject in subjects[:20]:
            lines.append(f"- {subject}")
        if len(subjects) > 20:
            lines.append(f"... and {len(subjects) - 20} more")
        lines.append("")

        if diff_stats:
            lines.extend(["File changes:", diff_stats, ""])

        if diff_content:
            max_chars = self.config.max_diff_chars
            lines.append("Code changes (diff):")
            lines.append("---")
            if len(diff_content) > max_chars:
                lines.append(diff_content[:max_chars] + "\n... (diff truncated for length)")
            else:
                lines.append(diff_content)
            lines.append("---")

        return '\n'.join(lines)

    def _create_fallback_message(self, subjects: List[str]) -> str:
        """Create a basic message when Claude gives no usable answer."""
        subject = f"Squash {len(subjects)} commits"
        body = [f"- {s}" for s in reversed(subjects)]
        if not body:
            return subject
        return subject + "\n\n" + "\n".join(body)
