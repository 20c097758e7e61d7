"""Tests for the Claude suggester using claude-code-sdk."""
import pytest
from unittest.mock import Mock, patch
from claude_code_sdk import (
    AssistantMessage, TextBlock, ClaudeSDKError, CLINotFoundError
)

from git_squash_last.ai.claude import ClaudeSuggester
from git_squash_last.core.config import SquashConfig

SUBJECTS = ["Fix typo in parser", "Add parser tests", "Add config parser"]


def assistant_message(text: str) -> Mock:
    message = Mock(spec=AssistantMessage)
    message.content = [TextBlock(text=text)]
    return message


def fake_query(*messages, error: Exception = None, calls: list = None):
    """Build a stand-in for claude_code_sdk.query yielding messages."""
    async def _query(prompt, options):
        if calls is not None:
            calls.append((prompt, options))
        for message in messages:
            yield message
        if error is not None:
            raise error
    return _query


class TestClaudeSuggesterInitialization:
    """Test suggester initialization and configuration."""

    @patch.dict('os.environ', {'ANTHROPIC_API_KEY': 'test-key'})
    def test_init_with_env_api_key(self):
        suggester = ClaudeSuggester()
        assert suggester.api_key == 'test-key'

    def test_init_with_provided_api_key(self):
        suggester = ClaudeSuggester(api_key='provided-key')
        assert suggester.api_key == 'provided-key'

    @patch.dict('os.environ', {}, clear=True)
    def test_init_without_api_key_raises(self):
        with pytest.raises(ValueError, match="ANTHROPIC_API_KEY environment variable must be set"):
            ClaudeSuggester()

    def test_init_with_custom_config(self):
        config = SquashConfig(model="claude-3-opus-20240229", max_message_length=60)

        suggester = ClaudeSuggester(api_key='k', config=config)

        assert suggester.config.model == "claude-3-opus-20240229"
        assert suggester.config.max_message_length == 60


class TestClaudeSuggestion:
    """Test message suggestion."""

    def setup_method(self):
        self.suggester = ClaudeSuggester(api_key='test-key', config=SquashConfig())

    @pytest.mark.asyncio
    async def test_extracts_tagged_message(self):
        reply = assistant_message(
            "Here you go:\n<commit-message>\nAdd config parser\n\n- cover with tests\n</commit-message>")
        calls = []

        with patch('git_squash_last.ai.claude.query', fake_query(reply, calls=calls)):
            message = await self.suggester.suggest_message(SUBJECTS, " parser.py | 10 +")

        assert message == "Add config parser\n\n- cover with tests"
        prompt, options = calls[0]
        assert "Add parser tests" in prompt
        assert "parser.py | 10 +" in prompt
        assert options.max_turns == 1
        assert options.model == "claude-3-7-sonnet-20250219"

    @pytest.mark.asyncio
    async def test_skips_non_assistant_messages(self):
        other = Mock()
        reply = assistant_message("<commit-message>Add parser</commit-message>")

        with patch('git_squash_last.ai.claude.query', fake_query(other, reply)):
            message = await self.suggester.suggest_message(SUBJECTS)

        assert message == "Add parser"

    @pytest.mark.asyncio
    async def test_fallback_without_tags(self):
        reply = assistant_message("I think you should call it 'parser work'")

        with patch('git_squash_last.ai.claude.query', fake_query(reply)):
            message = await self.suggester.suggest_message(SUBJECTS)

        lines = message.split("\n")
        assert lines[0] == "Squash 3 commits"
        assert lines[2:] == ["- Add config parser", "- Add parser tests", "- Fix typo in parser"]

    @pytest.mark.asyncio
    async def test_fallback_on_cli_not_found(self):
        with patch('git_squash_last.ai.claude.query',
                   fake_query(error=CLINotFoundError("Claude Code not found"))):
            message = await self.suggester.suggest_message(SUBJECTS)

        assert message.startswith("Squash 3 commits")

    @pytest.mark.asyncio
    async def test_fallback_on_sdk_error(self):
        with patch('git_squash_last.ai.claude.query',
                   fake_query(error=ClaudeSDKError("boom"))):
            message = await self.suggester.suggest_message(SUBJECTS)

        assert message.startswith("Squash 3 commits")

    def test_context_truncates_diff(self):
        suggester = ClaudeSuggester(
            api_key='k', config=SquashConfig(max_diff_chars=10))

        context = suggester._build_context(SUBJECTS, "", "x" * 50)

        assert "x" * 10 + "\n... (diff truncated for length)" in context
        assert "x" * 11 not in context

    def test_context_limits_subjects(self):
        subjects = [f"Commit {n}" for n in range(25)]

        context = self.suggester._build_context(subjects, "", None)

        assert "- Commit 19" in context
        assert "- Commit 20" not in context
        assert "... and 5 more" in context


if __name__ == "__main__":
    pytest.main([__file__])
