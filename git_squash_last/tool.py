"""Main squash tool implementation."""

import logging
from typing import List, Optional
from .core.config import SquashConfig
from .core.types import (
    EntryKind, MenuEntry, SquashPlan,
    GitOperationError, InvalidAmountError, InvalidSelectionError, NotEnoughCommitsError
)
from .core.formatter import CommitFormatter
from .git.operations import GitOperations
from .ai.interface import MessageSuggester

logger = logging.getLogger(__name__)

CUSTOM_ENTRY_LABEL = "➜ [Enter] Custom commit message"
SUGGEST_ENTRY_LABEL = "✨ Suggest a commit message"


class SquashTool:
    """Squashes the last N commits of the current branch into one."""

    def __init__(self,
                 git_ops: GitOperations,
                 config: SquashConfig,
                 suggester: Optional[MessageSuggester] = None):
        self.git_ops = git_ops
        self.config = config
        self.suggester = suggester
        self.formatter = CommitFormatter(config)

    def prepare_squash_plan(self, amount: int) -> SquashPlan:
        """Collect the commits to squash and the commit to reset to."""
        logger.info("Preparing squash plan for %d commits", amount)

        if amount < 1:
            raise InvalidAmountError(f"Number of commits must be at least 1, got {amount}")

        base_hash = self.git_ops.find_base_commit(amount)
        commits = self.git_ops.get_recent_commits(amount)
        if len(commits) != amount:
            raise NotEnoughCommitsError(
                f"Expected {amount} commits, git listed {len(commits)}")

        plan = SquashPlan(
            amount=amount,
            commits=commits,
            base_hash=base_hash,
            head_hash=self.git_ops.get_head()
        )
        logger.info("Plan complete: %s", plan.summary_stats())
        return plan

    def build_menu(self, plan: SquashPlan, now: Optional[int] = None) -> List[MenuEntry]:
        """Build the message menu: custom entry, optional suggestion, then one entry per commit."""
        entries = [MenuEntry(CUSTOM_ENTRY_LABEL, EntryKind.CUSTOM)]
        if self.suggester is not None:
            entries.append(MenuEntry(SUGGEST_ENTRY_LABEL, EntryKind.SUGGEST))
        for commit in plan.commits:
            entries.append(MenuEntry(
                self.formatter.format_commit(commit, now), EntryKind.COMMIT, commit))
        return entries

    def resolve_selection(self, menu: List[MenuEntry], index: int) -> MenuEntry:
        """Return the menu entry at index."""
        if index < 0 or index >= len(menu):
            raise InvalidSelectionError(
                f"Invalid selection {index}, expected 0 to {len(menu) - 1}")
        entry = menu[index]
        logger.debug("Selected entry %d (%s)", index, entry.kind.value)
        return entry

    async def suggest_message(self, plan: SquashPlan) -> str:
        """Ask the suggester for a message describing the squashed range."""
        if self.suggester is None:
            raise InvalidSelectionError("No message suggester configured")

        diff_stats = self.git_ops.get_diff_stats(plan.base_hash, plan.head_hash)
        diff_content = self.git_ops.get_diff(plan.base_hash, plan.head_hash)
        suggestion = await self.suggester.suggest_message(
            plan.subjects, diff_stats, diff_content)
        return self.formatter.clip_subject(suggestion)

    def execute_squash(self, plan: SquashPlan, message: str, backup: bool = False) -> str:
        """Soft-reset to the base commit and commit the index with message."""
        logger.info("Squashing %d commits onto %s", plan.amount, plan.base_hash[:8])

        if self.git_ops.has_staged_changes():
            logger.warning("Index has staged changes; they will be part of the squashed commit")

        if backup:
            backup_branch = self.git_ops.create_backup_branch()
            logger.info("Created backup: %s", backup_branch)

        self.git_ops.soft_reset(plan.base_hash)
        try:
            new_hash = self.git_ops.commit(message)
        except GitOperationError:
            logger.error("Commit failed, restoring branch to %s", plan.head_hash[:8])
            self.git_ops.soft_reset(plan.head_hash)
            raise

        logger.info("Squash complete: %s", new_hash[:8])
        return new_hash
