"""Git operations for the squash tool."""

import subprocess
import logging
from typing import List, Optional
from ..core.types import CommitInfo, GitOperationError, NotEnoughCommitsError
from ..core.config import SquashConfig

logger = logging.getLogger(__name__)

# ASCII unit/record separators, very unlikely to appear in commit messages
FIELD_SEP = "\x1F"
RECORD_SEP = "\x1E"


class GitOperations:
    """Handles all git operations for the squash tool."""

    def __init__(self, config: Optional[SquashConfig] = None):
        self.config = config or SquashConfig()
        self._validate_git_repository()

    def _run_git_command(self, cmd: List[str], check: bool = True,
                         input: Optional[str] = None) -> subprocess.CompletedProcess:
        """Run a git command and return the result."""
        full_cmd = ["git"] + cmd
        logger.debug("Running git command: %s", " ".join(full_cmd))

        try:
            result = subprocess.run(
                full_cmd,
                capture_output=True,
                text=True,
                check=check,
                input=input
            )
            return result
        except subprocess.CalledProcessError as e:
            logger.debug("Git command failed: %s\nStderr: %s", " ".join(full_cmd), e.stderr)
            detail = (e.stderr or "").strip() or (e.stdout or "").strip() or f"exit status {e.returncode}"
            raise GitOperationError(f"Git command failed: {detail}")
        except FileNotFoundError:
            raise GitOperationError("git executable not found in PATH")

    def _validate_git_repository(self) -> None:
        """Validate that we're in a git repository."""
        try:
            result = self._run_git_command(["rev-parse", "--git-dir"], check=True)
            logger.debug("Git repository found at: %s", result.stdout.strip())
        except GitOperationError:
            raise GitOperationError(
                "Not in a git repository. Please run this command from within a git repository."
            )

    def get_recent_commits(self, amount: int) -> List[CommitInfo]:
        """Get the last `amount` commits reachable from HEAD, newest first."""
        logger.info("Fetching last %d commits", amount)

        fmt = FIELD_SEP.join(["%H", "%ct", "%an", "%ae", "%s", "%B"]) + RECORD_SEP
        cmd = ["log", "--topo-order", f"--max-count={amount}", f"--pretty=format:{fmt}", "HEAD"]
        result = self._run_git_command(cmd)

        commits = []
        for record in result.stdout.split(RECORD_SEP):
            record = record.lstrip('\n')
            if not record:
                continue

            parts = record.split(FIELD_SEP, 5)
            if len(parts) != 6:
                logger.warning("Skipping malformed commit record: %r", record[:80])
                continue

            hash_id, timestamp, author_name, author_email, subject, message = parts
            try:
                commit_time = int(timestamp)
            except ValueError:
                logger.warning("Bad timestamp '%s' for commit %s", timestamp, hash_id[:8])
                commit_time = 0

            commits.append(CommitInfo(
                hash=hash_id,
                subject=subject,
                message=message.rstrip('\n'),
                author_name=author_name,
                author_email=author_email,
                timestamp=commit_time
            ))

        logger.debug("Parsed %d commits", len(commits))
        return commits

    def find_base_commit(self, amount: int) -> str:
        """Find the commit the branch is reset to when squashing `amount` commits.

        This is the (amount + 1)-th commit of a topological walk from HEAD.
        """
        result = self._run_git_command(
            ["rev-list", "--topo-order", f"--max-count={amount + 1}", "HEAD"])
        hashes = result.stdout.split()
        if len(hashes) <= amount:
            raise NotEnoughCommitsError(
                f"Not enough commits to squash {amount}: history has only {len(hashes)}")
        return hashes[-1]

    def get_head(self) -> str:
        """Get the hash HEAD points to."""
        result = self._run_git_command(["rev-parse", "HEAD"])
        return result.stdout.strip()

    def has_staged_changes(self) -> bool:
        """Check whether the index differs from HEAD."""
        result = self._run_git_command(["diff", "--cached", "--quiet"], check=False)
        return result.returncode != 0

    def get_diff_stats(self, base: str, end: str = "HEAD") -> str:
        """Get diff statistics between two commits."""
        logger.debug("Getting diff stats from %s to %s", base[:8], end)
        result = self._run_git_command(["diff", "--stat", base, end])
        return result.stdout

    def get_diff(self, base: str, end: str = "HEAD") -> str:
        """Get diff between two commits."""
        logger.debug("Getting diff from %s to %s", base[:8], end)
        result = self._run_git_command(["diff", base, end])
        return result.stdout

    def create_backup_branch(self, backup_name: Optional[str] = None) -> str:
        """Create a backup branch pointing to current HEAD."""
        if backup_name is None:
            backup_name = self.config.backup_branch_name

        logger.info("Creating backup branch: %s", backup_name)
        self._run_git_command(["branch", "-f", backup_name, "HEAD"])
        return backup_name

    def soft_reset(self, commit_hash: str) -> None:
        """Move the current branch to commit_hash, keeping index and working tree."""
        logger.info("Resetting to commit %s (--soft)", commit_hash[:8])
        self._run_git_command(["reset", "--soft", commit_hash])

    def commit(self, message: str) -> str:
        """Commit the current index with message and return the new HEAD."""
        logger.debug("Creating commit (%d chars)", len(message))
        self._run_git_command(["commit", "--allow-empty", "--allow-empty-message", "--file=-"], input=message)
        return self.get_head()
