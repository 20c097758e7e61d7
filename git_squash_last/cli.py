"""Command line interface for the squash tool."""

from typing import List, Optional
import argparse
import asyncio
import logging
import os
import sys

from .core.config import SquashConfig
from .core.formatter import CommitFormatter
from .core.types import (
    EntryKind, MenuEntry, SquashPlan,
    SquashError, MessageValidationError
)
from .git.operations import GitOperations
from .ai.claude import ClaudeSuggester
from .ai.mock import MockSuggester
from .tool import SquashTool

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    # Interactive tool: keep INFO chatter out of the prompt unless asked for
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Reduce noise from external libraries
    logging.getLogger('asyncio').setLevel(logging.WARNING)


def positive_int(value: str) -> int:
    """argparse type for the commit count."""
    try:
        amount = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if amount < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {amount}")
    return amount


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='git-squash-last',
        description='Squash the last N commits into one, picking or writing the message',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s 3                    # Squash the last 3 commits
  %(prog)s 5 --dry-run          # Pick a message but leave history alone
  %(prog)s 4 --backup           # Keep the old HEAD on backup/pre-squash
  %(prog)s 4 --suggest          # Offer a message drafted by Claude
  %(prog)s 4 --test-mode        # Offer an offline drafted message

Environment Variables:
  ANTHROPIC_API_KEY         Required for --suggest
  GIT_SQUASH_LAST_VERBOSE   Set to enable debug logging
        """
    )

    parser.add_argument(
        'amount',
        type=positive_int,
        help='Number of commits to squash',
        metavar='AMOUNT'
    )

    parser.add_argument(
        '--message-limit',
        type=int,
        default=80,
        help='Maximum length of a typed commit message (default: %(default)s)',
        metavar='CHARS'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Choose a message but do not reset or commit'
    )

    parser.add_argument(
        '--backup',
        action='store_true',
        help='Create a backup branch at the current HEAD before squashing'
    )

    # Message suggestion
    ai_group = parser.add_mutually_exclusive_group()
    ai_group.add_argument(
        '--suggest',
        action='store_true',
        help='Add a menu entry that drafts a message with Claude'
    )

    ai_group.add_argument(
        '--test-mode',
        action='store_true',
        help='Add a menu entry that drafts a message offline (no API key required)'
    )

    parser.add_argument(
        '--model',
        default=SquashConfig.model,
        help='Claude model used by --suggest (default: %(default)s)',
        metavar='MODEL'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def validate_environment(use_claude: bool) -> None:
    """Validate required environment variables."""
    if use_claude and not os.environ.get('ANTHROPIC_API_KEY'):
        print("Error: ANTHROPIC_API_KEY environment variable not set", file=sys.stderr)
        print("Either set the API key or use --test-mode instead of --suggest", file=sys.stderr)
        sys.exit(1)


def create_suggester(args, config: SquashConfig):
    """Create the message suggester requested on the command line, if any."""
    if args.test_mode:
        logger.info("Using mock suggester")
        return MockSuggester(config)
    if args.suggest:
        logger.info("Using Claude suggester")
        return ClaudeSuggester(config=config)
    return None


def display_menu(menu: List[MenuEntry]) -> None:
    """Print the numbered message menu."""
    print("\nSelect a commit message")
    for index, entry in enumerate(menu):
        print(f"  [{index}] {entry.label}")


def select_entry(menu: List[MenuEntry]) -> int:
    """Ask for a menu index; Enter picks the first entry."""
    display_menu(menu)
    last = len(menu) - 1
    while True:
        response = input(f"\nSelection [0-{last}, default 0]: ").strip()
        if not response:
            return 0
        try:
            index = int(response)
        except ValueError:
            index = -1
        if response.isascii() and 0 <= index <= last:
            return index
        print(f"Please enter a number between 0 and {last}")


def prompt_for_message(formatter: CommitFormatter) -> str:
    """Ask for a custom commit message until it passes validation."""
    while True:
        response = input("Message: ")
        try:
            return formatter.validate_message(response)
        except MessageValidationError as e:
            print(str(e))


def confirm(question: str) -> bool:
    """Ask a yes/no question."""
    while True:
        response = input(f"\n{question} (y/n): ").lower().strip()
        if response in ('y', 'yes'):
            return True
        elif response in ('n', 'no'):
            return False
        else:
            print("Please enter 'y' or 'n'")


def choose_message(tool: SquashTool, plan: SquashPlan, menu: List[MenuEntry]) -> str:
    """Run the selection flow and return the message for the squashed commit."""
    entry = tool.resolve_selection(menu, select_entry(menu))

    if entry.kind is EntryKind.COMMIT:
        return entry.commit.message

    if entry.kind is EntryKind.SUGGEST:
        print("\nDrafting a message...")
        # Only the suggestion needs an event loop; prompts stay outside it so Ctrl-C reaches input()
        suggestion = asyncio.run(tool.suggest_message(plan))
        print("-" * 40)
        print(suggestion)
        print("-" * 40)
        if confirm("Use this message?"):
            return suggestion

    return prompt_for_message(tool.formatter)


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_argument_parser()
    parsed_args = parser.parse_args(args)

    env_verbose = bool(os.environ.get('GIT_SQUASH_LAST_VERBOSE', ""))
    setup_logging(parsed_args.verbose or env_verbose)

    try:
        validate_environment(parsed_args.suggest)

        config = SquashConfig.from_cli_args(parsed_args)
        logger.debug("Configuration: %s", config)

        git_ops = GitOperations(config=config)
        suggester = create_suggester(parsed_args, config)
        tool = SquashTool(git_ops, config, suggester)

        plan = tool.prepare_squash_plan(parsed_args.amount)
        menu = tool.build_menu(plan)
        message = choose_message(tool, plan, menu)

        if parsed_args.dry_run:
            print(f"\nWould squash: {plan.summary_stats()}")
            print("Message:")
            print(message)
            print("\nDry run complete. Run without --dry-run to apply changes.")
            return 0

        tool.execute_squash(plan, message, backup=parsed_args.backup)
        if parsed_args.backup:
            print(f"Previous HEAD saved on {config.backup_branch_name}")

        print(f"Squashed {plan.amount} commits")
        return 0

    except SquashError as e:
        logger.debug("Squash error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted by user.", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
