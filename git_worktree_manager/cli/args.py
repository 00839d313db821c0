"""Command-line argument parsing for git-worktree-manager."""

import argparse
from git_worktree_manager.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="git-worktree-manager",
        description="List git worktrees and share IDE configuration between them",
        epilog="The open command defaults to 'idea' and can be set with "
        "GIT_WORKTREE_MANAGER_OPEN_COMMAND or --open-command.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-worktree-manager {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "-C",
        "--repo",
        default=".",
        metavar="PATH",
        help="Run as if started in PATH (default: current directory)",
    )
    parser.add_argument(
        "--open-command",
        metavar="CMD",
        help="Command used to open a worktree, e.g. 'idea' or 'pycharm --wait'",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    list_parser = subparsers.add_parser("list", help="List worktrees of the repository")
    list_parser.add_argument("--legend", action="store_true", help="Explain the flag symbols")

    sync_parser = subparsers.add_parser(
        "sync", help="Share .idea configuration into a worktree"
    )
    sync_parser.add_argument(
        "target", nargs="?", help="Worktree name or path to share configuration into"
    )
    sync_parser.add_argument(
        "--source",
        metavar="WORKTREE",
        help="Worktree name or path to share configuration from (default: current worktree)",
    )
    sync_parser.add_argument(
        "--all", action="store_true", help="Share configuration into every other worktree"
    )
    sync_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview mode - show what would be linked without changing anything",
    )
    sync_parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of parallel workers for --all (default: auto-detect)",
    )
    sync_parser.add_argument(
        "--sequential",
        action="store_true",
        help="Sync worktrees one at a time with --all",
    )

    open_parser = subparsers.add_parser(
        "open", help="Share configuration into a worktree and open it in the IDE"
    )
    open_parser.add_argument("target", help="Worktree name or path to open")

    subparsers.add_parser("tui", help="Launch the interactive worktree browser")

    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "sync" and not args.all and not args.target:
        parser.error("sync needs a TARGET or --all")
    if args.command == "sync" and args.all and args.target:
        parser.error("sync takes either a TARGET or --all, not both")
    return args
