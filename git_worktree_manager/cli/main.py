"""Command-line interface for git-worktree-manager"""

import sys
from rich.console import Console

from git_worktree_manager.cli.args import parse_args
from git_worktree_manager.config import Config
from git_worktree_manager.core import WorktreeManager
from git_worktree_manager.exceptions import WorktreeManagerError
from git_worktree_manager.services.display_service import DisplayService
from git_worktree_manager.utils.logging import setup_logging
from git_worktree_manager.utils.threading import get_threading_info

console = Console()


def _build_config(parsed_args) -> Config:
    """Build config from environment and parsed arguments."""
    return Config.from_env(
        open_command=parsed_args.open_command,
        dry_run=getattr(parsed_args, "dry_run", None),
        verbose=parsed_args.verbose,
        debug=parsed_args.debug,
        workers=getattr(parsed_args, "workers", None),
        sequential=getattr(parsed_args, "sequential", None),
    )


def run_list(manager: WorktreeManager, display: DisplayService, parsed_args) -> int:
    worktrees = manager.list_worktrees()
    display.display_worktree_table(worktrees, show_legend=parsed_args.legend)
    return 0 if worktrees else 1


def run_sync(manager: WorktreeManager, display: DisplayService, parsed_args) -> int:
    if parsed_args.all:
        reports, errors = manager.sync_all(source=parsed_args.source)
        for path in sorted(reports):
            display.display_sync_report(reports[path], title=path)
        display.display_sync_errors(errors)
        failed = errors or any(report.failures() for report in reports.values())
        return 1 if failed else 0

    report = manager.sync(parsed_args.target, source=parsed_args.source)
    display.display_sync_report(report)
    return 1 if report.failures() else 0


def run_open(manager: WorktreeManager, display: DisplayService, parsed_args) -> int:
    report = manager.open(parsed_args.target)
    if report is not None:
        display.display_sync_report(report)
    console.print(f"[green]✓ Opening {parsed_args.target}[/green]")
    return 0


def run_tui(manager: WorktreeManager) -> int:
    from git_worktree_manager.tui import WorktreeManagerApp
    app = WorktreeManagerApp(manager)
    app.run()
    return 0


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        command = parsed_args.command
        if command is None:
            # Default to the browser in a terminal, a plain listing otherwise
            command = "tui" if sys.stdin.isatty() and sys.stdout.isatty() else "list"
            parsed_args.legend = False

        log_file = setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug, tui_mode=command == "tui")

        config = _build_config(parsed_args)

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            if log_file is not None:
                console.print(f"  log file: {log_file}")
            threading_info = get_threading_info()
            console.print("[yellow]Threading Information:[/yellow]")
            for key, value in threading_info.items():
                console.print(f"  {key}: {value}")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        manager = WorktreeManager(parsed_args.repo, config)
        display = DisplayService(console, verbose=parsed_args.verbose)

        if command == "list":
            return run_list(manager, display, parsed_args)
        if command == "sync":
            return run_sync(manager, display, parsed_args)
        if command == "open":
            return run_open(manager, display, parsed_args)
        return run_tui(manager)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except WorktreeManagerError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
