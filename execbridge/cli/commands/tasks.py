"""
CLI commands for Node build tasks.

Provides 'execbridge task grunt|npm|bower'.
"""

import typer
from rich.console import Console

from execbridge.cli.utils.dispatch import build_task_or_exit, dispatch_task, load_settings_or_exit
from execbridge.lib.logging import get_logger
from execbridge.tasks.models import BowerTask, GruntTask, NpmTask

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="task",
    help="Build the exec configuration for a Node build task",
    no_args_is_help=True,
)

OS_NAME_HELP = "OS name to build for (defaults to the host; matched on 'windows')"
OPTION_HELP = "Extra option passed to the tool, e.g. '--gruntfile Gruntfile.js' (repeatable)"
COLORS_HELP = "Keep or strip colored output (defaults to SHOW_COLORS)"


@app.command("grunt")
def grunt(
    target: str = typer.Argument(
        None,
        help="Grunt target to run (default target when omitted)",
    ),
    options: list[str] = typer.Option(None, "--option", "-o", help=OPTION_HELP),
    executable: str = typer.Option(None, "--executable", "-e", help="Grunt executable"),
    show_colors: bool | None = typer.Option(None, "--show-colors/--no-show-colors", help=COLORS_HELP),
    ignore_tasks_errors: bool = typer.Option(
        False,
        "--ignore-tasks-errors",
        help="Accept Grunt task-error and warning exit codes",
    ),
    success_codes: list[int] = typer.Option(
        None, "--success-code", "-s", help="Accepted exit code (repeatable)"
    ),
    os_name: str = typer.Option(None, "--os-name", help=OS_NAME_HELP),
    working_dir: str = typer.Option(None, "--working-dir", "-w", help="Working directory"),
    output_format: str = typer.Option("rich", "--format", "-f", help="Output format (rich, json, xml)"),
    run: bool = typer.Option(False, "--run", "-r", help="Execute the command after resolving it"),
) -> None:
    """Run a Grunt target."""
    settings = load_settings_or_exit(console)
    logger.info("grunt_command", target=target, run=run)

    task = build_task_or_exit(
        GruntTask,
        console,
        target=target,
        options=options or [],
        executable=executable or settings.grunt_executable,
        show_colors=settings.show_colors if show_colors is None else show_colors,
        ignore_tasks_errors=ignore_tasks_errors,
        success_codes=success_codes or None,
    )
    dispatch_task(task, console, os_name, working_dir, output_format, run)


@app.command("npm")
def npm(
    command: str = typer.Argument("install", help="npm command to run"),
    options: list[str] = typer.Option(None, "--option", "-o", help=OPTION_HELP),
    executable: str = typer.Option(None, "--executable", "-e", help="npm executable"),
    show_colors: bool | None = typer.Option(None, "--show-colors/--no-show-colors", help=COLORS_HELP),
    success_codes: list[int] = typer.Option(
        None, "--success-code", "-s", help="Accepted exit code (repeatable)"
    ),
    os_name: str = typer.Option(None, "--os-name", help=OS_NAME_HELP),
    working_dir: str = typer.Option(None, "--working-dir", "-w", help="Working directory"),
    output_format: str = typer.Option("rich", "--format", "-f", help="Output format (rich, json, xml)"),
    run: bool = typer.Option(False, "--run", "-r", help="Execute the command after resolving it"),
) -> None:
    """Run an npm command (install by default)."""
    settings = load_settings_or_exit(console)
    logger.info("npm_command", command=command, run=run)

    task = build_task_or_exit(
        NpmTask,
        console,
        command=command,
        options=options or [],
        executable=executable or settings.npm_executable,
        show_colors=settings.show_colors if show_colors is None else show_colors,
        success_codes=success_codes or None,
    )
    dispatch_task(task, console, os_name, working_dir, output_format, run)


@app.command("bower")
def bower(
    command: str = typer.Argument("install", help="Bower command to run"),
    options: list[str] = typer.Option(None, "--option", "-o", help=OPTION_HELP),
    executable: str = typer.Option(None, "--executable", "-e", help="Bower executable"),
    show_colors: bool | None = typer.Option(None, "--show-colors/--no-show-colors", help=COLORS_HELP),
    success_codes: list[int] = typer.Option(
        None, "--success-code", "-s", help="Accepted exit code (repeatable)"
    ),
    os_name: str = typer.Option(None, "--os-name", help=OS_NAME_HELP),
    working_dir: str = typer.Option(None, "--working-dir", "-w", help="Working directory"),
    output_format: str = typer.Option("rich", "--format", "-f", help="Output format (rich, json, xml)"),
    run: bool = typer.Option(False, "--run", "-r", help="Execute the command after resolving it"),
) -> None:
    """Run a Bower command (install by default)."""
    settings = load_settings_or_exit(console)
    logger.info("bower_command", command=command, run=run)

    task = build_task_or_exit(
        BowerTask,
        console,
        command=command,
        options=options or [],
        executable=executable or settings.bower_executable,
        show_colors=settings.show_colors if show_colors is None else show_colors,
        success_codes=success_codes or None,
    )
    dispatch_task(task, console, os_name, working_dir, output_format, run)
