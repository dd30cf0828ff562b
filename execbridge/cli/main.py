"""Typer CLI application for execbridge."""

import typer
from rich.console import Console

from execbridge import __version__
from execbridge.cli.commands.tasks import app as tasks_app
from execbridge.cli.utils.dispatch import build_task_or_exit, dispatch_task
from execbridge.core.normalize import DEFAULT_REPLACEMENT, normalize_argument
from execbridge.lib.logging import get_logger
from execbridge.tasks.models import ExecTask

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="execbridge",
    help="Build cross-platform exec configurations for external build commands",
    no_args_is_help=True,
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"execbridge version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """execbridge CLI - cross-platform exec configuration builder."""
    pass


@app.command("exec")
def exec_command(
    executable: str = typer.Argument(..., help="Executable to run"),
    arguments: list[str] = typer.Argument(
        None,
        help="Arguments for the executable; put them after '--'",
    ),
    success_codes: list[int] = typer.Option(
        None, "--success-code", "-s", help="Accepted exit code (repeatable)"
    ),
    no_normalize: bool = typer.Option(
        False,
        "--no-normalize",
        help="Pass arguments through without rewriting '--option value'",
    ),
    os_name: str = typer.Option(
        None,
        "--os-name",
        help="OS name to build for (defaults to the host; matched on 'windows')",
    ),
    working_dir: str = typer.Option(None, "--working-dir", "-w", help="Working directory"),
    output_format: str = typer.Option("rich", "--format", "-f", help="Output format (rich, json, xml)"),
    run: bool = typer.Option(False, "--run", "-r", help="Execute the command after resolving it"),
) -> None:
    """Build the exec configuration for an arbitrary executable."""
    logger.info("exec_command", executable=executable, run=run)

    task = build_task_or_exit(
        ExecTask,
        console,
        executable=executable,
        options=arguments or [],
        normalize=not no_normalize,
        success_codes=success_codes or None,
    )
    dispatch_task(task, console, os_name, working_dir, output_format, run)


@app.command("normalize")
def normalize(
    arguments: list[str] = typer.Argument(..., help="Arguments to normalize; put them after '--'"),
    replacement: str = typer.Option(
        DEFAULT_REPLACEMENT,
        "--replacement",
        "-R",
        help="Text that replaces the whitespace after an option name",
    ),
) -> None:
    """Print each argument with '--option value' rewritten to '--option=value'."""
    for argument in arguments:
        typer.echo(normalize_argument(argument, replacement))


app.add_typer(tasks_app, name="task")

if __name__ == "__main__":
    app()
