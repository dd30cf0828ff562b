"""Shared resolve/print/run flow for CLI commands."""

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console

from execbridge.cli.exit_codes import ExitCode
from execbridge.cli.formatters import OUTPUT_FORMATS, output_resolved
from execbridge.core.errors import (
    BuildFailedError,
    ExecBridgeError,
    ExecutableNotFoundError,
    InvalidCommandError,
)
from execbridge.core.executor import run_command
from execbridge.core.plugin import PluginCoordinates
from execbridge.lib.config import Settings, get_settings
from execbridge.lib.logging import bind_context, clear_context, get_logger
from execbridge.tasks.service import AnyTask, resolve_task

logger = get_logger(__name__)


def check_output_format(output_format: str, console: Console) -> None:
    """Exit with INVALID_ARGS on an unknown output format."""
    if output_format not in OUTPUT_FORMATS:
        console.print(
            f"[red]Error:[/red] Unknown format '{output_format}' "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
        raise typer.Exit(ExitCode.INVALID_ARGS)


def load_settings_or_exit(console: Console) -> Settings:
    """Load settings, exiting with CONFIG_ERROR on invalid environment values."""
    try:
        return get_settings()
    except ValidationError as e:
        console.print("[red]Configuration error:[/red] invalid settings")
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            console.print(f"  - {location.upper()}: {error['msg']}", markup=False, highlight=False)
        raise typer.Exit(ExitCode.CONFIG_ERROR) from None


def dispatch_task(
    task: AnyTask,
    console: Console,
    os_name: str | None = None,
    working_dir: str | None = None,
    output_format: str = "rich",
    run: bool = False,
) -> None:
    """
    Resolve a task, print its exec configuration and optionally run it.

    CLI values override settings. Errors are reported and mapped to exit codes.
    """
    check_output_format(output_format, console)
    settings = load_settings_or_exit(console)

    os_name = os_name or settings.os_name
    working_dir = working_dir or settings.working_directory
    coordinates = PluginCoordinates(version=settings.exec_maven_plugin_version)

    bind_context(task=task.kind)
    try:
        resolved = resolve_task(task, os_name, working_dir, settings.whitespace_replacement)

        result = None
        if run:
            result = asyncio.run(run_command(resolved, timeout=settings.exec_timeout))

        output_resolved(resolved, output_format, console, coordinates, result)

    except InvalidCommandError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(ExitCode.INVALID_ARGS) from None
    except ExecutableNotFoundError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(ExitCode.EXECUTABLE_NOT_FOUND) from None
    except BuildFailedError as e:
        console.print(f"[red]Build failed:[/red] {e.message}")
        if e.stderr.strip():
            console.print(e.stderr.rstrip(), markup=False, highlight=False)
        raise typer.Exit(ExitCode.BUILD_FAILED) from None
    except ExecBridgeError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        logger.error("command_error", error_code=e.error_code, **e.context)
        code = ExitCode.TIMEOUT if e.error_code == "TIMEOUT" else ExitCode.ERROR
        raise typer.Exit(code) from None
    finally:
        clear_context()


def build_task_or_exit(factory: type[AnyTask], console: Console, **fields: object) -> AnyTask:
    """Validate task fields, exiting with INVALID_ARGS on bad input."""
    try:
        return factory(**fields)  # type: ignore[arg-type]
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid {factory.__name__} declaration")
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            console.print(f"  - {location}: {error['msg']}")
        raise typer.Exit(ExitCode.INVALID_ARGS) from None


__all__ = ["check_output_format", "load_settings_or_exit", "dispatch_task", "build_task_or_exit"]
