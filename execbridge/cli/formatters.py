"""Rich formatters for CLI output."""

import json
from typing import Any

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from execbridge.core.command import ResolvedCommand
from execbridge.core.executor import ExecutionResult
from execbridge.core.plugin import PluginCoordinates, render_plugin_xml, to_configuration

OUTPUT_FORMATS = ("rich", "json", "xml")


def format_configuration_table(resolved: ResolvedCommand, console: Console) -> None:
    """Display the exec configuration of a resolved command in a Rich table.

    Args:
        resolved: Resolved command
        console: Rich console instance
    """
    table = Table(title=f"Exec configuration ({resolved.os_family.value})")
    table.add_column("Element", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in to_configuration(resolved).items():
        if isinstance(value, list):
            if not value:
                table.add_row(key, Text("(none)", style="dim"))
                continue
            value = "\n".join(str(item) for item in value)
        # Arguments may contain brackets, never parse them as markup
        table.add_row(key, Text(str(value)))

    console.print(table)


def format_execution_result(result: ExecutionResult, console: Console) -> None:
    """Display a finished process in a Rich panel."""
    body = f"Command: {' '.join(result.command)}\nExit code: {result.return_code}"
    if result.stdout.strip():
        body += f"\n\n{result.stdout.rstrip()}"
    console.print(Panel(Text(body), title="[green]Success[/green]"))


def _json_payload(resolved: ResolvedCommand, result: ExecutionResult | None) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "os_family": resolved.os_family.value,
        "configuration": to_configuration(resolved),
    }
    if result is not None:
        payload["return_code"] = result.return_code
        payload["stdout"] = result.stdout
        payload["stderr"] = result.stderr
    return payload


def output_resolved(
    resolved: ResolvedCommand,
    output_format: str,
    console: Console,
    coordinates: PluginCoordinates | None = None,
    result: ExecutionResult | None = None,
) -> None:
    """
    Print a resolved command (and its execution result, if any).

    JSON and XML go through ``typer.echo`` so they are never wrapped.
    """
    if output_format == "json":
        typer.echo(json.dumps(_json_payload(resolved, result), indent=2))
    elif output_format == "xml":
        typer.echo(render_plugin_xml(resolved, coordinates))
        if result is not None and result.stdout:
            typer.echo(result.stdout, nl=False)
    else:
        format_configuration_table(resolved, console)
        if result is not None:
            format_execution_result(result, console)


__all__ = [
    "OUTPUT_FORMATS",
    "format_configuration_table",
    "format_execution_result",
    "output_resolved",
]
