"""Command construction, rendering and execution."""

from execbridge.core.builder import CommandLineBuilder, build_command
from execbridge.core.command import CommandSpec, ResolvedCommand
from execbridge.core.errors import (
    BuildFailedError,
    ExecBridgeError,
    ExecutableNotFoundError,
    InvalidCommandError,
)
from execbridge.core.normalize import normalize_argument, normalize_arguments
from execbridge.core.os_family import OSFamily, detect_os_family

__all__ = [
    "CommandLineBuilder",
    "build_command",
    "CommandSpec",
    "ResolvedCommand",
    "OSFamily",
    "detect_os_family",
    "normalize_argument",
    "normalize_arguments",
    "ExecBridgeError",
    "InvalidCommandError",
    "ExecutableNotFoundError",
    "BuildFailedError",
]
