"""
Cross-platform command-line construction.

Commands run through ``cmd /C`` on Windows so that batch wrappers such as
``grunt.cmd`` or ``npm.cmd`` resolve; on POSIX the executable is invoked
directly.
"""

from execbridge.core.command import CommandSpec, ResolvedCommand
from execbridge.core.os_family import OSFamily
from execbridge.lib.logging import get_logger

logger = get_logger(__name__)

WINDOWS_SHELL = "cmd"
WINDOWS_SHELL_RUN_FLAG = "/C"


class CommandLineBuilder:
    """Builds the OS-appropriate argument vector for a CommandSpec."""

    def build(self, spec: CommandSpec, working_directory: str | None = None) -> ResolvedCommand:
        """
        Resolve a command for its target OS family.

        Args:
            spec: Declared command
            working_directory: Directory the process runs in, passed through as-is

        Returns:
            ResolvedCommand with the shell executable, final arguments,
            working directory and non-empty success codes
        """
        if spec.os_family == OSFamily.WINDOWS:
            shell_executable, arguments = self._build_for_windows(spec)
        else:
            shell_executable, arguments = self._build_for_posix(spec)

        success_codes = spec.success_codes if spec.success_codes else None

        resolved = ResolvedCommand(
            shell_executable=shell_executable,
            final_arguments=arguments,
            working_directory=working_directory,
            success_codes=success_codes,
            os_family=spec.os_family,
        )
        logger.debug(
            "command_resolved",
            os_family=spec.os_family.value,
            executable=shell_executable,
            arguments=list(arguments),
            working_directory=working_directory,
            success_codes=list(success_codes) if success_codes else None,
        )
        return resolved

    @staticmethod
    def _build_for_posix(spec: CommandSpec) -> tuple[str, tuple[str, ...]]:
        return spec.executable, spec.raw_arguments

    @staticmethod
    def _build_for_windows(spec: CommandSpec) -> tuple[str, tuple[str, ...]]:
        return WINDOWS_SHELL, (WINDOWS_SHELL_RUN_FLAG, spec.executable, *spec.raw_arguments)


def build_command(spec: CommandSpec, working_directory: str | None = None) -> ResolvedCommand:
    """Resolve a command with a default builder."""
    return CommandLineBuilder().build(spec, working_directory)


__all__ = ["CommandLineBuilder", "build_command", "WINDOWS_SHELL", "WINDOWS_SHELL_RUN_FLAG"]
