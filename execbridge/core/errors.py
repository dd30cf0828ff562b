"""Exception hierarchy for command building and execution."""

from typing import Any


class ExecBridgeError(Exception):
    """Base exception for execbridge errors with context."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        """
        Initialize execbridge error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "INTERNAL_ERROR"
        self.context = context or {}


class InvalidCommandError(ExecBridgeError, ValueError):
    """Raised when a command is malformed (missing executable, bad arguments)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, error_code="INVALID_COMMAND", context=ctx)


class ExecutableNotFoundError(ExecBridgeError):
    """Raised when the resolved executable cannot be started."""

    def __init__(self, executable: str):
        super().__init__(
            message=f"Executable not found: {executable}",
            error_code="EXECUTABLE_NOT_FOUND",
            context={"executable": executable},
        )
        self.executable = executable


class BuildFailedError(ExecBridgeError):
    """Raised when a process exits with a code outside its accepted success codes."""

    def __init__(
        self,
        return_code: int,
        success_codes: tuple[int, ...],
        command: list[str] | None = None,
        stderr: str = "",
    ):
        accepted = ", ".join(str(code) for code in success_codes)
        super().__init__(
            message=f"Command exited with code {return_code} (accepted: {accepted})",
            error_code="BUILD_FAILED",
            context={
                "return_code": return_code,
                "success_codes": list(success_codes),
                "command": command or [],
            },
        )
        self.return_code = return_code
        self.success_codes = success_codes
        self.stderr = stderr


__all__ = [
    "ExecBridgeError",
    "InvalidCommandError",
    "ExecutableNotFoundError",
    "BuildFailedError",
]
