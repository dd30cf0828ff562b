"""CLI exit codes for consistent error reporting.

| Code | Meaning                    | Recommended Action                         |
|------|----------------------------|--------------------------------------------|
| 0    | Success                    | -                                          |
| 1    | General error              | Check logs                                 |
| 2    | Invalid arguments          | Check command syntax                       |
| 3    | Executable not found       | Check the executable is installed/on PATH  |
| 8    | Timeout                    | Increase EXEC_TIMEOUT                      |
| 20   | Build failed               | Check the command output                   |
| 30   | Configuration error        | Check environment and .env values          |
"""


class ExitCode:
    """Standard exit codes for the execbridge CLI."""

    SUCCESS = 0
    """Command completed successfully."""

    ERROR = 1
    """General error occurred. Check logs for details."""

    INVALID_ARGS = 2
    """Invalid arguments provided. Check command syntax."""

    EXECUTABLE_NOT_FOUND = 3
    """The executable could not be started."""

    TIMEOUT = 8
    """Operation timed out."""

    BUILD_FAILED = 20
    """The executed command exited with an unaccepted code."""

    CONFIG_ERROR = 30
    """Configuration error."""


SUCCESS = ExitCode.SUCCESS
ERROR = ExitCode.ERROR
INVALID_ARGS = ExitCode.INVALID_ARGS
EXECUTABLE_NOT_FOUND = ExitCode.EXECUTABLE_NOT_FOUND
TIMEOUT = ExitCode.TIMEOUT
BUILD_FAILED = ExitCode.BUILD_FAILED
CONFIG_ERROR = ExitCode.CONFIG_ERROR


def get_exit_code_description(code: int) -> str:
    """
    Get a human-readable description for an exit code.

    Args:
        code: Exit code number

    Returns:
        Description string
    """
    descriptions = {
        0: "Success",
        1: "General error - check logs",
        2: "Invalid arguments - check command syntax",
        3: "Executable not found - check it is installed and on PATH",
        8: "Timeout - increase EXEC_TIMEOUT",
        20: "Build failed - check the command output",
        30: "Configuration error",
    }
    return descriptions.get(code, f"Unknown exit code: {code}")


__all__ = [
    "ExitCode",
    "SUCCESS",
    "ERROR",
    "INVALID_ARGS",
    "EXECUTABLE_NOT_FOUND",
    "TIMEOUT",
    "BUILD_FAILED",
    "CONFIG_ERROR",
    "get_exit_code_description",
]
