"""
Single-shot execution of a resolved command.

Runs the process to completion, captures its output and checks the exit
code against the accepted success codes. Failures propagate unchanged as
BuildFailedError.
"""

import asyncio
import subprocess
from dataclasses import dataclass

from execbridge.core.command import ResolvedCommand
from execbridge.core.errors import BuildFailedError, ExecBridgeError, ExecutableNotFoundError
from execbridge.lib.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ExecutionResult:
    """Outcome of a finished process."""

    return_code: int
    stdout: str
    stderr: str
    command: list[str]


async def run_command(resolved: ResolvedCommand, timeout: int | None = None) -> ExecutionResult:
    """
    Execute a resolved command and wait for it to exit.

    Args:
        resolved: Command to execute
        timeout: Seconds to wait before killing the process (None waits forever)

    Returns:
        ExecutionResult when the exit code is accepted

    Raises:
        ExecutableNotFoundError: The executable could not be started
        BuildFailedError: The exit code is not in the accepted success codes
        ExecBridgeError: The process could not be started (EXEC_ERROR) or did
            not finish within the timeout (TIMEOUT)
    """
    cmd = resolved.argv
    logger.info(
        "command_started",
        command=cmd,
        working_directory=resolved.working_directory,
    )

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=resolved.working_directory,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        cwd = resolved.working_directory
        if isinstance(e, FileNotFoundError) and (cwd is None or e.filename != cwd):
            logger.error("executable_not_found", executable=resolved.shell_executable)
            raise ExecutableNotFoundError(resolved.shell_executable) from None

        # chdir failures report the working directory as the filename
        if cwd is not None and e.filename == cwd:
            message = f"Cannot use working directory {cwd}: {e.strerror}"
        else:
            message = f"Cannot start {resolved.shell_executable}: {e.strerror or e}"
        logger.error("command_start_failed", command=cmd, working_directory=cwd, error=str(e))
        raise ExecBridgeError(
            message=message,
            error_code="EXEC_ERROR",
            context={"command": cmd, "working_directory": cwd},
        ) from None

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        logger.error("command_timed_out", command=cmd, timeout=timeout)
        raise ExecBridgeError(
            message=f"Command timed out after {timeout} seconds",
            error_code="TIMEOUT",
            context={"command": cmd, "timeout": timeout},
        ) from None

    result = ExecutionResult(
        return_code=process.returncode if process.returncode is not None else -1,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
        command=cmd,
    )

    accepted = resolved.accepted_codes
    if result.return_code not in accepted:
        logger.error(
            "command_failed",
            command=cmd,
            return_code=result.return_code,
            success_codes=list(accepted),
        )
        raise BuildFailedError(result.return_code, accepted, command=cmd, stderr=result.stderr)

    logger.info("command_finished", command=cmd, return_code=result.return_code)
    return result


__all__ = ["ExecutionResult", "run_command"]
