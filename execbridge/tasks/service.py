"""Resolution and execution of declared tasks."""

from execbridge.core.builder import CommandLineBuilder
from execbridge.core.command import ResolvedCommand
from execbridge.core.executor import ExecutionResult, run_command
from execbridge.core.normalize import DEFAULT_REPLACEMENT
from execbridge.core.os_family import detect_os_family
from execbridge.lib.logging import get_logger
from execbridge.tasks.models import BowerTask, ExecTask, GruntTask, NpmTask

logger = get_logger(__name__)

AnyTask = GruntTask | NpmTask | BowerTask | ExecTask


def resolve_task(
    task: AnyTask,
    os_name: str,
    working_directory: str | None = None,
    replacement: str = DEFAULT_REPLACEMENT,
) -> ResolvedCommand:
    """
    Turn a task into the command the exec mechanism runs.

    Args:
        task: Declared task
        os_name: Reported OS name of the build host
        working_directory: Directory the process runs in
        replacement: Separator used when normalizing whitespaced options

    Returns:
        ResolvedCommand for the host's OS family
    """
    os_family = detect_os_family(os_name)
    logger.info("os_family_detected", os_name=os_name, os_family=os_family.value, task=task.kind)

    spec = task.command_spec(os_family, replacement)
    return CommandLineBuilder().build(spec, working_directory)


async def run_task(
    task: AnyTask,
    os_name: str,
    working_directory: str | None = None,
    replacement: str = DEFAULT_REPLACEMENT,
    timeout: int | None = None,
) -> ExecutionResult:
    """Resolve a task and execute it once."""
    resolved = resolve_task(task, os_name, working_directory, replacement)
    return await run_command(resolved, timeout=timeout)


__all__ = ["AnyTask", "resolve_task", "run_task"]
