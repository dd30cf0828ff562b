"""Task types and their resolution into commands."""

from execbridge.tasks.models import (
    BowerTask,
    ExecTask,
    GruntTask,
    NpmTask,
    Task,
    parse_task,
)
from execbridge.tasks.service import AnyTask, resolve_task, run_task

__all__ = [
    "AnyTask",
    "BowerTask",
    "ExecTask",
    "GruntTask",
    "NpmTask",
    "Task",
    "parse_task",
    "resolve_task",
    "run_task",
]
