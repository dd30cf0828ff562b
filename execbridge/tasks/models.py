"""
Task variants that produce commands.

Each task type knows its executable and how to turn its options into raw
arguments. The set is closed; ``Task`` is a tagged union on ``kind``.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from execbridge.core.command import CommandSpec
from execbridge.core.normalize import DEFAULT_REPLACEMENT, normalize_arguments
from execbridge.core.os_family import OSFamily

# Grunt exits with 3 on a failed task and 6 on a warning
GRUNT_TASK_ERROR_CODES: tuple[int, ...] = (0, 3, 6)


class BaseTask(BaseModel):
    """Fields shared by every task type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    options: list[str] = Field(default_factory=list, description="Extra CLI options")
    success_codes: list[int] | None = Field(
        default=None,
        description="Exit codes accepted besides the default 0",
    )

    def _spec(
        self,
        executable: str,
        arguments: list[str],
        os_family: OSFamily,
        success_codes: list[int] | tuple[int, ...] | None = None,
    ) -> CommandSpec:
        codes = self.success_codes if self.success_codes is not None else success_codes
        return CommandSpec(
            executable=executable,
            raw_arguments=tuple(arguments),
            os_family=os_family,
            success_codes=tuple(codes) if codes is not None else None,
        )


class GruntTask(BaseTask):
    """Runs a Grunt target."""

    kind: Literal["grunt"] = "grunt"
    executable: str = Field(default="grunt", min_length=1)
    target: str | None = None
    show_colors: bool = False
    ignore_tasks_errors: bool = False

    def command_spec(self, os_family: OSFamily, replacement: str = DEFAULT_REPLACEMENT) -> CommandSpec:
        arguments = []
        if self.target:
            arguments.append(self.target)
        if not self.show_colors:
            arguments.append("--no-color")
        arguments.extend(normalize_arguments(self.options, replacement))

        codes = GRUNT_TASK_ERROR_CODES if self.ignore_tasks_errors else None
        return self._spec(self.executable, arguments, os_family, codes)


class NpmTask(BaseTask):
    """Runs an npm command, ``install`` by default."""

    kind: Literal["npm"] = "npm"
    executable: str = Field(default="npm", min_length=1)
    command: str = "install"
    show_colors: bool = False

    def command_spec(self, os_family: OSFamily, replacement: str = DEFAULT_REPLACEMENT) -> CommandSpec:
        arguments = [self.command]
        if not self.show_colors:
            arguments.append("--color=false")
        arguments.extend(normalize_arguments(self.options, replacement))
        return self._spec(self.executable, arguments, os_family)


class BowerTask(BaseTask):
    """Runs a Bower command, ``install`` by default."""

    kind: Literal["bower"] = "bower"
    executable: str = Field(default="bower", min_length=1)
    command: str = "install"
    show_colors: bool = False

    def command_spec(self, os_family: OSFamily, replacement: str = DEFAULT_REPLACEMENT) -> CommandSpec:
        arguments = [self.command]
        if not self.show_colors:
            arguments.append("--no-color")
        arguments.extend(normalize_arguments(self.options, replacement))
        return self._spec(self.executable, arguments, os_family)


class ExecTask(BaseTask):
    """Runs an arbitrary executable; ``options`` are its arguments."""

    kind: Literal["exec"] = "exec"
    executable: str = Field(min_length=1)
    normalize: bool = True

    def command_spec(self, os_family: OSFamily, replacement: str = DEFAULT_REPLACEMENT) -> CommandSpec:
        arguments = list(self.options)
        if self.normalize:
            arguments = normalize_arguments(arguments, replacement)
        return self._spec(self.executable, arguments, os_family)


Task = Annotated[GruntTask | NpmTask | BowerTask | ExecTask, Field(discriminator="kind")]

_task_adapter: TypeAdapter[Any] = TypeAdapter(Task)


def parse_task(data: dict[str, Any]) -> GruntTask | NpmTask | BowerTask | ExecTask:
    """
    Validate a task declaration, dispatching on its ``kind``.

    Example:
        >>> parse_task({"kind": "npm", "options": ["--production"]})
        NpmTask(options=['--production'], ...)
    """
    task: GruntTask | NpmTask | BowerTask | ExecTask = _task_adapter.validate_python(data)
    return task


__all__ = [
    "BaseTask",
    "GruntTask",
    "NpmTask",
    "BowerTask",
    "ExecTask",
    "Task",
    "GRUNT_TASK_ERROR_CODES",
    "parse_task",
]
