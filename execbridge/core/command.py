"""Command models: the declared command and its OS-specific resolution."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from execbridge.core.errors import InvalidCommandError
from execbridge.core.os_family import OSFamily

DEFAULT_SUCCESS_CODES: tuple[int, ...] = (0,)


def _as_arguments(arguments: Any, field_name: str) -> tuple[str, ...]:
    if arguments is None:
        raise InvalidCommandError("Argument list must not be None", field=field_name)
    if isinstance(arguments, str) or not isinstance(arguments, Sequence):
        raise InvalidCommandError(
            f"Arguments must be a sequence of strings, got {type(arguments).__name__}",
            field=field_name,
        )
    for index, argument in enumerate(arguments):
        if not isinstance(argument, str):
            raise InvalidCommandError(
                f"Argument {index} must be a string, got {type(argument).__name__}",
                field=field_name,
            )
    return tuple(arguments)


def _as_success_codes(codes: Any) -> tuple[int, ...] | None:
    if codes is None:
        return None
    result = []
    for code in codes:
        # bool is an int subclass but never a meaningful exit code
        if isinstance(code, bool) or not isinstance(code, int):
            raise InvalidCommandError(
                f"Success code must be an integer, got {code!r}", field="success_codes"
            )
        result.append(code)
    return tuple(result)


@dataclass(frozen=True)
class CommandSpec:
    """A declared command, before it is adapted to the host shell."""

    executable: str
    raw_arguments: tuple[str, ...] = ()
    os_family: OSFamily = OSFamily.POSIX
    success_codes: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.executable, str) or not self.executable:
            raise InvalidCommandError("Executable must be a non-empty string", field="executable")
        object.__setattr__(self, "raw_arguments", _as_arguments(self.raw_arguments, "raw_arguments"))
        try:
            object.__setattr__(self, "os_family", OSFamily(self.os_family))
        except ValueError:
            raise InvalidCommandError(
                f"Unknown OS family: {self.os_family!r}", field="os_family"
            ) from None
        object.__setattr__(self, "success_codes", _as_success_codes(self.success_codes))


@dataclass(frozen=True)
class ResolvedCommand:
    """
    The command as the exec mechanism receives it.

    ``success_codes`` is a side channel consumed by the runner, it is never
    part of ``final_arguments``.
    """

    shell_executable: str
    final_arguments: tuple[str, ...] = ()
    working_directory: str | None = None
    success_codes: tuple[int, ...] | None = None
    os_family: OSFamily = OSFamily.POSIX

    @property
    def argv(self) -> list[str]:
        """Full argument vector, executable first."""
        return [self.shell_executable, *self.final_arguments]

    @property
    def accepted_codes(self) -> tuple[int, ...]:
        """Exit codes treated as success (0 unless overridden)."""
        return self.success_codes or DEFAULT_SUCCESS_CODES


__all__ = ["CommandSpec", "ResolvedCommand", "DEFAULT_SUCCESS_CODES"]
