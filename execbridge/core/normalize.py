"""
Normalization of whitespace-separated option/value arguments.

The exec mechanism truncates an argument at its first whitespace, so an
option passed as ``--option value`` has to become ``--option=value`` to
survive intact.
"""

import re
from collections.abc import Iterable

# Leading dash(es), option name, then the whitespace separating the value
WHITESPACED_OPTION_PATTERN = re.compile(r"^-{1,2}?[\w-]*\s+", re.ASCII)

_WHITESPACE_RUN = re.compile(r"\s+", re.ASCII)

DEFAULT_REPLACEMENT = "="


def normalize_argument(argument: str, replacement: str = DEFAULT_REPLACEMENT) -> str:
    """
    Replace the first whitespace run of an option argument.

    Args:
        argument: Raw argument, e.g. ``--option true``
        replacement: Text inserted in place of the whitespace

    Returns:
        Normalized argument, or the argument unchanged when it is not an
        option followed by whitespace

    Example:
        >>> normalize_argument("--option true")
        '--option=true'
        >>> normalize_argument("-v true extra")
        '-v=true extra'
    """
    if WHITESPACED_OPTION_PATTERN.match(argument) is None:
        return argument
    return _WHITESPACE_RUN.sub(lambda _: replacement, argument, count=1)


def normalize_arguments(
    arguments: Iterable[str], replacement: str = DEFAULT_REPLACEMENT
) -> list[str]:
    """Normalize every argument, preserving order."""
    return [normalize_argument(argument, replacement) for argument in arguments]


__all__ = [
    "DEFAULT_REPLACEMENT",
    "WHITESPACED_OPTION_PATTERN",
    "normalize_argument",
    "normalize_arguments",
]
