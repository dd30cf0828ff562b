"""Operating system family detection."""

from enum import Enum

WINDOWS_OS_FAMILY = "Windows"


class OSFamily(str, Enum):
    """Shell family a command is built for."""

    WINDOWS = "windows"
    POSIX = "posix"


def detect_os_family(os_name: str) -> OSFamily:
    """
    Map a free-form OS name to its family.

    Any name containing "windows" (case-insensitive) is Windows, everything
    else is treated as POSIX.

    Example:
        >>> detect_os_family("Windows 10")
        <OSFamily.WINDOWS: 'windows'>
        >>> detect_os_family("Linux")
        <OSFamily.POSIX: 'posix'>
    """
    if WINDOWS_OS_FAMILY.upper() in os_name.upper():
        return OSFamily.WINDOWS
    return OSFamily.POSIX


__all__ = ["OSFamily", "WINDOWS_OS_FAMILY", "detect_os_family"]
