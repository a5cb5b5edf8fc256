"""Error presentation utilities.

Centralized release error formatting for consistent CLI output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from releaser.core.config import ConfigError
from releaser.core.errors import ErrorCode, ReleaseError, exit_code_for
from releaser.output.console import Style

if TYPE_CHECKING:
    from releaser.output.console import ConsoleProtocol

__all__ = [
    "config_error_exit_code",
    "print_config_error",
    "print_release_error",
    "release_error_exit_code",
]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a release error with its kind and hint."""
    console.error(f"{error.message} [{error.kind}]")
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def print_config_error(error: ConfigError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.path is not None:
        console.print(f"config: {error.path}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    """Get the process exit code for a release error."""
    return int(exit_code_for(error))


def config_error_exit_code() -> int:
    return int(ErrorCode.USER_ERROR)
