"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result
from releaser.output.errors import print_release_error, release_error_exit_code

if TYPE_CHECKING:
    from releaser.output.console import ConsoleProtocol


T = TypeVar("T")


def unwrap_or_exit(result: Result[T, ReleaseError], console: ConsoleProtocol) -> T:
    """Return the Ok value, or print the error and exit with its code.

    This helper reduces boilerplate for the common pattern:
        match result:
            case Err(e):
                print_release_error(e, console)
                raise typer.Exit(code=release_error_exit_code(e))
            case Ok(value):
                ...
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            print_release_error(error, console)
            raise typer.Exit(code=release_error_exit_code(error))
