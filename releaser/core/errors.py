"""Release error payload and CLI exit codes.

Every layer (git primitives, version resolution, orchestration) reports
failures as a ``ReleaseError``. The ``kind`` field is the stable taxonomy;
``message`` and ``hint`` are for humans.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

__all__ = ["ErrorCode", "ReleaseError", "ReleaseErrorKind", "exit_code_for"]


ReleaseErrorKind = Literal[
    # repository access
    "invalid_path",
    "not_a_repository",
    "clone_failed",
    # remote resolution
    "remote_not_found",
    # dry-run resources
    "tempdir_failed",
    # version resolution
    "invalid_version",
    "version_not_applicable",
    # mutations
    "branch_exists",
    "branch_not_found",
    "nothing_to_commit",
    "tag_exists",
    "push_rejected",
    "git_failed",
    # configuration
    "invalid_config",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Canonical error payload returned by every fallible release operation."""

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad input, invalid config, unusable version)
    - 2: Repository error (not a repository, missing remote)
    - 3: Mutation error (name collision, nothing to commit, git failure)
    - 4: Network error (clone or push failed)
    - 5: I/O error (temporary directory could not be created)
    """

    OK = 0
    USER_ERROR = 1
    REPO_ERROR = 2
    MUTATION_ERROR = 3
    NETWORK_ERROR = 4
    IO_ERROR = 5


def exit_code_for(error: ReleaseError) -> ErrorCode:
    """Map an error kind to the exit code the CLI should return."""
    match error.kind:
        case "invalid_version" | "version_not_applicable" | "invalid_config":
            return ErrorCode.USER_ERROR
        case "invalid_path" | "not_a_repository" | "remote_not_found":
            return ErrorCode.REPO_ERROR
        case "clone_failed" | "push_rejected":
            return ErrorCode.NETWORK_ERROR
        case "tempdir_failed":
            return ErrorCode.IO_ERROR
        case _:
            return ErrorCode.MUTATION_ERROR
