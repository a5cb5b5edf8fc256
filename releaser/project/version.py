"""Version resolution: current version from tags, next version from an operation."""

from __future__ import annotations

from typing import Protocol

from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result
from releaser.git.repository import Repository
from releaser.git.tags import Tags
from releaser.project.operation import Operation, VersionUpdate
from releaser.project.semver import SemVer, latest_version, parse_version

__all__ = ["TagVersionResolver", "VersionResolver"]


class VersionResolver(Protocol):
    def resolve(
        self, repo: Repository, operation: Operation
    ) -> Result[VersionUpdate, ReleaseError]: ...


class TagVersionResolver:
    """Reads the current version from the highest ``[v]MAJOR.MINOR.PATCH`` tag.

    Repositories without any version tag start from ``initial``.
    """

    def __init__(self, tags: Tags, *, initial: str = "0.0.0") -> None:
        self.tags = tags
        self.initial = initial

    def current(self, repo: Repository) -> Result[SemVer, ReleaseError]:
        listed = self.tags.list_tags(repo)
        if isinstance(listed, Err):
            return listed

        found = latest_version(listed.value)
        if found is not None:
            return Ok(found)

        initial = parse_version(self.initial)
        if initial is None:
            return Err(
                ReleaseError(
                    kind="invalid_config",
                    message=f"invalid initial version: {self.initial}",
                    hint="Set [version] initial to MAJOR.MINOR.PATCH",
                )
            )
        return Ok(initial)

    def resolve(self, repo: Repository, operation: Operation) -> Result[VersionUpdate, ReleaseError]:
        return self.current(repo).and_then(operation.version_update)
