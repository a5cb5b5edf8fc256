"""Release operations and the version transition they produce."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result
from releaser.project.semver import BumpKind, SemVer, parse_version

OperationKind = Literal["major", "minor", "patch", "set"]


@dataclass(frozen=True, slots=True)
class VersionUpdate:
    old: SemVer
    new: SemVer


@dataclass(frozen=True, slots=True)
class Operation:
    """What kind of version transition a release performs.

    Use the constructors: ``Operation.bump("patch")`` or
    ``Operation.set_version("2.0.0")``.
    """

    kind: OperationKind
    target: SemVer | None = None

    @classmethod
    def bump(cls, kind: BumpKind) -> Operation:
        return cls(kind=kind)

    @classmethod
    def set_version(cls, version: str) -> Result[Operation, ReleaseError]:
        parsed = parse_version(version)
        if parsed is None:
            return Err(
                ReleaseError(
                    kind="invalid_version",
                    message=f"invalid version: {version}",
                    hint="Use MAJOR.MINOR.PATCH, e.g. 1.4.0",
                )
            )
        return Ok(cls(kind="set", target=parsed))

    def version_update(self, current: SemVer) -> Result[VersionUpdate, ReleaseError]:
        """Compute the transition from current that this operation requests."""
        if self.kind != "set":
            return Ok(VersionUpdate(old=current, new=current.bump(self.kind)))

        if self.target is None:
            return Err(
                ReleaseError(
                    kind="invalid_version",
                    message="set operation has no target version",
                )
            )
        if self.target <= current:
            return Err(
                ReleaseError(
                    kind="version_not_applicable",
                    message=f"version {self.target} is not newer than current {current}",
                )
            )
        return Ok(VersionUpdate(old=current, new=self.target))

    def __str__(self) -> str:
        if self.kind == "set":
            return f"set {self.target}"
        return f"{self.kind} bump"
