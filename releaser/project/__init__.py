"""Release orchestration: versions, identifiers and the update pipeline."""

from releaser.project.dryrun import SystemTempDirs, TempDirProvider
from releaser.project.operation import Operation, VersionUpdate
from releaser.project.project import Project, ProjectUpdateInfo
from releaser.project.semver import SemVer, parse_version
from releaser.project.strings import ReleaseIdentifiers, render_identifiers
from releaser.project.version import TagVersionResolver, VersionResolver

__all__ = [
    "Operation",
    "Project",
    "ProjectUpdateInfo",
    "ReleaseIdentifiers",
    "SemVer",
    "SystemTempDirs",
    "TagVersionResolver",
    "TempDirProvider",
    "VersionResolver",
    "VersionUpdate",
    "parse_version",
    "render_identifiers",
]
