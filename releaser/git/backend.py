"""Bundle of the git primitives a release needs."""

from __future__ import annotations

from dataclasses import dataclass

from releaser.core.config import Config
from releaser.git.branches import Branches, GitBranches
from releaser.git.commits import Commits, GitCommits
from releaser.git.remotes import GitRemotes, Remotes
from releaser.git.tags import GitTags, Tags

__all__ = ["GitBackend"]


@dataclass(frozen=True, slots=True)
class GitBackend:
    branches: Branches
    commits: Commits
    tags: Tags
    remotes: Remotes

    @classmethod
    def from_config(cls, config: Config) -> GitBackend:
        """Git CLI primitives configured for config."""
        return cls(
            branches=GitBranches(),
            commits=GitCommits(allow_empty=config.repository.allow_empty_commit),
            tags=GitTags(),
            remotes=GitRemotes(),
        )
