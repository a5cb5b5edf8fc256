"""Git operations module.

This module provides the repository handle and the primitives a release
applies to it:
- Repository access: open_repository, clone_repository
- Branches, Commits, Tags, Remotes: protocols with git CLI implementations
- GitBackend: the bundle the release pipeline depends on

Usage:
    from releaser.git import GitBackend, open_repository

    repo = open_repository(Path(".")).unwrap()
    backend = GitBackend.from_config(config)
    backend.tags.create_tag(repo, "1.2.4")
"""

from releaser.git.backend import GitBackend
from releaser.git.branches import Branches, GitBranches
from releaser.git.commits import Commits, GitCommits
from releaser.git.remotes import GitRemotes, Remotes
from releaser.git.repository import (
    Repository,
    clone_repository,
    open_repository,
    repo_path,
)
from releaser.git.tags import GitTags, Tags

__all__ = [
    # Repository
    "Repository",
    "clone_repository",
    "open_repository",
    "repo_path",
    # Primitives
    "Branches",
    "Commits",
    "GitBackend",
    "GitBranches",
    "GitCommits",
    "GitRemotes",
    "GitTags",
    "Remotes",
    "Tags",
]
