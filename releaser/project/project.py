"""Release orchestration for a single repository.

A ``Project`` owns one repository handle and one configuration. ``update``
resolves the next version, renders the release identifiers and applies the
enabled mutations in the fixed order branch -> commit -> tag -> push.

A dry-run project is built by cloning the ``origin`` remote of a local
repository into a temporary directory. It runs exactly the same ``update``
sequence; only the repository it mutates differs.

Usage:
    match Project.dry_run(Path(".")):
        case Ok(project):
            with project:
                info = project.update(Operation.bump("patch"))
        case Err(e):
            print(e.pretty())
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType

from releaser.core.config import CONFIG_FILENAME, Config, load_config_or_default
from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result
from releaser.git.backend import GitBackend
from releaser.git.repository import Repository, clone_repository, open_repository, repo_path
from releaser.output.console import ConsoleProtocol, NullConsole, Style
from releaser.project.dryrun import SystemTempDirs, TempDirProvider
from releaser.project.operation import Operation, VersionUpdate
from releaser.project.strings import ReleaseIdentifiers, render_identifiers
from releaser.project.version import TagVersionResolver, VersionResolver

__all__ = ["DRY_RUN_REMOTE", "Project", "ProjectUpdateInfo"]

DRY_RUN_REMOTE = "origin"


@dataclass(frozen=True, slots=True)
class ProjectUpdateInfo:
    """Outcome of a successful update.

    Attributes:
        repo_path: Path of the repository that was mutated
        version_update: The version transition that was released
        identifiers: The names used for branch, commit, tag and remote
        dry_run: True if repo_path is a disposable clone
    """

    repo_path: Path
    version_update: VersionUpdate
    identifiers: ReleaseIdentifiers
    dry_run: bool = False


class Project:
    """A repository plus the configuration used to release it."""

    def __init__(
        self,
        *,
        config: Config,
        repo: Repository,
        is_dry_run: bool = False,
        backend: GitBackend | None = None,
        resolver: VersionResolver | None = None,
        console: ConsoleProtocol | None = None,
        scratch_dir: Path | None = None,
        tempdirs: TempDirProvider | None = None,
    ) -> None:
        self.config = config
        self.repo = repo
        self.is_dry_run = is_dry_run
        self.backend = backend or GitBackend.from_config(config)
        self.resolver = resolver or TagVersionResolver(
            self.backend.tags, initial=config.version.initial
        )
        self.console = console or NullConsole()
        self._scratch_dir = scratch_dir
        self._tempdirs = tempdirs

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_local(
        cls,
        path: Path,
        config: Config | None = None,
        *,
        backend: GitBackend | None = None,
        resolver: VersionResolver | None = None,
        console: ConsoleProtocol | None = None,
    ) -> Result[Project, ReleaseError]:
        """Open the repository at path.

        When config is None it is read from the repository's .releaser.toml,
        falling back to defaults if the file does not exist.
        """
        opened = open_repository(path)
        if isinstance(opened, Err):
            return opened
        repo = opened.value

        resolved = _resolve_config(repo, config)
        if isinstance(resolved, Err):
            return resolved

        return Ok(
            cls(
                config=resolved.value,
                repo=repo,
                backend=backend,
                resolver=resolver,
                console=console,
            )
        )

    @classmethod
    def from_remote(
        cls,
        url: str,
        directory: Path,
        config: Config | None = None,
        *,
        backend: GitBackend | None = None,
        resolver: VersionResolver | None = None,
        console: ConsoleProtocol | None = None,
    ) -> Result[Project, ReleaseError]:
        """Clone url into a subdirectory of directory named after the repository."""
        dest = repo_path(url, directory)
        if isinstance(dest, Err):
            return dest

        (console or NullConsole()).print(f"git clone {url} {dest.value}", Style.DIM)
        cloned = clone_repository(url, dest.value)
        if isinstance(cloned, Err):
            return cloned
        repo = cloned.value

        resolved = _resolve_config(repo, config)
        if isinstance(resolved, Err):
            return resolved

        return Ok(
            cls(
                config=resolved.value,
                repo=repo,
                backend=backend,
                resolver=resolver,
                console=console,
            )
        )

    @classmethod
    def dry_run(
        cls,
        path: Path,
        config: Config | None = None,
        *,
        tempdirs: TempDirProvider | None = None,
        backend: GitBackend | None = None,
        resolver: VersionResolver | None = None,
        console: ConsoleProtocol | None = None,
    ) -> Result[Project, ReleaseError]:
        """Build a project that releases into a temporary clone of path's origin.

        The returned project carries the local project's configuration.
        Its temporary directory is removed by ``close()``.
        """
        local = cls.from_local(path, config, backend=backend, resolver=resolver, console=console)
        if isinstance(local, Err):
            return local
        local_project = local.value

        url = local_project.backend.remotes.remote_url(local_project.repo, DRY_RUN_REMOTE)
        if isinstance(url, Err):
            return url

        provider = tempdirs or SystemTempDirs()
        allocated = provider.allocate()
        if isinstance(allocated, Err):
            return allocated
        directory = allocated.value

        remote = cls.from_remote(
            _clone_source(url.value, local_project.repo.path),
            directory,
            local_project.config,
            backend=local_project.backend,
            resolver=resolver,
            console=console,
        )
        if isinstance(remote, Err):
            provider.release(directory)
            return remote

        return Ok(
            cls(
                config=local_project.config,
                repo=remote.value.repo,
                is_dry_run=True,
                backend=local_project.backend,
                resolver=remote.value.resolver,
                console=console,
                scratch_dir=directory,
                tempdirs=provider,
            )
        )

    # -------------------------------------------------------------------------
    # Release
    # -------------------------------------------------------------------------

    def update(self, operation: Operation) -> Result[ProjectUpdateInfo, ReleaseError]:
        """Release operation against this project's repository.

        The first failing step aborts the sequence; steps that already ran
        are left in place.
        """
        version_update = self.resolver.resolve(self.repo, operation)
        if isinstance(version_update, Err):
            return version_update

        identifiers = render_identifiers(self.config, version_update.value)
        self.console.info(f"{version_update.value.old} -> {version_update.value.new}")

        applied = self._update_repo(identifiers)
        if isinstance(applied, Err):
            return applied

        return Ok(
            ProjectUpdateInfo(
                repo_path=self.repo.path,
                version_update=version_update.value,
                identifiers=identifiers,
                dry_run=self.is_dry_run,
            )
        )

    def _update_repo(self, ids: ReleaseIdentifiers) -> Result[None, ReleaseError]:
        repo_config = self.config.repository
        backend = self.backend
        repo = self.repo

        if repo_config.enable_branch:
            self.console.print(f"git branch {ids.branch_name}", Style.DIM)
            created = backend.branches.create_branch(repo, ids.branch_name)
            if isinstance(created, Err):
                return created
            self.console.print(f"git checkout {ids.branch_name}", Style.DIM)
            checked_out = backend.branches.checkout_branch(repo, ids.branch_name)
            if isinstance(checked_out, Err):
                return checked_out

        if repo_config.enable_commit:
            # Nothing is staged here: the commit records whatever the index holds.
            self.console.print(f"git commit -m {ids.commit_message!r}", Style.DIM)
            committed = backend.commits.commit(repo, [], ids.commit_message)
            if isinstance(committed, Err):
                return committed

        if repo_config.enable_tag:
            self.console.print(f"git tag {ids.tag_name}", Style.DIM)
            message = ids.commit_message if repo_config.annotate_tag else None
            tagged = backend.tags.create_tag(repo, ids.tag_name, None, message)
            if isinstance(tagged, Err):
                return tagged

        if repo_config.enable_push:
            # Only push refs this run created.
            if repo_config.enable_branch:
                self.console.print(f"git push {ids.remote_name} {ids.branch_name}", Style.DIM)
                pushed = backend.remotes.push_branch(repo, ids.branch_name, ids.remote_name)
                if isinstance(pushed, Err):
                    return pushed
            if repo_config.enable_tag:
                self.console.print(f"git push {ids.remote_name} {ids.tag_name}", Style.DIM)
                pushed = backend.remotes.push_tag(repo, ids.tag_name, ids.remote_name)
                if isinstance(pushed, Err):
                    return pushed

        return Ok(None)

    # -------------------------------------------------------------------------
    # Lifetime
    # -------------------------------------------------------------------------

    @property
    def scratch_dir(self) -> Path | None:
        """Temporary directory holding a dry-run clone, None for real projects."""
        return self._scratch_dir

    def close(self) -> None:
        """Remove the dry-run clone, if any. Real repositories are never touched."""
        if self._scratch_dir is not None and self._tempdirs is not None:
            self._tempdirs.release(self._scratch_dir)
            self._scratch_dir = None

    def __enter__(self) -> Project:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _resolve_config(repo: Repository, config: Config | None) -> Result[Config, ReleaseError]:
    if config is not None:
        return Ok(config)
    loaded = load_config_or_default(repo.path / CONFIG_FILENAME)
    if isinstance(loaded, Err):
        return Err(
            ReleaseError(
                kind="invalid_config",
                message=loaded.error.message,
                hint=str(loaded.error.path) if loaded.error.path else None,
            )
        )
    return Ok(loaded.value)


_SCP_LIKE_RE = re.compile(r"^[^/\\]+:")


def _clone_source(url: str, repo_root: Path) -> str:
    """Make a relative local remote URL usable from another directory.

    git reads "../origin.git" relative to the repository that declares it;
    the dry-run clone runs elsewhere, so such paths are anchored at repo_root.
    URLs and scp-like "host:path" remotes are returned unchanged.
    """
    if "://" in url or Path(url).is_absolute() or _SCP_LIKE_RE.match(url):
        return url
    return str((repo_root / url).resolve())
