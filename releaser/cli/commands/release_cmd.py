from __future__ import annotations

from enum import Enum
from pathlib import Path

import typer

from releaser.cli.commands._helpers import unwrap_or_exit
from releaser.cli.context import CLIContext, StepOverrides, build_context
from releaser.git.tags import GitTags
from releaser.output.console import Style
from releaser.project.operation import Operation
from releaser.project.project import Project
from releaser.project.version import TagVersionResolver


class BumpArg(str, Enum):
    major = "major"
    minor = "minor"
    patch = "patch"


_PATH_OPTION = typer.Option(Path("."), "--path", "-C", help="Repository to release")
_CONFIG_OPTION = typer.Option(None, "--config", help="Config file (default: <repo>/.releaser.toml)")
_DRY_RUN_OPTION = typer.Option(
    False,
    "--dry-run",
    help="Release into a temporary clone of origin instead. With push enabled, "
    "the clone still pushes its branch and tag to the real origin.",
)
_KEEP_CLONE_OPTION = typer.Option(
    False, "--keep-clone", help="Keep the dry-run clone for inspection"
)
_BRANCH_OPTION = typer.Option(None, "--branch/--no-branch", help="Create a release branch")
_COMMIT_OPTION = typer.Option(None, "--commit/--no-commit", help="Create a release commit")
_TAG_OPTION = typer.Option(None, "--tag/--no-tag", help="Create a release tag")
_PUSH_OPTION = typer.Option(None, "--push/--no-push", help="Push created branch/tag")


def bump(
    kind: BumpArg = typer.Argument(..., help="major/minor/patch"),
    path: Path = _PATH_OPTION,
    config: Path | None = _CONFIG_OPTION,
    dry_run: bool = _DRY_RUN_OPTION,
    keep_clone: bool = _KEEP_CLONE_OPTION,
    branch: bool | None = _BRANCH_OPTION,
    commit: bool | None = _COMMIT_OPTION,
    tag: bool | None = _TAG_OPTION,
    push: bool | None = _PUSH_OPTION,
) -> None:
    """Release the next major, minor or patch version."""
    overrides = StepOverrides(branch=branch, commit=commit, tag=tag, push=push)
    ctx = build_context(path, config_path=config, overrides=overrides)
    _release(ctx, Operation.bump(kind.value), dry_run=dry_run, keep_clone=keep_clone)


def set_version(
    version: str = typer.Argument(..., help="Version to release, e.g. 2.0.0"),
    path: Path = _PATH_OPTION,
    config: Path | None = _CONFIG_OPTION,
    dry_run: bool = _DRY_RUN_OPTION,
    keep_clone: bool = _KEEP_CLONE_OPTION,
    branch: bool | None = _BRANCH_OPTION,
    commit: bool | None = _COMMIT_OPTION,
    tag: bool | None = _TAG_OPTION,
    push: bool | None = _PUSH_OPTION,
) -> None:
    """Release an explicit version (must be newer than the current one)."""
    overrides = StepOverrides(branch=branch, commit=commit, tag=tag, push=push)
    ctx = build_context(path, config_path=config, overrides=overrides)
    operation = unwrap_or_exit(Operation.set_version(version), ctx.console)
    _release(ctx, operation, dry_run=dry_run, keep_clone=keep_clone)


def current(
    path: Path = _PATH_OPTION,
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Show the current version and the candidates for the next release."""
    ctx = build_context(path, config_path=config)
    resolver = TagVersionResolver(GitTags(), initial=ctx.config.version.initial)
    version = unwrap_or_exit(resolver.current(ctx.repo), ctx.console)

    ctx.console.print(str(version))
    for kind in BumpArg:
        ctx.console.print(f"  {kind.value:<5} -> {version.bump(kind.value)}", Style.DIM)


def _release(ctx: CLIContext, operation: Operation, *, dry_run: bool, keep_clone: bool) -> None:
    console = ctx.console
    if dry_run:
        console.header(f"Dry run: {operation}")
        built = Project.dry_run(ctx.path, ctx.config, console=console)
    else:
        console.header(f"Release: {operation}")
        built = Project.from_local(ctx.path, ctx.config, console=console)
    project = unwrap_or_exit(built, console)

    try:
        info = unwrap_or_exit(project.update(operation), console)
        console.success(f"released {info.version_update.new}")
        repo_config = ctx.config.repository
        if repo_config.enable_branch:
            console.print(f"branch: {info.identifiers.branch_name}", Style.DIM)
        if repo_config.enable_tag:
            console.print(f"tag: {info.identifiers.tag_name}", Style.DIM)
        console.print(f"repository: {info.repo_path}", Style.DIM)
        if info.dry_run:
            if keep_clone:
                console.info(f"dry-run clone kept at {info.repo_path}")
            else:
                console.info("dry run: the local repository was not modified")
            pushed = repo_config.enable_push and (repo_config.enable_branch or repo_config.enable_tag)
            if pushed:
                remote = info.identifiers.remote_name
                console.info(f"dry run: pushes went to the real {remote} remote")
    finally:
        if not keep_clone:
            project.close()
