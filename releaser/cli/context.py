from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import typer

from releaser.core.config import CONFIG_FILENAME, Config, load_config, load_config_or_default
from releaser.core.result import Err
from releaser.git.repository import Repository, open_repository
from releaser.output.console import ConsoleProtocol, RichConsole
from releaser.output.errors import (
    config_error_exit_code,
    print_config_error,
    print_release_error,
    release_error_exit_code,
)


@dataclass(frozen=True, slots=True)
class StepOverrides:
    """Command-line switches that override [repository] enable_* settings."""

    branch: bool | None = None
    commit: bool | None = None
    tag: bool | None = None
    push: bool | None = None

    def apply(self, config: Config) -> Config:
        repo = config.repository
        return replace(
            config,
            repository=replace(
                repo,
                enable_branch=repo.enable_branch if self.branch is None else self.branch,
                enable_commit=repo.enable_commit if self.commit is None else self.commit,
                enable_tag=repo.enable_tag if self.tag is None else self.tag,
                enable_push=repo.enable_push if self.push is None else self.push,
            ),
        )


@dataclass(frozen=True, slots=True)
class CLIContext:
    path: Path
    repo: Repository
    config: Config
    console: ConsoleProtocol


def build_context(
    path: Path,
    *,
    config_path: Path | None = None,
    overrides: StepOverrides | None = None,
) -> CLIContext:
    console = RichConsole()

    opened = open_repository(path)
    if isinstance(opened, Err):
        print_release_error(opened.error, console)
        raise typer.Exit(code=release_error_exit_code(opened.error))
    repo = opened.value

    if config_path is not None:
        loaded = load_config(config_path)
    else:
        loaded = load_config_or_default(repo.path / CONFIG_FILENAME)
    if isinstance(loaded, Err):
        print_config_error(loaded.error, console)
        raise typer.Exit(code=config_error_exit_code())

    config = loaded.value
    if overrides is not None:
        config = overrides.apply(config)

    return CLIContext(path=path, repo=repo, config=config, console=console)
