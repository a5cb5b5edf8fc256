"""Typed configuration loading and access.

Configuration lives in ``.releaser.toml`` at the repository root:

    [repository]
    enable_branch = true
    enable_commit = true
    enable_tag = true
    enable_push = false

    [templates]
    branch = "release/{version}"
    commit = "Release {version}"
    tag = "{version}"
    remote = "origin"

    [version]
    initial = "0.0.0"

Templates are validated when a TemplatesConfig is built, so rendering
identifiers from any Config cannot fail.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "TEMPLATE_FIELDS",
    "Config",
    "ConfigError",
    "RepoConfig",
    "TemplatesConfig",
    "VersionConfig",
    "load_config",
    "load_config_or_default",
    "validate_template",
]

CONFIG_FILENAME = ".releaser.toml"

# Placeholders accepted in templates
TEMPLATE_FIELDS = frozenset({"version", "old_version", "major", "minor", "patch"})

DEFAULT_BRANCH_TEMPLATE = "release/{version}"
DEFAULT_COMMIT_TEMPLATE = "Release {version}"
DEFAULT_TAG_TEMPLATE = "{version}"
DEFAULT_REMOTE = "origin"
DEFAULT_INITIAL_VERSION = "0.0.0"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class RepoConfig:
    """Which repository mutations a release performs."""

    enable_branch: bool = True
    enable_commit: bool = True
    enable_tag: bool = True
    enable_push: bool = False
    # Release commits usually carry no file changes of their own.
    allow_empty_commit: bool = True
    annotate_tag: bool = False


@dataclass(frozen=True, slots=True)
class TemplatesConfig:
    """Templates for the identifiers rendered from a version update."""

    branch: str = DEFAULT_BRANCH_TEMPLATE
    commit: str = DEFAULT_COMMIT_TEMPLATE
    tag: str = DEFAULT_TAG_TEMPLATE
    remote: str = DEFAULT_REMOTE

    def __post_init__(self) -> None:
        for name in ("branch", "commit", "tag", "remote"):
            problem = validate_template(getattr(self, name))
            if problem is not None:
                raise ValueError(f"templates.{name}: {problem}")


@dataclass(frozen=True, slots=True)
class VersionConfig:
    """Version used when the repository has no version tag yet."""

    initial: str = DEFAULT_INITIAL_VERSION


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    repository: RepoConfig = field(default_factory=RepoConfig)
    templates: TemplatesConfig = field(default_factory=TemplatesConfig)
    version: VersionConfig = field(default_factory=VersionConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a template uses an unknown placeholder.
        """
        repo: StrDict = get_table(data, "repository") or {}
        templates: StrDict = get_table(data, "templates") or {}
        version: StrDict = get_table(data, "version") or {}

        defaults = RepoConfig()
        return cls(
            repository=RepoConfig(
                enable_branch=_bool_or(repo, "enable_branch", defaults.enable_branch),
                enable_commit=_bool_or(repo, "enable_commit", defaults.enable_commit),
                enable_tag=_bool_or(repo, "enable_tag", defaults.enable_tag),
                enable_push=_bool_or(repo, "enable_push", defaults.enable_push),
                allow_empty_commit=_bool_or(
                    repo, "allow_empty_commit", defaults.allow_empty_commit
                ),
                annotate_tag=_bool_or(repo, "annotate_tag", defaults.annotate_tag),
            ),
            templates=TemplatesConfig(
                branch=get_str(templates, "branch") or DEFAULT_BRANCH_TEMPLATE,
                commit=get_str(templates, "commit") or DEFAULT_COMMIT_TEMPLATE,
                tag=get_str(templates, "tag") or DEFAULT_TAG_TEMPLATE,
                remote=get_str(templates, "remote") or DEFAULT_REMOTE,
            ),
            version=VersionConfig(
                initial=get_str(version, "initial") or DEFAULT_INITIAL_VERSION,
            ),
        )


def _bool_or(table: Mapping[str, object], key: str, default: bool) -> bool:
    value = get_bool(table, key)
    return default if value is None else value


def validate_template(template: str) -> str | None:
    """Return a description of what is wrong with template, or None if valid."""
    try:
        parsed = list(string.Formatter().parse(template))
    except ValueError as e:
        return str(e)
    for _literal, field_name, format_spec, conversion in parsed:
        if field_name is None:
            continue
        if field_name not in TEMPLATE_FIELDS:
            allowed = ", ".join(sorted(TEMPLATE_FIELDS))
            return f"unknown placeholder {{{field_name}}} (allowed: {allowed})"
        if format_spec or conversion:
            return f"placeholder {{{field_name}}} must not carry a format spec"
    return None


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to .releaser.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config from file, or return the default config if it does not exist.

    A file that exists but is invalid is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
