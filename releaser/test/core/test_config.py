"""Tests for releaser.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from releaser.core.config import (
    Config,
    RepoConfig,
    TemplatesConfig,
    load_config,
    load_config_or_default,
    validate_template,
)
from releaser.core.result import Err, Ok


class TestDefaults:
    def test_repo_defaults(self) -> None:
        repo = RepoConfig()
        assert repo.enable_branch is True
        assert repo.enable_commit is True
        assert repo.enable_tag is True
        assert repo.enable_push is False
        assert repo.allow_empty_commit is True
        assert repo.annotate_tag is False

    def test_template_defaults(self) -> None:
        templates = TemplatesConfig()
        assert templates.branch == "release/{version}"
        assert templates.commit == "Release {version}"
        assert templates.tag == "{version}"
        assert templates.remote == "origin"

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.repository = RepoConfig()  # type: ignore[misc]


class TestTemplatesConfig:
    def test_direct_construction_rejects_unknown_placeholder(self) -> None:
        with pytest.raises(ValueError, match=r"templates.branch: unknown placeholder \{ver\}"):
            TemplatesConfig(branch="release/{ver}")

    def test_direct_construction_rejects_format_spec(self) -> None:
        with pytest.raises(ValueError, match="templates.tag"):
            TemplatesConfig(tag="{major:>3}")

    def test_all_placeholders_accepted(self) -> None:
        templates = TemplatesConfig(commit="{old_version} -> {version} ({major}.{minor}.{patch})")
        assert templates.commit.startswith("{old_version}")


class TestFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_overrides(self) -> None:
        config = Config.from_dict(
            {
                "repository": {"enable_branch": False, "enable_push": True},
                "templates": {"tag": "v{version}", "remote": "upstream"},
                "version": {"initial": "1.0.0"},
            }
        )
        assert config.repository.enable_branch is False
        assert config.repository.enable_push is True
        assert config.repository.enable_commit is True
        assert config.templates.tag == "v{version}"
        assert config.templates.remote == "upstream"
        assert config.templates.branch == "release/{version}"
        assert config.version.initial == "1.0.0"

    def test_non_bool_flag_falls_back_to_default(self) -> None:
        config = Config.from_dict({"repository": {"enable_tag": "no"}})
        assert config.repository.enable_tag is True

    def test_unknown_placeholder_rejected(self) -> None:
        with pytest.raises(ValueError, match="templates.branch"):
            Config.from_dict({"templates": {"branch": "release/{name}"}})


class TestValidateTemplate:
    @pytest.mark.parametrize(
        "template",
        ["{version}", "v{major}.{minor}.{patch}", "Bump {old_version} -> {version}", "{{literal}}"],
    )
    def test_valid(self, template: str) -> None:
        assert validate_template(template) is None

    @pytest.mark.parametrize("template", ["{name}", "{version:>10}", "{version!r}", "{version", "{0}"])
    def test_invalid(self, template: str) -> None:
        assert validate_template(template) is not None


class TestLoadConfig:
    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".releaser.toml"
        path.write_text('[repository]\nenable_push = true\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.unwrap().repository.enable_push is True

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")

        assert isinstance(result, Err)
        assert "not found" in result.unwrap_err().message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / ".releaser.toml"
        path.write_text("[repository\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.unwrap_err().message
        assert result.unwrap_err().path == path

    def test_invalid_template(self, tmp_path: Path) -> None:
        path = tmp_path / ".releaser.toml"
        path.write_text('[templates]\ncommit = "Release {nope}"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid config structure" in result.unwrap_err().message

    def test_or_default_when_missing(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "missing.toml") == Ok(Config())

    def test_or_default_still_reports_invalid_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".releaser.toml"
        path.write_text("not toml at all = = =", encoding="utf-8")

        assert isinstance(load_config_or_default(path), Err)
