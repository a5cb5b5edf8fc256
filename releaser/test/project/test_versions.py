from __future__ import annotations

from pathlib import Path

import pytest

from releaser.core.config import Config, TemplatesConfig
from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result
from releaser.git.repository import Repository
from releaser.project.operation import Operation, VersionUpdate
from releaser.project.semver import SemVer, latest_version, parse_version
from releaser.project.strings import ReleaseIdentifiers, render_identifiers
from releaser.project.version import TagVersionResolver


def test_parse_version() -> None:
    assert parse_version("1.2.3") == SemVer(1, 2, 3)
    assert parse_version("v0.0.1") == SemVer(0, 0, 1)


def test_parse_version_rejects_non_stable_versions() -> None:
    assert parse_version("1.2.3-beta.1") is None
    assert parse_version("01.2.3") is None
    assert parse_version("1.2") is None
    assert parse_version("release-1.2.3") is None


def test_bump() -> None:
    v = SemVer(1, 2, 3)
    assert v.bump("major") == SemVer(2, 0, 0)
    assert v.bump("minor") == SemVer(1, 3, 0)
    assert v.bump("patch") == SemVer(1, 2, 4)
    assert str(v.bump("patch")) == "1.2.4"


def test_latest_version_orders_numerically() -> None:
    tags = ["1.9.0", "v1.10.0", "nightly", "2.0.0-rc.1", "1.2.3"]
    assert latest_version(tags) == SemVer(1, 10, 0)
    assert latest_version(["nightly"]) is None


class TestOperation:
    def test_bump_update(self) -> None:
        result = Operation.bump("minor").version_update(SemVer(1, 2, 3))
        assert result == Ok(VersionUpdate(old=SemVer(1, 2, 3), new=SemVer(1, 3, 0)))

    def test_set_newer_version(self) -> None:
        op = Operation.set_version("2.0.0").unwrap()
        assert op.version_update(SemVer(1, 2, 3)) == Ok(
            VersionUpdate(old=SemVer(1, 2, 3), new=SemVer(2, 0, 0))
        )

    @pytest.mark.parametrize("target", ["1.2.3", "1.0.0"])
    def test_set_not_newer_is_not_applicable(self, target: str) -> None:
        op = Operation.set_version(target).unwrap()

        result = op.version_update(SemVer(1, 2, 3))

        assert isinstance(result, Err)
        assert result.unwrap_err().kind == "version_not_applicable"

    def test_set_invalid_version(self) -> None:
        result = Operation.set_version("next")

        assert isinstance(result, Err)
        assert result.unwrap_err().kind == "invalid_version"

    def test_str(self) -> None:
        assert str(Operation.bump("patch")) == "patch bump"
        assert str(Operation.set_version("2.0.0").unwrap()) == "set 2.0.0"


class TestRenderIdentifiers:
    update = VersionUpdate(old=SemVer(1, 2, 3), new=SemVer(1, 2, 4))

    def test_defaults(self) -> None:
        assert render_identifiers(Config(), self.update) == ReleaseIdentifiers(
            branch_name="release/1.2.4",
            commit_message="Release 1.2.4",
            tag_name="1.2.4",
            remote_name="origin",
        )

    def test_all_placeholders(self) -> None:
        config = Config(
            templates=TemplatesConfig(
                branch="release/{major}.{minor}.x",
                commit="Bump {old_version} -> {version} ({patch})",
                tag="v{version}",
                remote="upstream",
            )
        )

        ids = render_identifiers(config, self.update)

        assert ids.branch_name == "release/1.2.x"
        assert ids.commit_message == "Bump 1.2.3 -> 1.2.4 (4)"
        assert ids.tag_name == "v1.2.4"
        assert ids.remote_name == "upstream"

    def test_deterministic(self) -> None:
        assert render_identifiers(Config(), self.update) == render_identifiers(Config(), self.update)


class StaticTags:
    def __init__(self, tags: Result[list[str], ReleaseError]) -> None:
        self.tags = tags

    def create_tag(
        self,
        repo: Repository,
        name: str,
        target: str | None = None,
        message: str | None = None,
    ) -> Result[None, ReleaseError]:
        raise AssertionError("resolver must not create tags")

    def list_tags(self, repo: Repository) -> Result[list[str], ReleaseError]:
        return self.tags


class TestTagVersionResolver:
    def test_current_from_highest_tag(self, tmp_path: Path) -> None:
        resolver = TagVersionResolver(StaticTags(Ok(["1.2.3", "v1.4.0", "latest"])))

        assert resolver.current(Repository(tmp_path)) == Ok(SemVer(1, 4, 0))

    def test_initial_version_without_tags(self, tmp_path: Path) -> None:
        resolver = TagVersionResolver(StaticTags(Ok([])), initial="0.1.0")

        result = resolver.resolve(Repository(tmp_path), Operation.bump("patch"))

        assert result == Ok(VersionUpdate(old=SemVer(0, 1, 0), new=SemVer(0, 1, 1)))

    def test_invalid_initial_version(self, tmp_path: Path) -> None:
        resolver = TagVersionResolver(StaticTags(Ok([])), initial="one")

        result = resolver.current(Repository(tmp_path))

        assert isinstance(result, Err)
        assert result.unwrap_err().kind == "invalid_config"

    def test_tag_listing_failure_propagates(self, tmp_path: Path) -> None:
        error = ReleaseError(kind="git_failed", message="failed to list tags")
        resolver = TagVersionResolver(StaticTags(Err(error)))

        assert resolver.resolve(Repository(tmp_path), Operation.bump("major")) == Err(error)
