from __future__ import annotations

from pathlib import Path

from releaser.core.result import Err, Ok
from releaser.project.dryrun import DRY_RUN_PREFIX, SystemTempDirs


def test_allocate_under_base(tmp_path: Path) -> None:
    provider = SystemTempDirs(tmp_path / "base")

    result = provider.allocate()

    assert isinstance(result, Ok)
    path = result.unwrap()
    assert path.is_dir()
    assert path.parent == tmp_path / "base"
    assert path.name.startswith(DRY_RUN_PREFIX)


def test_allocations_are_distinct(tmp_path: Path) -> None:
    provider = SystemTempDirs(tmp_path)

    assert provider.allocate().unwrap() != provider.allocate().unwrap()


def test_release_removes_tree(tmp_path: Path) -> None:
    provider = SystemTempDirs(tmp_path)
    path = provider.allocate().unwrap()
    (path / "clone" / ".git").mkdir(parents=True)

    provider.release(path)

    assert not path.exists()


def test_allocate_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    result = SystemTempDirs(blocker / "sub").allocate()

    assert isinstance(result, Err)
    assert result.unwrap_err().kind == "tempdir_failed"
