"""Temporary directories for dry-run clones.

Dry-run projects clone the remote into a directory handed out by a
``TempDirProvider``. Tests pass their own provider to control the location.
"""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Protocol

from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result

__all__ = ["SystemTempDirs", "TempDirProvider"]

DRY_RUN_PREFIX = "releaser-dry-run-"


class TempDirProvider(Protocol):
    def allocate(self) -> Result[Path, ReleaseError]: ...

    def release(self, path: Path) -> None: ...


class SystemTempDirs:
    """Allocates under the system temp dir (or base, when given)."""

    def __init__(self, base: Path | None = None) -> None:
        self.base = base

    def allocate(self) -> Result[Path, ReleaseError]:
        try:
            if self.base is not None:
                self.base.mkdir(parents=True, exist_ok=True)
            return Ok(Path(tempfile.mkdtemp(prefix=DRY_RUN_PREFIX, dir=self.base)))
        except OSError as e:
            return Err(
                ReleaseError(
                    kind="tempdir_failed",
                    message="failed to create temporary directory for dry run",
                    hint=str(e),
                )
            )

    def release(self, path: Path) -> None:
        shutil.rmtree(path, ignore_errors=True)
