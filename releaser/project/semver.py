from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal


BumpKind = Literal["major", "minor", "patch"]

_STABLE_RE = re.compile(r"^v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def bump(self, kind: BumpKind) -> SemVer:
        match kind:
            case "major":
                return SemVer(self.major + 1, 0, 0)
            case "minor":
                return SemVer(self.major, self.minor + 1, 0)
            case "patch":
                return SemVer(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected bump kind: {kind}")


def parse_version(text: str) -> SemVer | None:
    """Parse "1.2.3" or "v1.2.3". Pre-release and build suffixes are rejected."""
    m = _STABLE_RE.match(text.strip())
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def latest_version(tags: list[str]) -> SemVer | None:
    """Highest stable version among tags, ignoring tags that are not versions."""
    versions = [v for v in (parse_version(t) for t in tags) if v is not None]
    return max(versions, default=None)
