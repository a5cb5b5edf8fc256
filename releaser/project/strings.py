"""Rendering of release identifiers from templates."""

from __future__ import annotations

from dataclasses import dataclass

from releaser.core.config import Config
from releaser.project.operation import VersionUpdate


@dataclass(frozen=True, slots=True)
class ReleaseIdentifiers:
    branch_name: str
    commit_message: str
    tag_name: str
    remote_name: str


def render_identifiers(config: Config, update: VersionUpdate) -> ReleaseIdentifiers:
    """Render branch, commit, tag and remote names for update.

    TemplatesConfig rejects unknown placeholders, so this cannot fail.
    """
    fields = {
        "version": str(update.new),
        "old_version": str(update.old),
        "major": update.new.major,
        "minor": update.new.minor,
        "patch": update.new.patch,
    }
    templates = config.templates
    return ReleaseIdentifiers(
        branch_name=templates.branch.format_map(fields),
        commit_message=templates.commit.format_map(fields),
        tag_name=templates.tag.format_map(fields),
        remote_name=templates.remote.format_map(fields),
    )
