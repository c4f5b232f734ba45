"""Release sequencing.

``ReleaseOrchestrator.release()`` runs a fail-fast sequence:

    Idle -> Validating -> TagCreated -> Published -> TagPushed
         -> VersionBumped -> Committed -> Done

The tag is created before publishing so every published artifact has a tag.
A failed publish deletes that tag again (the only compensating action) and
the stage returns to Idle. Any other failure stops where it happened; the
returned error carries a hint naming what is left to reconcile by hand.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from cutrel.core.config import ReleaseConfig
from cutrel.core.result import Err, Ok, Result
from cutrel.git.repository import GitError
from cutrel.output.console import ConsoleProtocol
from cutrel.platform.process import ProcessError
from cutrel.release.changelog import ensure_changelog_entry, section_heading
from cutrel.release.errors import (
    CommandFailureError,
    DirtyWorkingTreeError,
    InvalidVersionError,
    MissingParameterError,
    ReleaseError,
)
from cutrel.release.ports import ConfigStore, Publisher, VersionControl
from cutrel.release.version import ReleaseVersion, parse_version, releasable_version

__all__ = [
    "ReleaseOrchestrator",
    "ReleaseOutcome",
    "ReleaseSettings",
    "ReleaseStage",
    "TagOutcome",
]


class ReleaseStage(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    TAG_CREATED = "tag-created"
    PUBLISHED = "published"
    TAG_PUSHED = "tag-pushed"
    VERSION_BUMPED = "version-bumped"
    COMMITTED = "committed"
    DONE = "done"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ReleaseSettings:
    snapshot_suffix: str = "-SNAPSHOT"
    tag_prefix: str = "v"
    remote: str = "origin"
    commit_message: str = "Prepare next development version {version}"
    tag_message: str = "Release {version}"

    @classmethod
    def from_config(cls, config: ReleaseConfig) -> ReleaseSettings:
        return cls(
            snapshot_suffix=config.snapshot_suffix,
            tag_prefix=config.tag_prefix,
            remote=config.remote,
            commit_message=config.commit_message,
            tag_message=config.tag_message,
        )


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    version: ReleaseVersion
    tag: str
    next_version: ReleaseVersion
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class TagOutcome:
    tag: str
    commitish: str
    dry_run: bool = False


def _git_failure(error: GitError, *, hint: str | None = None) -> CommandFailureError:
    return CommandFailureError(
        command=error.command,
        returncode=error.returncode,
        output=error.message,
        hint=hint,
    )


def _process_failure(error: ProcessError, *, hint: str | None = None) -> CommandFailureError:
    # Streamed output has already been shown on the terminal.
    return CommandFailureError(
        command=error.command_line,
        returncode=error.returncode,
        output=error.stderr.strip(),
        hint=hint,
    )


class ReleaseOrchestrator:
    """Cuts releases over injected collaborators.

    Attributes:
        stage: Current position in the release state machine
        history: Every stage entered, in order, starting with IDLE
    """

    def __init__(
        self,
        *,
        store: ConfigStore,
        vcs: VersionControl,
        publisher: Publisher,
        changelog: Path,
        console: ConsoleProtocol,
        settings: ReleaseSettings | None = None,
        dry_run: bool = False,
    ) -> None:
        self.store = store
        self.vcs = vcs
        self.publisher = publisher
        self.changelog = changelog
        self.console = console
        self.settings = settings or ReleaseSettings()
        self.dry_run = dry_run
        self.stage = ReleaseStage.IDLE
        self.history: list[ReleaseStage] = [ReleaseStage.IDLE]

    def release(self) -> Result[ReleaseOutcome, ReleaseError]:
        """Validate, tag, publish, push the tag, then bump to the next snapshot."""
        s = self.settings
        self._enter(ReleaseStage.VALIDATING)

        raw_version = self.store.read_version()
        if isinstance(raw_version, Err):
            return raw_version

        parsed = releasable_version(raw_version.value, snapshot_marker=s.snapshot_suffix)
        if isinstance(parsed, Err):
            return parsed
        version = parsed.value
        # The bump runs after publishing, so its target line must exist now.
        writable = self.store.check_writable(str(version))
        if isinstance(writable, Err):
            return writable
        tag = version.to_tag(s.tag_prefix)
        self.console.info(f"releasing {version} as {tag}")

        checked = ensure_changelog_entry(changelog=self.changelog, version=str(version))
        if isinstance(checked, Err):
            return checked
        self.console.success(f"{self.changelog.name}: {section_heading(str(version))}")

        status = self.vcs.status()
        if isinstance(status, Err):
            return Err(_git_failure(status.error))
        if not status.value.is_clean:
            return Err(DirtyWorkingTreeError(status=status.value.raw))
        self.console.success("working tree clean")

        created = self._create_tag(tag, version=version, commitish="HEAD")
        if isinstance(created, Err):
            return created
        self._enter(ReleaseStage.TAG_CREATED)

        published = self._publish(tag)
        if isinstance(published, Err):
            return published
        self._enter(ReleaseStage.PUBLISHED)

        pushed = self._push_tag(
            tag,
            hint=(
                f"{version} is published but {tag} is only local. "
                f"Push it manually: git push {s.remote} refs/tags/{tag}"
            ),
        )
        if isinstance(pushed, Err):
            return pushed
        self._enter(ReleaseStage.TAG_PUSHED)

        next_version = version.next_snapshot(s.snapshot_suffix)
        self.console.header(f"Bump {self.store.path.name}: {version} -> {next_version}")
        if not self.dry_run:
            written = self.store.write_version(str(version), str(next_version))
            if isinstance(written, Err):
                return written
        self._enter(ReleaseStage.VERSION_BUMPED)

        committed = self._commit_and_push(next_version)
        if isinstance(committed, Err):
            return committed
        self._enter(ReleaseStage.COMMITTED)

        self._enter(ReleaseStage.DONE)
        self.console.success(f"released {version} ({tag}); next version {next_version}")
        return Ok(
            ReleaseOutcome(
                version=version, tag=tag, next_version=next_version, dry_run=self.dry_run
            )
        )

    def tag_release(
        self, version: str | None, commitish: str = "HEAD"
    ) -> Result[TagOutcome, ReleaseError]:
        """Tag ``version`` at ``commitish`` and push the tag.

        No changelog or working tree checks, and no compensation: a tag whose
        push failed stays in the local repository.
        """
        if version is None or not version.strip():
            return Err(
                MissingParameterError(
                    parameter="version",
                    usage="cutrel tag-release VERSION [COMMITISH]",
                )
            )

        parsed = parse_version(version)
        if parsed is None:
            return Err(
                InvalidVersionError(
                    version=version,
                    reason="not a MAJOR.MINOR.PATCH version",
                    hint="Expected e.g. 0.3.0",
                )
            )
        commitish = commitish.strip() or "HEAD"
        tag = parsed.to_tag(self.settings.tag_prefix)

        created = self._create_tag(tag, version=parsed, commitish=commitish)
        if isinstance(created, Err):
            return created

        remote = self.settings.remote
        pushed = self._push_tag(
            tag, hint=f"{tag} exists locally; retry with: git push {remote} refs/tags/{tag}"
        )
        if isinstance(pushed, Err):
            return pushed

        self.console.success(f"tagged {commitish} as {tag}")
        return Ok(TagOutcome(tag=tag, commitish=commitish, dry_run=self.dry_run))

    def _enter(self, stage: ReleaseStage) -> None:
        self.stage = stage
        self.history.append(stage)

    def _create_tag(
        self, tag: str, *, version: ReleaseVersion, commitish: str
    ) -> Result[None, ReleaseError]:
        message = self.settings.tag_message.format(version=version)
        self.console.header(f"Tag {tag}")
        self.console.command(["git", "tag", "-a", tag, "-m", message, commitish])
        if self.dry_run:
            return Ok(None)
        result = self.vcs.create_tag(tag, message=message, commitish=commitish)
        if isinstance(result, Err):
            return Err(_git_failure(result.error))
        return Ok(None)

    def _publish(self, tag: str) -> Result[None, ReleaseError]:
        self.console.header("Publish")
        self.console.command(self.publisher.command)
        if self.dry_run:
            return Ok(None)

        result = self.publisher.publish()
        if isinstance(result, Ok):
            return Ok(None)

        # A tag must never point at an unpublished artifact.
        self.console.warning(f"publish failed; deleting local tag {tag}")
        self.console.command(["git", "tag", "-d", tag])
        deleted = self.vcs.delete_tag(tag)
        if isinstance(deleted, Err):
            self.console.warning(f"could not delete {tag}: {deleted.error.message}")
            return Err(
                _process_failure(
                    result.error, hint=f"Delete the stale tag manually: git tag -d {tag}"
                )
            )

        self._enter(ReleaseStage.IDLE)
        return Err(_process_failure(result.error))

    def _push_tag(self, tag: str, *, hint: str) -> Result[None, ReleaseError]:
        remote = self.settings.remote
        self.console.command(["git", "push", remote, f"refs/tags/{tag}"])
        if self.dry_run:
            return Ok(None)
        result = self.vcs.push_tag(tag, remote=remote)
        if isinstance(result, Err):
            return Err(_git_failure(result.error, hint=hint))
        return Ok(None)

    def _commit_and_push(self, next_version: ReleaseVersion) -> Result[None, ReleaseError]:
        s = self.settings
        path = self.store.path
        message = s.commit_message.format(version=next_version)
        hint = (
            f"{path.name} already holds {next_version}; "
            f"commit and push it manually: git commit -m {shlex.quote(message)} "
            f"&& git push {s.remote} HEAD"
        )

        self.console.command(["git", "add", "--", str(path)])
        self.console.command(["git", "commit", "-m", message])
        self.console.command(["git", "push", s.remote, "HEAD"])
        if self.dry_run:
            return Ok(None)

        for step in (
            lambda: self.vcs.add([path]),
            lambda: self.vcs.commit(message),
            lambda: self.vcs.push(remote=s.remote),
        ):
            result = step()
            if isinstance(result, Err):
                return Err(_git_failure(result.error, hint=hint))
        return Ok(None)
