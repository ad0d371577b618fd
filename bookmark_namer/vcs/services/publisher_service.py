"""Service for creating and pushing bookmarks."""

import shlex
import sys
from dataclasses import dataclass
from typing import TextIO

from bookmark_namer.naming.domain.value_objects import BranchName
from bookmark_namer.vcs.domain.value_objects import CommandResult
from bookmark_namer.vcs.repositories.interfaces import VcsRepository

DRY_RUN_MARKER = "[dry run]"


@dataclass(frozen=True)
class PublishOutcome:
    """What the publisher did, or would have done in a dry run."""

    branch_name: BranchName
    dry_run: bool
    commands: tuple[tuple[str, ...], ...]
    results: tuple[CommandResult, ...] = ()


class PublisherService:
    """Service creating a bookmark and pushing it."""

    def __init__(
        self,
        vcs_repository: VcsRepository,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        """
        Initialize PublisherService.

        Args:
            vcs_repository: Repository implementation for VCS operations
            stdout: Stream receiving command output. Defaults to sys.stdout.
            stderr: Stream receiving command errors. Defaults to sys.stderr.
        """
        self._vcs_repository = vcs_repository
        self._stdout = stdout
        self._stderr = stderr

    def publish(
        self,
        branch_name: BranchName,
        target: str | None = None,
        dry_run: bool = False,
        allow_new: bool = True,
    ) -> PublishOutcome:
        """
        Create the bookmark at the target revision, then push it.

        In dry-run mode the commands are printed and nothing is run. Otherwise
        a failure of the create step stops before the push. A bookmark that was
        created before a failed push is left in place.

        Args:
            branch_name: Bookmark to publish
            target: Revision for the bookmark. None uses the working copy.
            dry_run: Print the commands instead of running them
            allow_new: Allow creating the bookmark on the remote

        Returns:
            PublishOutcome describing the commands

        Raises:
            SubprocessFailureError: If a command exits with a non-zero status
            SpawnFailureError: If a command cannot be started
        """
        name = branch_name.value
        create_command = self._vcs_repository.create_bookmark_command(name, target)
        push_command = self._vcs_repository.push_bookmark_command(name, allow_new)
        commands = (create_command, push_command)

        if dry_run:
            for command in commands:
                print(f"{DRY_RUN_MARKER} {shlex.join(command)}", file=self._out)
            return PublishOutcome(branch_name=branch_name, dry_run=True, commands=commands)

        create_result = self._vcs_repository.create_bookmark(name, target)
        self._relay(create_result)

        push_result = self._vcs_repository.push_bookmark(name, allow_new)
        self._relay(push_result)

        return PublishOutcome(
            branch_name=branch_name,
            dry_run=False,
            commands=commands,
            results=(create_result, push_result),
        )

    @property
    def _out(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def _err(self) -> TextIO:
        return self._stderr or sys.stderr

    def _relay(self, result: CommandResult) -> None:
        """Forward non-empty command output to the user."""
        if result.stdout.strip():
            print(result.stdout.rstrip("\n"), file=self._out)
        if result.stderr.strip():
            print(result.stderr.rstrip("\n"), file=self._err)
