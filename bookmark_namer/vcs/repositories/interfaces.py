"""Repository interfaces for VCS operations."""

from abc import ABC, abstractmethod

from bookmark_namer.vcs.domain.value_objects import CommandResult


class VcsRepository(ABC):
    """Interface for the version-control commands the pipeline needs."""

    @abstractmethod
    def log(self, range_expression: str, template: str) -> str:
        """
        Render the revisions of a range with a log template.

        Args:
            range_expression: Revset selecting the revisions
            template: Template applied to every revision

        Returns:
            Rendered text, without graph decoration

        Raises:
            SubprocessFailureError: If the command exits with a non-zero status
            SpawnFailureError: If the command cannot be started
        """
        ...

    @abstractmethod
    def create_bookmark(self, name: str, revision: str | None = None) -> CommandResult:
        """
        Create a bookmark.

        Args:
            name: Bookmark name
            revision: Revision to point the bookmark at. Defaults to the working copy.

        Returns:
            Captured command output
        """
        ...

    @abstractmethod
    def push_bookmark(self, name: str, allow_new: bool = True) -> CommandResult:
        """
        Push a bookmark to the git remote.

        Args:
            name: Bookmark name
            allow_new: Allow creating the bookmark on the remote

        Returns:
            Captured command output
        """
        ...

    @abstractmethod
    def create_bookmark_command(self, name: str, revision: str | None = None) -> tuple[str, ...]:
        """Argument vector that create_bookmark would run."""
        ...

    @abstractmethod
    def push_bookmark_command(self, name: str, allow_new: bool = True) -> tuple[str, ...]:
        """Argument vector that push_bookmark would run."""
        ...
