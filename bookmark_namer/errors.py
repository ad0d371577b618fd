"""Errors raised by the bookmark naming pipeline.

Every component raises one of these and lets it propagate. Only the CLI driver
turns them into a message and a process exit code.
"""

import shlex
from collections.abc import Sequence


class BookmarkNamerError(RuntimeError):
    """Base class for fatal pipeline failures."""

    exit_code: int = 1


class EmptyHistoryError(BookmarkNamerError):
    """The resolved revision range holds no commit text to summarize."""

    def __init__(self, range_expression: str) -> None:
        self.range_expression = range_expression
        super().__init__(f"No commits to summarize in '{range_expression}'")


class SubprocessFailureError(BookmarkNamerError):
    """An external VCS command exited with a non-zero status."""

    def __init__(self, args: Sequence[str], returncode: int | None, stderr: str) -> None:
        self.args_ = tuple(args)
        self.returncode = returncode
        self.stderr = stderr
        if returncode is not None and returncode > 0:
            self.exit_code = returncode

        message = f"Command failed: {shlex.join(self.args_)}\nExit status: {returncode}"
        if stderr.strip():
            message += f"\nstderr: {stderr.rstrip()}"
        super().__init__(message)


class SpawnFailureError(BookmarkNamerError):
    """An external command could not be started at all."""

    def __init__(self, args: Sequence[str], cause: OSError) -> None:
        self.args_ = tuple(args)
        self.cause = cause
        super().__init__(f"Could not execute command {shlex.join(self.args_)}.\nCause: {cause}")


class BackendFailureError(BookmarkNamerError):
    """The generation backend failed or returned an unusable payload."""


class InvalidNameError(BookmarkNamerError):
    """The model output could not be reduced to a usable bookmark name."""
