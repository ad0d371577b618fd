"""Concrete implementation of VCS operations using the jj command line."""

import logging
import os
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from bookmark_namer.errors import SpawnFailureError, SubprocessFailureError
from bookmark_namer.vcs.domain.value_objects import CommandResult
from bookmark_namer.vcs.repositories.interfaces import VcsRepository

logger = logging.getLogger(__name__)

DEFAULT_JJ_EXECUTABLE = "jj"


class JujutsuRepositoryImpl(VcsRepository):
    """Concrete implementation of VCS operations using jj commands."""

    def __init__(self, executable: str | None = None, cwd: Path | None = None) -> None:
        """
        Initialize the repository.

        Args:
            executable: jj executable. Defaults to JJ_EXECUTABLE or "jj".
            cwd: Working directory for commands. Defaults to the current directory.
        """
        self._executable = executable or os.getenv("JJ_EXECUTABLE", DEFAULT_JJ_EXECUTABLE)
        self._cwd = cwd

    def log(self, range_expression: str, template: str) -> str:
        result = self._run(["log", "-T", template, "--no-graph", "-r", range_expression])
        return result.stdout

    def create_bookmark(self, name: str, revision: str | None = None) -> CommandResult:
        return self._execute(self.create_bookmark_command(name, revision))

    def push_bookmark(self, name: str, allow_new: bool = True) -> CommandResult:
        return self._execute(self.push_bookmark_command(name, allow_new))

    def create_bookmark_command(self, name: str, revision: str | None = None) -> tuple[str, ...]:
        args = [self._executable, "bookmark", "create", name]
        if revision is not None:
            args.extend(["--revision", revision])
        return tuple(args)

    def push_bookmark_command(self, name: str, allow_new: bool = True) -> tuple[str, ...]:
        args = [self._executable, "git", "push", "--bookmark", name]
        if allow_new:
            args.append("--allow-new")
        return tuple(args)

    def _run(self, args: Sequence[str]) -> CommandResult:
        return self._execute((self._executable, *args))

    def _execute(self, command: Sequence[str]) -> CommandResult:
        """
        Run a command without a shell and capture its output.

        Raises:
            SubprocessFailureError: If the command exits with a non-zero status
            SpawnFailureError: If the command cannot be started
        """
        logger.debug("Running: %s", shlex.join(command))
        try:
            result = subprocess.run(
                list(command),
                cwd=self._cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise SubprocessFailureError(command, e.returncode, e.stderr or "") from e
        except OSError as e:
            raise SpawnFailureError(command, e) from e

        return CommandResult(args=tuple(command), stdout=result.stdout, stderr=result.stderr)
