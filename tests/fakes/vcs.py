"""Fake implementation of VcsRepository for testing.

Records every command instead of running jj, so tests can assert on the
order of calls and on what would have been executed.
"""

from bookmark_namer.errors import SubprocessFailureError
from bookmark_namer.vcs.domain.value_objects import CommandResult
from bookmark_namer.vcs.repositories.interfaces import VcsRepository


class FakeVcsRepository(VcsRepository):
    """In-memory fake of the jj commands.

    Constructor Injection:
    - log_text is returned from every log() call
    - create_result / push_result are returned from the publish commands
    - fail_on names a command ("log", "create" or "push") that raises
      SubprocessFailureError with fail_code

    Examples:
        >>> vcs = FakeVcsRepository(log_text="fix bug\\n")
        >>> vcs.log("trunk()..@", "template")
        'fix bug\\n'
        >>> vcs.calls
        [('log', 'trunk()..@', 'template')]
    """

    def __init__(
        self,
        *,
        log_text: str = "",
        create_result: CommandResult | None = None,
        push_result: CommandResult | None = None,
        fail_on: str | None = None,
        fail_code: int = 1,
        fail_stderr: str = "Error: something went wrong",
    ) -> None:
        self._log_text = log_text
        self._create_result = create_result
        self._push_result = push_result
        self._fail_on = fail_on
        self._fail_code = fail_code
        self._fail_stderr = fail_stderr
        self.calls: list[tuple[str, ...]] = []

    def log(self, range_expression: str, template: str) -> str:
        self.calls.append(("log", range_expression, template))
        self._maybe_fail("log", ("jj", "log", "-r", range_expression))
        return self._log_text

    def create_bookmark(self, name: str, revision: str | None = None) -> CommandResult:
        command = self.create_bookmark_command(name, revision)
        self.calls.append(("create", *command))
        self._maybe_fail("create", command)
        return self._create_result or CommandResult(args=command, stdout="", stderr="")

    def push_bookmark(self, name: str, allow_new: bool = True) -> CommandResult:
        command = self.push_bookmark_command(name, allow_new)
        self.calls.append(("push", *command))
        self._maybe_fail("push", command)
        return self._push_result or CommandResult(args=command, stdout="", stderr="")

    def create_bookmark_command(self, name: str, revision: str | None = None) -> tuple[str, ...]:
        args = ["jj", "bookmark", "create", name]
        if revision is not None:
            args.extend(["--revision", revision])
        return tuple(args)

    def push_bookmark_command(self, name: str, allow_new: bool = True) -> tuple[str, ...]:
        args = ["jj", "git", "push", "--bookmark", name]
        if allow_new:
            args.append("--allow-new")
        return tuple(args)

    @property
    def call_kinds(self) -> list[str]:
        return [call[0] for call in self.calls]

    def _maybe_fail(self, kind: str, command: tuple[str, ...]) -> None:
        if self._fail_on == kind:
            raise SubprocessFailureError(command, self._fail_code, self._fail_stderr)
