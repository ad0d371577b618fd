"""Value objects for the VCS domain."""

from dataclasses import dataclass
from enum import Enum

TRUNK_ALIAS = "trunk()"
WORKING_COPY_ALIAS = "@"
DEFAULT_REVISION = f"{TRUNK_ALIAS}..{WORKING_COPY_ALIAS}"

# Separates commit bodies in the full log template
COMMIT_SEPARATOR = "---"


class LogFormat(str, Enum):
    """Template used to render commit messages."""

    ONE_LINE = "one-line"
    FULL = "full"


@dataclass(frozen=True)
class RevisionRange:
    """Range of revisions between two revision expressions."""

    from_rev: str = TRUNK_ALIAS
    to_rev: str = WORKING_COPY_ALIAS

    def __post_init__(self) -> None:
        """Validate that both endpoints are present."""
        if not self.from_rev.strip():
            raise ValueError("Revision range start cannot be empty")
        if not self.to_rev.strip():
            raise ValueError("Revision range end cannot be empty")

    @property
    def expression(self) -> str:
        """Revset expression selecting the range."""
        return f"{self.from_rev}..{self.to_rev}"


@dataclass(frozen=True)
class ResolvedRevisions:
    """Revset to summarize plus the revision the bookmark points at.

    Attributes:
        range_expression: Revset passed verbatim to ``jj log -r``
        target: Revision for ``jj bookmark create --revision``, or None to
            let jj use the working-copy revision
    """

    range_expression: str
    target: str | None = None


@dataclass(frozen=True)
class CommitLog:
    """Commit messages rendered by the VCS for a revision range."""

    range_expression: str
    text: str

    @property
    def is_empty(self) -> bool:
        """True when no line carries anything besides whitespace or separators."""
        return not any(
            line.strip() and line.strip() != COMMIT_SEPARATOR for line in self.text.splitlines()
        )


@dataclass(frozen=True)
class CommandResult:
    """Captured output of one external command."""

    args: tuple[str, ...]
    stdout: str
    stderr: str
