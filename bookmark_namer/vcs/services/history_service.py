"""Service for extracting commit history to summarize."""

import logging

from bookmark_namer.errors import EmptyHistoryError
from bookmark_namer.vcs.domain.templates import template_for
from bookmark_namer.vcs.domain.value_objects import CommitLog, LogFormat, ResolvedRevisions
from bookmark_namer.vcs.repositories.interfaces import VcsRepository

logger = logging.getLogger(__name__)


class HistoryService:
    """Service rendering the commit messages of a revision range."""

    def __init__(self, vcs_repository: VcsRepository) -> None:
        """
        Initialize HistoryService.

        Args:
            vcs_repository: Repository implementation for VCS operations
        """
        self._vcs_repository = vcs_repository

    def extract(
        self, resolved: ResolvedRevisions, log_format: LogFormat = LogFormat.ONE_LINE
    ) -> CommitLog:
        """
        Render the commit messages of a range.

        Args:
            resolved: Revisions to render
            log_format: First lines only, or full descriptions with separators

        Returns:
            CommitLog holding the rendered text

        Raises:
            EmptyHistoryError: If the range has no commit text
        """
        text = self._vcs_repository.log(resolved.range_expression, template_for(log_format))
        commit_log = CommitLog(range_expression=resolved.range_expression, text=text)

        if commit_log.is_empty:
            raise EmptyHistoryError(resolved.range_expression)

        logger.debug("Extracted %d lines of history", len(text.splitlines()))
        return commit_log
