"""End-to-end pipeline from a revision range to a published bookmark."""

import logging
from dataclasses import dataclass, field

from bookmark_namer.naming.domain.value_objects import NameStrictness, SamplingOptions
from bookmark_namer.naming.services.naming_service import NamingService
from bookmark_namer.vcs.domain.value_objects import LogFormat
from bookmark_namer.vcs.services.history_service import HistoryService
from bookmark_namer.vcs.services.publisher_service import PublishOutcome, PublisherService
from bookmark_namer.vcs.services.revision_resolver import resolve_revisions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkflowOptions:
    """Everything a single run needs, as given on the command line."""

    revision: str | None = None
    from_rev: str | None = None
    to_rev: str | None = None
    log_format: LogFormat = LogFormat.ONE_LINE
    sampling: SamplingOptions = field(default_factory=SamplingOptions)
    strictness: NameStrictness = NameStrictness.LENIENT
    model: str | None = None
    prefix: str | None = None
    dry_run: bool = False
    allow_new: bool = True


class BookmarkWorkflow:
    """Runs resolve, extract, name and publish once, in that order."""

    def __init__(
        self,
        history_service: HistoryService,
        naming_service: NamingService,
        publisher_service: PublisherService,
    ) -> None:
        self._history_service = history_service
        self._naming_service = naming_service
        self._publisher_service = publisher_service

    def run(self, options: WorkflowOptions) -> PublishOutcome:
        """
        Generate a bookmark name for a revision range and publish it.

        Each step finishes before the next starts. The first failure
        propagates and nothing after it runs.

        Args:
            options: Run configuration

        Returns:
            PublishOutcome of the publish step

        Raises:
            ValueError: If the revision arguments conflict
            BookmarkNamerError: On any fatal pipeline condition
        """
        resolved = resolve_revisions(options.revision, options.from_rev, options.to_rev)
        commit_log = self._history_service.extract(resolved, options.log_format)

        branch_name = self._naming_service.generate_name(
            commit_log,
            options.sampling,
            strictness=options.strictness,
            model=options.model,
            prefix=options.prefix,
        )
        logger.debug("Publishing %s (dry run: %s)", branch_name.value, options.dry_run)

        return self._publisher_service.publish(
            branch_name,
            target=resolved.target,
            dry_run=options.dry_run,
            allow_new=options.allow_new,
        )
