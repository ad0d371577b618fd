"""Resolution of user-supplied revisions into a revset."""

import logging

from bookmark_namer.vcs.domain.value_objects import (
    DEFAULT_REVISION,
    TRUNK_ALIAS,
    WORKING_COPY_ALIAS,
    ResolvedRevisions,
    RevisionRange,
)

logger = logging.getLogger(__name__)


def resolve_revisions(
    revision: str | None = None,
    from_rev: str | None = None,
    to_rev: str | None = None,
) -> ResolvedRevisions:
    """
    Turn optional revision arguments into the revset to summarize.

    Either a single combined revset or explicit endpoints may be given, not
    both. With nothing given the range defaults to everything since trunk up
    to the working copy. Revset syntax is left for jj to check.

    Args:
        revision: Combined revset expression
        from_rev: Start of the range. Defaults to trunk().
        to_rev: End of the range and bookmark target. Defaults to @.

    Returns:
        ResolvedRevisions for the log and bookmark commands

    Raises:
        ValueError: If a combined revset is mixed with explicit endpoints
    """
    if revision is not None and (from_rev is not None or to_rev is not None):
        raise ValueError("A combined revision cannot be used with explicit range endpoints")

    if revision is not None:
        if not revision.strip():
            raise ValueError("Revision expression cannot be empty")
        resolved = ResolvedRevisions(range_expression=revision)
    elif from_rev is None and to_rev is None:
        resolved = ResolvedRevisions(range_expression=DEFAULT_REVISION)
    else:
        revision_range = RevisionRange(
            from_rev=from_rev if from_rev is not None else TRUNK_ALIAS,
            to_rev=to_rev if to_rev is not None else WORKING_COPY_ALIAS,
        )
        resolved = ResolvedRevisions(range_expression=revision_range.expression, target=to_rev)

    logger.debug("Resolved revisions: %s (target: %s)", resolved.range_expression, resolved.target)
    return resolved
