"""Reduces raw model output to a bookmark name."""

import logging
import re

from pydantic import ValidationError

from bookmark_namer.errors import BackendFailureError, InvalidNameError
from bookmark_namer.naming.domain.schemas import BranchNamePayload
from bookmark_namer.naming.domain.value_objects import BranchName, NameStrictness

logger = logging.getLogger(__name__)


class NameSanitizer:
    """Turns generated text into a name safe to pass to jj."""

    WHITESPACE_RUN: re.Pattern[str] = re.compile(r"\s+")
    DISALLOWED_CHARACTERS: re.Pattern[str] = re.compile(r"[^a-z0-9-]+")
    HYPHEN_RUN: re.Pattern[str] = re.compile(r"-{2,}")
    # Lowercase words joined by hyphens, optionally nested with slashes
    PREFIX_PATTERN: re.Pattern[str] = re.compile(r"[a-z0-9]+(?:[-/][a-z0-9]+)*")

    def sanitize(
        self,
        raw: str,
        strictness: NameStrictness = NameStrictness.LENIENT,
        prefix: str | None = None,
    ) -> BranchName:
        """
        Produce a bookmark name from model output.

        Args:
            raw: Text returned by the generation backend
            strictness: LENIENT sanitizes free text. STRICT parses a JSON payload
                that must already match the strict name pattern.
            prefix: Optional namespace placed before the name with a slash

        Returns:
            BranchName

        Raises:
            InvalidNameError: If nothing usable remains, or the prefix is unusable
            BackendFailureError: If a strict payload cannot be parsed or validated
        """
        if strictness is NameStrictness.STRICT:
            base = self._parse_structured(raw)
        else:
            base = self.normalize(raw)

        if not base:
            raise InvalidNameError(f"Model output does not contain a usable name: {raw!r}")

        return BranchName(base=base, prefix=self._check_prefix(prefix))

    @classmethod
    def normalize(cls, raw: str) -> str:
        """Lowercase and turn whitespace and characters jj should not see into hyphens.

        Applying it to its own output changes nothing. This covers the generated
        part only: a slash is a separator here, so re-sanitize `BranchName.base`
        with the same prefix rather than the joined value.
        """
        name = raw.strip().lower()
        name = cls.WHITESPACE_RUN.sub("-", name)
        name = cls.DISALLOWED_CHARACTERS.sub("-", name)
        name = cls.HYPHEN_RUN.sub("-", name)
        return name.strip("-")

    @staticmethod
    def _parse_structured(raw: str) -> str:
        try:
            payload = BranchNamePayload.model_validate_json(raw)
        except ValidationError as e:
            logger.debug("Rejected structured payload: %r", raw)
            raise BackendFailureError(f"Malformed name payload from backend: {e}") from e
        return payload.name

    def _check_prefix(self, prefix: str | None) -> str | None:
        if not prefix:
            return None
        if not self.PREFIX_PATTERN.fullmatch(prefix):
            raise InvalidNameError(
                f"Invalid prefix {prefix!r}: use lowercase letters, digits, and single "
                "hyphens or slashes between them"
            )
        return prefix
