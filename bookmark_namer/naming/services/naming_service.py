"""Naming service for turning commit history into a bookmark name."""

import logging

from bookmark_namer.naming.domain.schemas import branch_name_schema
from bookmark_namer.naming.domain.value_objects import (
    BranchName,
    GenerationRequest,
    NameStrictness,
    SamplingOptions,
)
from bookmark_namer.naming.repositories.interfaces import LLMAgentRepository
from bookmark_namer.naming.services.name_sanitizer import NameSanitizer
from bookmark_namer.naming.services.prompt_builder import PromptBuilder
from bookmark_namer.vcs.domain.value_objects import CommitLog

logger = logging.getLogger(__name__)


class NamingService:
    """Service chaining prompt building, generation and sanitizing."""

    def __init__(
        self,
        llm_agent: LLMAgentRepository,
        prompt_builder: PromptBuilder | None = None,
        sanitizer: NameSanitizer | None = None,
    ) -> None:
        """
        Initialize NamingService.

        Args:
            llm_agent: Repository for LLM-based generation
            prompt_builder: Builder for the naming prompt. Defaults to PromptBuilder()
            sanitizer: Sanitizer for raw output. Defaults to NameSanitizer()
        """
        self._llm_agent = llm_agent
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._sanitizer = sanitizer or NameSanitizer()

    def build_request(
        self,
        commit_log: CommitLog,
        sampling: SamplingOptions,
        strictness: NameStrictness = NameStrictness.LENIENT,
        model: str | None = None,
    ) -> GenerationRequest:
        """Build a fresh generation request for a commit log."""
        schema = branch_name_schema() if strictness is NameStrictness.STRICT else None
        return GenerationRequest(
            model=model or self._llm_agent.default_model,
            prompt=self._prompt_builder.build(commit_log),
            sampling=sampling,
            structured_schema=schema,
        )

    def generate_name(
        self,
        commit_log: CommitLog,
        sampling: SamplingOptions,
        strictness: NameStrictness = NameStrictness.LENIENT,
        model: str | None = None,
        prefix: str | None = None,
    ) -> BranchName:
        """
        Generate a bookmark name summarizing a commit log.

        Args:
            commit_log: Rendered commit messages
            sampling: Sampling controls for the backend
            strictness: Free-form sanitizing or schema-constrained output
            model: Optional model override
            prefix: Optional namespace for the name

        Returns:
            BranchName ready to publish

        Raises:
            BackendFailureError: If generation fails or returns an unusable payload
            InvalidNameError: If the output cannot be reduced to a name
        """
        request = self.build_request(commit_log, sampling, strictness, model)
        response = self._llm_agent.generate(request)
        branch_name = self._sanitizer.sanitize(response.text, strictness, prefix)
        logger.debug("Generated branch name: %s", branch_name.value)
        return branch_name
