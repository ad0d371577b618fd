"""Base class for LangChain-based LLM agents."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from langchain_core.messages import HumanMessage

from bookmark_namer.errors import BackendFailureError
from bookmark_namer.naming.domain.value_objects import GenerationRequest, GenerationResponse
from bookmark_namer.naming.repositories.interfaces import LLMAgentRepository

if TYPE_CHECKING:
    from langchain_core.language_models.chat_models import BaseChatModel

logger = logging.getLogger(__name__)


class BaseLangChainAgent(LLMAgentRepository, ABC):
    """Base class for LangChain-based bookmark naming agents.

    Sampling controls travel with each request, so subclasses build a fresh
    chat model per call from the request.
    """

    def __init__(self, model_name: str) -> None:
        self._model_name = model_name

    @property
    def default_model(self) -> str:
        return self._model_name

    @abstractmethod
    def _create_chat_model(self, request: GenerationRequest) -> "BaseChatModel":
        """Build the chat model configured for this request."""
        ...

    def generate(self, request: GenerationRequest) -> GenerationResponse:
        """
        Generate raw text for a prompt.

        Args:
            request: Prompt, model, sampling controls and optional output schema

        Returns:
            GenerationResponse with the flattened response content

        Raises:
            BackendFailureError: If the LLM API call fails, or a schema is
                requested from a backend that cannot honour it
        """
        if request.structured_schema is not None and not self.supports_structured_output:
            raise BackendFailureError(
                f"{type(self).__name__} does not support structured output. "
                "Use the ollama provider or drop --strict."
            )

        logger.debug(
            "Generating with model %s (temperature=%s, top_k=%s, top_p=%s, max_tokens=%s)",
            request.model,
            request.sampling.temperature,
            request.sampling.top_k,
            request.sampling.top_p,
            request.sampling.max_tokens,
        )

        try:
            llm = self._create_chat_model(request)
            response = llm.invoke([HumanMessage(content=request.prompt)])
        except Exception as e:
            raise BackendFailureError(f"Failed to generate branch name: {str(e)}") from e

        text = self._content_to_text(response.content)
        logger.debug("Raw response: %r", text)
        return GenerationResponse(text=text)

    @staticmethod
    def _content_to_text(content: object) -> str:
        """Flatten chat message content into plain text."""
        if isinstance(content, str):
            return content
        elif isinstance(content, list):
            # If content is a list, extract text from it
            return " ".join(
                str(item) if isinstance(item, str) else str(item.get("text", ""))
                for item in content
            )
        else:
            return str(content)
