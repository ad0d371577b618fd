"""Concrete implementations of bookmark naming using LangChain."""

import logging
import os

from langchain_anthropic import ChatAnthropic
from langchain_ollama import ChatOllama
from langchain_openai import ChatOpenAI

from bookmark_namer.naming.domain.value_objects import GenerationRequest
from bookmark_namer.naming.repositories.base_langchain_agent import BaseLangChainAgent

logger = logging.getLogger(__name__)

DEFAULT_OLLAMA_MODEL = "llama3.2"
DEFAULT_ANTHROPIC_MODEL = "claude-3-5-haiku-latest"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_ANTHROPIC_MAX_TOKENS = 1024


class LangChainOllamaAgent(BaseLangChainAgent):
    """LangChain implementation using a local Ollama service."""

    supports_structured_output = True

    def __init__(self, model_name: str | None = None, base_url: str | None = None) -> None:
        """
        Initialize the Ollama agent.

        Args:
            model_name: Optional model name override. Defaults to OLLAMA_MODEL or llama3.2
            base_url: Ollama server URL. Defaults to OLLAMA_HOST, then the client default.
        """
        super().__init__(model_name or os.getenv("OLLAMA_MODEL", DEFAULT_OLLAMA_MODEL))
        self._base_url = base_url or os.getenv("OLLAMA_HOST") or None

    def _create_chat_model(self, request: GenerationRequest) -> ChatOllama:
        sampling = request.sampling
        return ChatOllama(
            model=request.model,
            base_url=self._base_url,
            temperature=sampling.temperature,
            top_k=sampling.top_k,
            top_p=sampling.top_p,
            num_predict=sampling.max_tokens,
            format=request.structured_schema,
        )


class LangChainClaudeAgent(BaseLangChainAgent):
    """LangChain implementation using Claude."""

    def __init__(self, model_name: str | None = None) -> None:
        """
        Initialize the Claude agent with API key from environment.

        Args:
            model_name: Optional model name override. Defaults to ANTHROPIC_MODEL
                or claude-3-5-haiku-latest
        """
        if not os.getenv("ANTHROPIC_API_KEY"):
            raise ValueError(
                "ANTHROPIC_API_KEY environment variable is required. "
                "Please set it in a .env file or as an environment variable."
            )

        super().__init__(model_name or os.getenv("ANTHROPIC_MODEL", DEFAULT_ANTHROPIC_MODEL))

    def _create_chat_model(self, request: GenerationRequest) -> ChatAnthropic:
        sampling = request.sampling
        return ChatAnthropic(  # type: ignore[call-arg]
            model_name=request.model,
            temperature=sampling.temperature,
            top_k=sampling.top_k,
            top_p=sampling.top_p,
            max_tokens=sampling.max_tokens or DEFAULT_ANTHROPIC_MAX_TOKENS,
        )


class LangChainOpenAIAgent(BaseLangChainAgent):
    """LangChain implementation using OpenAI."""

    def __init__(self, model_name: str | None = None) -> None:
        """
        Initialize the OpenAI agent with API key from environment.

        Args:
            model_name: Optional model name override. Defaults to OPENAI_MODEL or gpt-4o-mini
        """
        if not os.getenv("OPENAI_API_KEY"):
            raise ValueError(
                "OPENAI_API_KEY environment variable is required. "
                "Please set it in a .env file or as an environment variable."
            )

        super().__init__(model_name or os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL))

    def _create_chat_model(self, request: GenerationRequest) -> ChatOpenAI:
        sampling = request.sampling
        # The OpenAI API has no top-k control
        logger.debug("Ignoring top_k=%s for OpenAI", sampling.top_k)
        return ChatOpenAI(  # type: ignore[call-arg]
            model_name=request.model,
            temperature=sampling.temperature,
            top_p=sampling.top_p,
            max_tokens=sampling.max_tokens,
        )
