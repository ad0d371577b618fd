"""Factory for creating LLM agent instances."""

import os
from pathlib import Path

from dotenv import load_dotenv

from bookmark_namer.naming.repositories.implementations import (
    LangChainClaudeAgent,
    LangChainOllamaAgent,
    LangChainOpenAIAgent,
)
from bookmark_namer.naming.repositories.interfaces import LLMAgentRepository

DEFAULT_PROVIDER = "ollama"
PROVIDERS = ("ollama", "anthropic", "claude", "openai", "gpt")


def load_env_file(directory: Path | None = None) -> None:
    """Load environment variables from a .env file."""
    env_file = (directory or Path.cwd()) / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Fallback: let python-dotenv locate a .env file
        load_dotenv()


def create_llm_agent(
    provider: str | None = None, model_name: str | None = None
) -> LLMAgentRepository:
    """
    Create an LLM agent instance based on configuration.

    Args:
        provider: Optional provider override. Defaults to LLM_PROVIDER, then ollama.
        model_name: Optional model name override. If not provided, uses
                   model-specific env vars.

    Returns:
        LLM agent instance (Ollama, Claude or OpenAI)

    Raises:
        ValueError: If the provider is invalid or required API keys are missing
    """
    provider = (provider or os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER)).lower()

    if provider == "ollama":
        return LangChainOllamaAgent(model_name=model_name)
    elif provider == "anthropic" or provider == "claude":
        return LangChainClaudeAgent(model_name=model_name)
    elif provider == "openai" or provider == "gpt":
        return LangChainOpenAIAgent(model_name=model_name)
    else:
        raise ValueError(
            f"Invalid LLM_PROVIDER: {provider}. Supported values: {', '.join(PROVIDERS)}"
        )
