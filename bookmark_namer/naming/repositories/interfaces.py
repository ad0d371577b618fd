"""Repository interfaces for text generation."""

from abc import ABC, abstractmethod

from bookmark_namer.naming.domain.value_objects import GenerationRequest, GenerationResponse


class LLMAgentRepository(ABC):
    """Interface for the backend that generates bookmark names."""

    #: Whether the backend can constrain its output to a JSON schema
    supports_structured_output: bool = False

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Model used when the caller does not name one."""
        ...

    @abstractmethod
    def generate(self, request: GenerationRequest) -> GenerationResponse:
        """
        Send a prompt to the backend and return the raw answer.

        Args:
            request: Prompt, model, sampling controls and optional output schema

        Returns:
            Raw response text

        Raises:
            BackendFailureError: If the call fails or the request cannot be honoured
        """
        ...
