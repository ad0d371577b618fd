"""Value objects for the naming domain."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFAULT_TEMPERATURE = 0.7
DEFAULT_TOP_K = 10
DEFAULT_TOP_P = 0.9


class NameStrictness(str, Enum):
    """How model output is turned into a bookmark name.

    LENIENT sanitizes free-form text. STRICT asks the backend for a
    schema-constrained JSON value and rejects anything that does not match.
    """

    LENIENT = "lenient"
    STRICT = "strict"


@dataclass(frozen=True)
class SamplingOptions:
    """Sampling controls sent with a generation request.

    Attributes:
        temperature: Creativity of the answer
        top_k: Size of the candidate-token pool
        top_p: Nucleus sampling applied on top of top_k
        max_tokens: Optional cap on generated tokens
    """

    temperature: float = DEFAULT_TEMPERATURE
    top_k: int = DEFAULT_TOP_K
    top_p: float = DEFAULT_TOP_P
    max_tokens: int | None = None

    def __post_init__(self) -> None:
        """Validate the sampling ranges."""
        if self.temperature < 0:
            raise ValueError(f"temperature must be >= 0, got {self.temperature}")
        if self.top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {self.top_k}")
        if not 0 < self.top_p <= 1:
            raise ValueError(f"top_p must be in (0, 1], got {self.top_p}")
        if self.max_tokens is not None and self.max_tokens < 1:
            raise ValueError(f"max_tokens must be >= 1, got {self.max_tokens}")


@dataclass(frozen=True)
class GenerationRequest:
    """Input for one call to the generation backend."""

    model: str
    prompt: str
    sampling: SamplingOptions = field(default_factory=SamplingOptions)
    structured_schema: dict[str, Any] | None = None


@dataclass(frozen=True)
class GenerationResponse:
    """Raw text returned by the generation backend."""

    text: str


@dataclass(frozen=True)
class BranchName:
    """Bookmark name ready to hand to the VCS.

    Attributes:
        base: Sanitized generated name, e.g. "add-login"
        prefix: Optional namespace, e.g. "feature"
    """

    base: str
    prefix: str | None = None

    def __post_init__(self) -> None:
        if not self.base:
            raise ValueError("Branch name cannot be empty")

    @property
    def value(self) -> str:
        if self.prefix:
            return f"{self.prefix}/{self.base}"
        return self.base

    def __str__(self) -> str:
        return self.value
