"""Structured-output payload for strict bookmark names."""

from typing import Any

from pydantic import BaseModel, Field

STRICT_MIN_WORDS = 3
STRICT_MAX_WORDS = 5
STRICT_NAME_PATTERN = r"^[a-z]{1,10}(-[a-z]{1,10}){2,4}$"


class BranchNamePayload(BaseModel):
    name: str = Field(
        pattern=STRICT_NAME_PATTERN,
        description="Three to five lowercase words separated by single hyphens",
    )


def branch_name_schema() -> dict[str, Any]:
    """JSON schema the backend is asked to follow in strict mode."""
    return BranchNamePayload.model_json_schema()
