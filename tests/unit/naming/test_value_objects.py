"""Tests for naming value objects."""

import pytest

from bookmark_namer.naming.domain.prompt_config import PromptConfig
from bookmark_namer.naming.domain.value_objects import BranchName, SamplingOptions


@pytest.mark.parametrize(
    "kwargs",
    [
        {"temperature": -0.1},
        {"top_k": 0},
        {"top_p": 0.0},
        {"top_p": 1.01},
        {"max_tokens": 0},
    ],
)
def test_sampling_options_reject_out_of_range_values(kwargs: dict[str, float]) -> None:
    with pytest.raises(ValueError):
        SamplingOptions(**kwargs)  # type: ignore[arg-type]


def test_branch_name_value() -> None:
    assert BranchName(base="add-login").value == "add-login"
    assert BranchName(base="add-login", prefix="feature").value == "feature/add-login"
    assert str(BranchName(base="add-login", prefix="me")) == "me/add-login"


def test_branch_name_cannot_be_empty() -> None:
    with pytest.raises(ValueError):
        BranchName(base="")


def test_prompt_config_rejects_inverted_word_bounds() -> None:
    with pytest.raises(ValueError, match="Invalid word bounds"):
        PromptConfig(min_words=4, max_words=2)
