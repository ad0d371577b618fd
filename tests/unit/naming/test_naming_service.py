"""Tests for the naming service."""

import pytest

from bookmark_namer.errors import BackendFailureError
from bookmark_namer.naming.domain.schemas import STRICT_NAME_PATTERN
from bookmark_namer.naming.domain.value_objects import NameStrictness, SamplingOptions
from bookmark_namer.naming.services.naming_service import NamingService
from bookmark_namer.vcs.domain.value_objects import CommitLog
from tests.fakes.llm_agent import FakeLLMAgent

COMMIT_LOG = CommitLog(range_expression="trunk()..@", text="fix bug\nadd feature\n")


def test_generates_sanitized_name_from_backend_text() -> None:
    agent = FakeLLMAgent(response="  Fix   Bugs  ")

    branch_name = NamingService(agent).generate_name(COMMIT_LOG, SamplingOptions())

    assert branch_name.value == "fix-bugs"


def test_request_carries_sampling_model_and_commit_text() -> None:
    agent = FakeLLMAgent(response="fix bugs")
    sampling = SamplingOptions(temperature=0.2, top_k=5, top_p=0.5, max_tokens=16)

    NamingService(agent).generate_name(COMMIT_LOG, sampling, model="llama3.1")

    [request] = agent.requests
    assert request.model == "llama3.1"
    assert request.sampling == sampling
    assert "fix bug\nadd feature" in request.prompt
    assert request.structured_schema is None


def test_model_defaults_to_agent_default() -> None:
    agent = FakeLLMAgent(response="fix bugs", model="llama3.2")

    NamingService(agent).generate_name(COMMIT_LOG, SamplingOptions())

    assert agent.requests[0].model == "llama3.2"


def test_strict_mode_sends_schema_and_parses_payload() -> None:
    agent = FakeLLMAgent(response='{"name": "fix-parser-bugs"}')

    branch_name = NamingService(agent).generate_name(
        COMMIT_LOG, SamplingOptions(), strictness=NameStrictness.STRICT, prefix="fix"
    )

    schema = agent.requests[0].structured_schema
    assert schema is not None
    assert schema["properties"]["name"]["pattern"] == STRICT_NAME_PATTERN
    assert schema["required"] == ["name"]
    assert branch_name.value == "fix/fix-parser-bugs"


def test_backend_failure_propagates() -> None:
    agent = FakeLLMAgent(error=BackendFailureError("connection refused"))

    with pytest.raises(BackendFailureError, match="connection refused"):
        NamingService(agent).generate_name(COMMIT_LOG, SamplingOptions())


def test_each_call_builds_a_fresh_request() -> None:
    agent = FakeLLMAgent(response="fix bugs")
    service = NamingService(agent)

    service.generate_name(COMMIT_LOG, SamplingOptions())
    service.generate_name(COMMIT_LOG, SamplingOptions(temperature=0.1))

    first, second = agent.requests
    assert first is not second
    assert second.sampling.temperature == 0.1
