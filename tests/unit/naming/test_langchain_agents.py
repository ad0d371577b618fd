"""Tests for the LangChain generation agents and their factory."""

from unittest.mock import Mock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage

from bookmark_namer.errors import BackendFailureError
from bookmark_namer.naming.domain.schemas import branch_name_schema
from bookmark_namer.naming.domain.value_objects import GenerationRequest, SamplingOptions
from bookmark_namer.naming.repositories.base_langchain_agent import BaseLangChainAgent
from bookmark_namer.naming.repositories.factory import create_llm_agent
from bookmark_namer.naming.repositories.implementations import (
    LangChainClaudeAgent,
    LangChainOllamaAgent,
    LangChainOpenAIAgent,
)


class StubAgent(BaseLangChainAgent):
    def __init__(self, llm: object, structured: bool = False) -> None:
        super().__init__("stub-model")
        self._llm = llm
        self.supports_structured_output = structured
        self.seen: list[GenerationRequest] = []

    def _create_chat_model(self, request: GenerationRequest):  # type: ignore[no-untyped-def]
        self.seen.append(request)
        return self._llm


def _request(**kwargs: object) -> GenerationRequest:
    return GenerationRequest(model="stub-model", prompt="name these commits", **kwargs)  # type: ignore[arg-type]


def test_returns_response_text() -> None:
    agent = StubAgent(FakeListChatModel(responses=["fix bugs"]))

    assert agent.generate(_request()).text == "fix bugs"


def test_sends_prompt_as_single_human_message() -> None:
    llm = Mock()
    llm.invoke.return_value = AIMessage(content="fix bugs")

    StubAgent(llm).generate(_request())

    llm.invoke.assert_called_once_with([HumanMessage(content="name these commits")])


def test_list_content_is_flattened() -> None:
    llm = Mock()
    llm.invoke.return_value = AIMessage(content=["fix", {"type": "text", "text": "bugs"}])

    assert StubAgent(llm).generate(_request()).text == "fix bugs"


def test_transport_error_becomes_backend_failure() -> None:
    llm = Mock()
    llm.invoke.side_effect = ConnectionError("connection refused")

    with pytest.raises(BackendFailureError, match="connection refused"):
        StubAgent(llm).generate(_request())


def test_schema_on_unsupported_backend_fails_before_calling_it() -> None:
    llm = Mock()
    agent = StubAgent(llm, structured=False)

    with pytest.raises(BackendFailureError, match="does not support structured output"):
        agent.generate(_request(structured_schema=branch_name_schema()))

    llm.invoke.assert_not_called()
    assert agent.seen == []


def test_ollama_chat_model_gets_sampling_and_schema() -> None:
    schema = branch_name_schema()
    request = GenerationRequest(
        model="llama3.2",
        prompt="p",
        sampling=SamplingOptions(temperature=0.3, top_k=7, top_p=0.8, max_tokens=20),
        structured_schema=schema,
    )

    llm = LangChainOllamaAgent(base_url="http://localhost:11434")._create_chat_model(request)

    assert llm.model == "llama3.2"
    assert llm.temperature == 0.3
    assert llm.top_k == 7
    assert llm.top_p == 0.8
    assert llm.num_predict == 20
    assert llm.format == schema
    assert llm.base_url == "http://localhost:11434"


def test_ollama_defaults_come_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OLLAMA_MODEL", "qwen2.5")
    monkeypatch.delenv("OLLAMA_HOST", raising=False)

    agent = LangChainOllamaAgent()

    assert agent.default_model == "qwen2.5"
    assert agent.supports_structured_output


def test_ollama_default_model(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OLLAMA_MODEL", raising=False)

    assert LangChainOllamaAgent().default_model == "llama3.2"


def test_claude_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

    with pytest.raises(ValueError, match="ANTHROPIC_API_KEY"):
        LangChainClaudeAgent()


def test_openai_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        LangChainOpenAIAgent()


def test_factory_defaults_to_ollama(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LLM_PROVIDER", raising=False)

    assert isinstance(create_llm_agent(), LangChainOllamaAgent)


@pytest.mark.parametrize(
    ("provider", "env_var", "agent_type"),
    [
        ("claude", "ANTHROPIC_API_KEY", LangChainClaudeAgent),
        ("Anthropic", "ANTHROPIC_API_KEY", LangChainClaudeAgent),
        ("gpt", "OPENAI_API_KEY", LangChainOpenAIAgent),
    ],
)
def test_factory_reads_provider_from_environment(
    monkeypatch: pytest.MonkeyPatch, provider: str, env_var: str, agent_type: type
) -> None:
    monkeypatch.setenv("LLM_PROVIDER", provider)
    monkeypatch.setenv(env_var, "test-key")

    agent = create_llm_agent(model_name="some-model")

    assert isinstance(agent, agent_type)
    assert agent.default_model == "some-model"
    assert not agent.supports_structured_output


def test_factory_rejects_unknown_provider() -> None:
    with pytest.raises(ValueError, match="Invalid LLM_PROVIDER: llamafile"):
        create_llm_agent(provider="llamafile")
