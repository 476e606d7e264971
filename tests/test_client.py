"""Tests for the Gemini client."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock

import openai
import pytest

from wdym.errors import ClientError
from wdym.llm import client as client_module
from wdym.llm.client import GeminiClient
from wdym.llm.utils import extract_text_from_content


def _response(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


@pytest.fixture
def ai():
    gemini = GeminiClient(api_key="test-key")
    gemini.initialize()
    yield gemini
    asyncio.run(gemini.cleanup())


def _stub_create(gemini, result):
    create = AsyncMock(return_value=result) if not isinstance(result, Exception) \
        else AsyncMock(side_effect=result)
    gemini.client.chat.completions.create = create
    return create


class TestGenerateResponse:

    def test_returns_first_candidate_text(self, ai):
        _stub_create(ai, _response("ls -la", "ignored"))
        assert asyncio.run(ai.generate_response("list files")) == "ls -la"

    def test_sends_fixed_sampling_parameters(self, ai):
        create = _stub_create(ai, _response("ok"))
        asyncio.run(ai.generate_response("hello"))

        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "gemini-1.5-flash"
        assert kwargs["messages"] == [{"role": "user", "content": "hello"}]
        assert kwargs["temperature"] == client_module.TEMPERATURE == 0.1
        assert kwargs["top_p"] == 0.95
        assert kwargs["max_tokens"] == 2048

    def test_no_candidates_is_client_error(self, ai):
        _stub_create(ai, SimpleNamespace(choices=[]))
        with pytest.raises(ClientError, match="no response candidates"):
            asyncio.run(ai.generate_response("x"))

    def test_empty_content_is_client_error(self, ai):
        _stub_create(ai, _response(None))
        with pytest.raises(ClientError, match="empty response"):
            asyncio.run(ai.generate_response("x"))

    def test_api_error_is_client_error(self, ai):
        _stub_create(ai, openai.OpenAIError("connection reset"))
        with pytest.raises(ClientError, match="failed to generate content"):
            asyncio.run(ai.generate_response("x"))

    def test_not_initialized(self):
        gemini = GeminiClient(api_key="k")
        with pytest.raises(ClientError, match="not initialized"):
            asyncio.run(gemini.generate_response("x"))


class TestRequestKinds:

    def test_shell_command_uses_shell_prompt(self, ai):
        create = _stub_create(ai, _response("du -sh *"))
        asyncio.run(ai.generate_shell_command("disk usage", shell="bash", os_info="Linux"))
        prompt = create.call_args.kwargs["messages"][0]["content"]
        assert "Shell: bash" in prompt
        assert "Request: disk usage" in prompt

    def test_edit_file_uses_edit_prompt(self, ai):
        create = _stub_create(ai, _response("new"))
        asyncio.run(ai.edit_file("a.txt", "old", "change it"))
        prompt = create.call_args.kwargs["messages"][0]["content"]
        assert prompt.startswith("You are a file editing expert.")
        assert "File Path: a.txt" in prompt


class TestCleanup:

    def test_cleanup_closes_client(self):
        gemini = GeminiClient(api_key="k")
        gemini.initialize()
        close = AsyncMock()
        gemini.client.close = close
        asyncio.run(gemini.cleanup())
        close.assert_awaited_once()
        assert gemini.client is None

    def test_cleanup_without_initialize(self):
        gemini = GeminiClient(api_key="k")
        asyncio.run(gemini.cleanup())
        assert gemini.client is None


class TestExtractText:

    def test_string_content(self):
        assert extract_text_from_content("abc") == "abc"

    def test_concatenates_text_parts_and_skips_others(self):
        parts = [
            {"type": "text", "text": "foo"},
            {"type": "image_url", "image_url": {"url": "x"}},
            {"type": "text", "text": "bar"},
        ]
        assert extract_text_from_content(parts) == "foobar"

    def test_none(self):
        assert extract_text_from_content(None) == ""
