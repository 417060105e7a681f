"""
Tests for the LLM boundary: retry, result classification and the HTTP provider.
"""

import asyncio
import json

import httpx
import pytest

import astrax.services.llm_client as llm_client
from astrax.exceptions import LLMRequestError, RateLimitedError
from astrax.schemas.llm_result import LLMParseFailure, LLMRateLimited, LLMSuccess, LLMUnavailable
from astrax.services.llm_client import (
    OpenAIClient,
    PollinationsClient,
    complete_with_retry,
    get_llm_client,
    request_json,
    run_sync,
)

MESSAGES = [{"role": "user", "content": "hi"}]


class TestCompleteWithRetry:
    """Exponential backoff on rate limits and transient errors."""

    def test_success_first_try(self, fake_llm):
        client = fake_llm(["ok"])
        assert asyncio.run(complete_with_retry(client, MESSAGES, backoff_seconds=0)) == "ok"
        assert len(client.calls) == 1

    def test_retries_rate_limit_then_succeeds(self, fake_llm):
        client = fake_llm([RateLimitedError("429"), RateLimitedError("429"), "ok"])
        result = asyncio.run(complete_with_retry(client, MESSAGES, max_retries=3, backoff_seconds=0))
        assert result == "ok"
        assert len(client.calls) == 3

    def test_retries_transient_error(self, fake_llm):
        client = fake_llm([LLMRequestError("timeout", retryable=True), "ok"])
        assert asyncio.run(complete_with_retry(client, MESSAGES, backoff_seconds=0)) == "ok"

    def test_non_retryable_raises_immediately(self, fake_llm):
        client = fake_llm([LLMRequestError("bad request"), "unused"])
        with pytest.raises(LLMRequestError):
            asyncio.run(complete_with_retry(client, MESSAGES, max_retries=3, backoff_seconds=0))
        assert len(client.calls) == 1

    def test_exhausted_raises_last_error(self, fake_llm):
        client = fake_llm([RateLimitedError("429")] * 2)
        with pytest.raises(RateLimitedError):
            asyncio.run(complete_with_retry(client, MESSAGES, max_retries=2, backoff_seconds=0))
        assert len(client.calls) == 2

    def test_backoff_doubles(self, fake_llm, monkeypatch):
        delays = []

        async def fake_sleep(delay):
            delays.append(delay)

        monkeypatch.setattr(llm_client.asyncio, "sleep", fake_sleep)
        client = fake_llm([RateLimitedError("429"), RateLimitedError("429"), "ok"])
        asyncio.run(complete_with_retry(client, MESSAGES, max_retries=3, backoff_seconds=0.5))
        assert delays == [0.5, 1.0]


class TestRequestJson:
    """Every outcome is an LLMResult."""

    def test_success(self, fake_llm):
        client = fake_llm(['{"a": 1}'])
        result = asyncio.run(request_json(client, "sys", "user", backoff_seconds=0))
        assert isinstance(result, LLMSuccess)
        assert result.data == {"a": 1}
        assert client.calls[0]["json_mode"] is True
        assert client.calls[0]["messages"][0] == {"role": "system", "content": "sys"}

    def test_fenced_json(self, fake_llm):
        client = fake_llm(['```json\n{"rankings": []}\n```'])
        result = asyncio.run(request_json(client, "sys", "user", backoff_seconds=0))
        assert result.status == "success"
        assert result.data == {"rankings": []}

    def test_parse_failure(self, fake_llm):
        client = fake_llm(["I cannot help with that."])
        result = asyncio.run(request_json(client, "sys", "user", backoff_seconds=0))
        assert isinstance(result, LLMParseFailure)
        assert result.raw_text == "I cannot help with that."

    def test_rate_limited(self, fake_llm):
        client = fake_llm([RateLimitedError("429")] * 3)
        result = asyncio.run(request_json(client, "sys", "user", max_retries=3, backoff_seconds=0))
        assert isinstance(result, LLMRateLimited)
        assert result.attempts == 3

    def test_unavailable(self, fake_llm):
        client = fake_llm([LLMRequestError("401 unauthorized")])
        result = asyncio.run(request_json(client, "sys", "user", backoff_seconds=0))
        assert isinstance(result, LLMUnavailable)
        assert "401" in result.message


class TestPollinationsClient:
    """HTTP provider error mapping."""

    def _client(self, handler) -> PollinationsClient:
        return PollinationsClient(url="https://llm.test/", transport=httpx.MockTransport(handler))

    def test_posts_messages(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(json.loads(request.content))
            return httpx.Response(200, text='{"ok": true}')

        reply = asyncio.run(self._client(handler).complete(MESSAGES, json_mode=True))
        assert reply == '{"ok": true}'
        assert seen["messages"] == MESSAGES
        assert seen["jsonMode"] is True

    def test_429_is_rate_limited(self):
        client = self._client(lambda request: httpx.Response(429))
        with pytest.raises(RateLimitedError):
            asyncio.run(client.complete(MESSAGES))

    def test_5xx_is_retryable(self):
        client = self._client(lambda request: httpx.Response(503))
        with pytest.raises(LLMRequestError) as exc_info:
            asyncio.run(client.complete(MESSAGES))
        assert exc_info.value.retryable is True

    def test_4xx_is_not_retryable(self):
        client = self._client(lambda request: httpx.Response(400))
        with pytest.raises(LLMRequestError) as exc_info:
            asyncio.run(client.complete(MESSAGES))
        assert exc_info.value.retryable is False

    def test_connection_error_is_retryable(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(LLMRequestError) as exc_info:
            asyncio.run(self._client(handler).complete(MESSAGES))
        assert exc_info.value.retryable is True


class TestGetLLMClient:
    def test_openai_with_key(self, monkeypatch):
        monkeypatch.setattr(llm_client, "OPENAI_API_KEY", "sk-test")
        assert isinstance(get_llm_client("openai"), OpenAIClient)

    def test_openai_without_key_falls_back(self, monkeypatch):
        monkeypatch.setattr(llm_client, "OPENAI_API_KEY", "")
        assert isinstance(get_llm_client("openai"), PollinationsClient)

    def test_explicit_pollinations(self):
        assert isinstance(get_llm_client("Pollinations"), PollinationsClient)


def test_run_sync():
    async def answer():
        return 42

    assert run_sync(answer()) == 42
