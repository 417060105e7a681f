"""
LLM boundary: provider clients, retry with backoff, and tagged JSON results.

Clients raise RateLimitedError / LLMRequestError; request_json converts every
outcome into an LLMResult so agents never see raw transport errors or
unvalidated JSON.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Coroutine, Dict, List, Optional, TypeVar

import httpx

from astrax.config import (
    HTTP_TIMEOUT_SECONDS,
    LLM_BACKOFF_SECONDS,
    LLM_MAX_RETRIES,
    LLM_PROVIDER,
    MODEL_NAME,
    OPENAI_API_KEY,
    POLLINATIONS_MODEL,
    POLLINATIONS_URL,
)
from astrax.exceptions import LLMRequestError, RateLimitedError
from astrax.schemas.llm_result import (
    LLMParseFailure,
    LLMRateLimited,
    LLMResult,
    LLMSuccess,
    LLMUnavailable,
)
from astrax.utils.helpers import parse_llm_json
from astrax.utils.logger import get_logger

logger = get_logger(__name__)

Message = Dict[str, str]
T = TypeVar("T")


class LLMClient(ABC):
    """Chat-completion provider."""

    @abstractmethod
    async def complete(self, messages: List[Message], json_mode: bool = False) -> str:
        """
        Return the assistant reply text.
        Raises RateLimitedError on 429-class errors and LLMRequestError otherwise
        (retryable=True for timeouts, connection errors and 5xx).
        """
        ...


class OpenAIClient(LLMClient):
    """OpenAI chat completions (e.g. gpt-4o-mini)."""

    def __init__(self, api_key: str = OPENAI_API_KEY, model: str = MODEL_NAME) -> None:
        self._api_key = api_key
        self._model = model
        self._client = None

    def _get_client(self):
        if self._client is None:
            from openai import AsyncOpenAI

            self._client = AsyncOpenAI(api_key=self._api_key, timeout=HTTP_TIMEOUT_SECONDS, max_retries=0)
        return self._client

    async def complete(self, messages: List[Message], json_mode: bool = False) -> str:
        import openai

        kwargs: Dict[str, Any] = {"model": self._model, "messages": messages}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = await self._get_client().chat.completions.create(**kwargs)
        except openai.RateLimitError as e:
            raise RateLimitedError(f"OpenAI rate limit: {e}") from e
        except openai.APIConnectionError as e:
            raise LLMRequestError(f"OpenAI connection failed: {e}", retryable=True) from e
        except openai.APIStatusError as e:
            raise LLMRequestError(
                f"OpenAI HTTP {e.status_code}: {e}", retryable=e.status_code >= 500
            ) from e
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            raise LLMRequestError("No content returned from OpenAI")
        return choice.message.content


class PollinationsClient(LLMClient):
    """Keyless text endpoint accepting OpenAI-style messages."""

    def __init__(
        self,
        url: str = POLLINATIONS_URL,
        model: str = POLLINATIONS_MODEL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url
        self._model = model
        self._transport = transport

    async def complete(self, messages: List[Message], json_mode: bool = False) -> str:
        payload: Dict[str, Any] = {"messages": messages, "model": self._model}
        if json_mode:
            payload["jsonMode"] = True
        try:
            async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS, transport=self._transport) as client:
                response = await client.post(self._url, json=payload)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 429:
                raise RateLimitedError(f"Pollinations rate limit: {e}") from e
            raise LLMRequestError(f"Pollinations HTTP {status}", retryable=status >= 500) from e
        except (httpx.TimeoutException, httpx.TransportError) as e:
            raise LLMRequestError(f"Pollinations request failed: {e}", retryable=True) from e


def get_llm_client(provider: Optional[str] = None) -> LLMClient:
    """
    Return the configured LLM client (dependency injection).
    provider: override config; None uses LLM_PROVIDER.
    """
    p = (provider or LLM_PROVIDER).strip().lower()
    if p == "openai":
        if not OPENAI_API_KEY:
            logger.warning("OPENAI_API_KEY not set; falling back to pollinations")
            return PollinationsClient()
        return OpenAIClient()
    return PollinationsClient()


async def complete_with_retry(
    client: LLMClient,
    messages: List[Message],
    json_mode: bool = False,
    max_retries: Optional[int] = None,
    backoff_seconds: Optional[float] = None,
) -> str:
    """
    Call client.complete, retrying rate-limited and transient failures with
    exponential backoff (backoff * 2**attempt). max_retries is the total number
    of attempts. Non-retryable errors propagate immediately; after the last
    attempt the last error propagates.
    """
    attempts = max(1, LLM_MAX_RETRIES if max_retries is None else max_retries)
    backoff = LLM_BACKOFF_SECONDS if backoff_seconds is None else backoff_seconds
    for attempt in range(attempts):
        try:
            return await client.complete(messages, json_mode=json_mode)
        except LLMRequestError as e:
            if not e.retryable or attempt == attempts - 1:
                raise
            delay = backoff * (2 ** attempt)
            logger.warning("LLM call failed (attempt %s/%s), retrying in %.1fs: %s", attempt + 1, attempts, delay, e)
            await asyncio.sleep(delay)
    raise LLMRequestError("LLM retry loop exited without a result")


async def request_json(
    client: LLMClient,
    system_prompt: str,
    user_prompt: str,
    max_retries: Optional[int] = None,
    backoff_seconds: Optional[float] = None,
) -> LLMResult:
    """Ask for a JSON reply and classify the outcome as an LLMResult."""
    messages = [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]
    attempts = max(1, LLM_MAX_RETRIES if max_retries is None else max_retries)
    try:
        text = await complete_with_retry(client, messages, True, attempts, backoff_seconds)
    except RateLimitedError as e:
        logger.warning("LLM rate limited after %s attempts: %s", attempts, e)
        return LLMRateLimited(attempts=attempts, message=str(e))
    except LLMRequestError as e:
        logger.warning("LLM unavailable: %s", e)
        return LLMUnavailable(message=str(e))

    parsed = parse_llm_json(text)
    if parsed is None:
        logger.warning("LLM reply is not JSON (%s chars)", len(text or ""))
        return LLMParseFailure(raw_text=text or "", error="No valid JSON found in response")
    return LLMSuccess(data=parsed)


def run_sync(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine from synchronous code (e.g. Streamlit) on a fresh event loop."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()
