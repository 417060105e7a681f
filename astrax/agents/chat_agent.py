"""Chat Agent: career assistant replies for the chat widget."""

from typing import List

from astrax.exceptions import LLMRequestError
from astrax.schemas.chat import ChatMessage
from astrax.services.llm_client import LLMClient, complete_with_retry
from astrax.utils.logger import get_logger

logger = get_logger(__name__)

CHAT_SYSTEM_PROMPT = "You are a helpful career assistant."
CHAT_FALLBACK_REPLY = "Sorry, I am having trouble connecting."


async def get_chat_response(history: List[ChatMessage], message: str, client: LLMClient) -> str:
    """Reply to message given the prior conversation. LLM failures return CHAT_FALLBACK_REPLY."""
    messages = [{"role": "system", "content": CHAT_SYSTEM_PROMPT}]
    messages += [
        {"role": "assistant" if m.role == "model" else "user", "content": m.text} for m in history
    ]
    messages.append({"role": "user", "content": message})
    try:
        reply = await complete_with_retry(client, messages)
    except LLMRequestError as e:
        logger.warning("Chat request failed: %s", e)
        return CHAT_FALLBACK_REPLY
    return reply.strip() or CHAT_FALLBACK_REPLY
