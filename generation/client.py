"""
Chat client for an OpenAI-compatible completion endpoint.

Wraps openai.AsyncOpenAI so the generation call can be awaited from the
event loop that drives the chat surface.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from openai import APIConnectionError, APIError, AsyncOpenAI

from .config import GenerationConfig
from .exceptions import GenerationError

logger = logging.getLogger(__name__)


class ChatClient:
    def __init__(self, config: GenerationConfig, client: Optional[Any] = None):
        config.validate()
        self.config = config
        self._client = client or AsyncOpenAI(
            base_url=config.api_url,
            api_key=config.api_key,
            timeout=config.timeout_seconds,
            default_headers={
                "HTTP-Referer": config.referer,
                "X-Title": config.title,
            },
        )

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """
        Send one system + user message pair and return the reply text.

        Raises:
            GenerationError: If the API cannot be reached or rejects the request.
        """
        try:
            completion = await self._client.chat.completions.create(
                model=self.config.api_model,
                temperature=self.config.temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except APIConnectionError as e:
            raise GenerationError(
                f"Cannot reach {self.config.api_url}", details=str(e)
            ) from e
        except APIError as e:
            raise GenerationError("Chat completion failed", details=str(e)) from e

        choice = completion.choices[0]
        content = (choice.message.content or "").strip()
        logger.debug(
            "Completion finished (model=%s, finish_reason=%s, %d chars)",
            self.config.api_model,
            getattr(choice, "finish_reason", None),
            len(content),
        )
        if not content:
            raise GenerationError("Empty response from model")
        return content
