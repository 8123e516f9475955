from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

from retrieval.config import RetrievalConfig
from retrieval.engine import RetrievalEngine
from retrieval.exceptions import InitializationError

from .client import ChatClient
from .config import GenerationConfig
from .exceptions import GenerationTimeoutError
from .models import GenerateResponse
from .prompts import build_system_prompt, build_user_prompt
from .token_counter import count_tokens, truncate_to_tokens

logger = logging.getLogger(__name__)


class AssistantService:
    """
    Answers questions with retrieved context from the reference and
    library corpora.

    The retrieval query is CPU-bound and runs in a worker thread; the
    generation call is awaited with a timeout. Overlapping asks are
    processed one at a time.
    """

    def __init__(
        self,
        retrieval_config: RetrievalConfig | None = None,
        generation_config: GenerationConfig | None = None,
        engine: RetrievalEngine | None = None,
        client: ChatClient | None = None,
    ):
        self.retrieval_config = retrieval_config or RetrievalConfig.from_env()
        self.generation_config = generation_config or GenerationConfig.from_env()
        self.engine = engine or RetrievalEngine(self.retrieval_config)
        self._client = client
        self._lock = asyncio.Lock()

    @property
    def client(self) -> ChatClient:
        if self._client is None:
            self._client = ChatClient(self.generation_config)
        return self._client

    def initialize(self, reference_text: str, library_text: str) -> None:
        self.engine.initialize(reference_text, library_text)

    def initialize_from_files(
        self,
        reference_path: Optional[str] = None,
        library_path: Optional[str] = None,
    ) -> None:
        reference = _read_corpus("reference", reference_path or self.retrieval_config.reference_path)
        library = _read_corpus("library", library_path or self.retrieval_config.library_path)
        self.initialize(reference, library)

    async def ask(self, question: str, k_per_corpus: Optional[int] = None) -> GenerateResponse:
        """
        Retrieve context for question and ask the model.

        Raises:
            NotInitializedError: If the engine has not been initialized.
            GenerationConfigError: If API settings are missing.
            GenerationTimeoutError: If the model does not answer in time.
            GenerationError: If the API call fails.
        """
        async with self._lock:
            context = await asyncio.to_thread(self.engine.query, question, k_per_corpus)
            context = truncate_to_tokens(context, self.generation_config.max_context_tokens).strip()
            system_prompt = build_system_prompt(context)
            user_prompt = build_user_prompt(question)

            logger.info(
                "Asking model (context %d tokens, prompt %d tokens)",
                count_tokens(context),
                count_tokens(system_prompt) + count_tokens(user_prompt),
            )
            try:
                answer = await asyncio.wait_for(
                    self.client.generate(system_prompt, user_prompt),
                    timeout=self.generation_config.timeout_seconds,
                )
            except asyncio.TimeoutError as e:
                raise GenerationTimeoutError(self.generation_config.timeout_seconds) from e

        return GenerateResponse(
            question=question,
            answer=answer,
            context=context,
            metadata={
                "model": self.generation_config.api_model,
                "context_tokens": count_tokens(context),
                "k_per_corpus": (
                    self.retrieval_config.top_k_per_corpus
                    if k_per_corpus is None
                    else k_per_corpus
                ),
            },
        )


def _read_corpus(name: str, path: Optional[str]) -> str:
    if not path:
        raise InitializationError("No corpus path configured", corpus=name)
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InitializationError(
            "Cannot read corpus file", corpus=name, details=str(e)
        ) from e
