"""
Retrieval Engine - two independent corpora, one context string per question

Each corpus (by default "reference" and "library") gets its own chunks,
vocabulary, document frequencies, idf cache and vector index. No term
statistics are shared between corpora.

Lifecycle:
    engine = RetrievalEngine()
    engine.initialize(reference_text, library_text)   # all-or-nothing
    context = engine.query("How do I allocate memory?")

initialize and query are serialized by a per-engine lock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from chunking.chunker import DocumentChunker
from chunking.models import Chunk

from .config import RetrievalConfig
from .embedder import EmbeddingProvider, TfidfEmbedder
from .exceptions import InitializationError, NotInitializedError
from .models import CorpusStats, IndexEntry, RetrievalHit
from .vector_index import VectorIndex

logger = logging.getLogger(__name__)

EmbedderFactory = Callable[[Sequence[Chunk]], EmbeddingProvider]


@dataclass
class CorpusIndex:
    """Everything built for one corpus during initialize."""
    name: str
    chunks: list[Chunk]
    embedder: EmbeddingProvider
    index: VectorIndex

    def stats(self) -> CorpusStats:
        vocabulary = getattr(self.embedder, "vocabulary", None)
        df_table = getattr(self.embedder, "df_table", None)
        return CorpusStats(
            name=self.name,
            chunks=len(self.chunks),
            vocabulary_size=len(vocabulary) if vocabulary is not None else self.embedder.dimensions,
            df_entries=len(df_table) if df_table is not None else 0,
        )


class RetrievalEngine:
    def __init__(
        self,
        config: Optional[RetrievalConfig] = None,
        embedder_factory: Optional[EmbedderFactory] = None,
    ):
        self.config = config or RetrievalConfig()
        self.chunker = DocumentChunker(self.config.chunking)
        self._embedder_factory: EmbedderFactory = embedder_factory or TfidfEmbedder.fit
        self._lock = threading.Lock()
        self._corpora: Optional[dict[str, CorpusIndex]] = None

    @property
    def is_initialized(self) -> bool:
        return self._corpora is not None

    def initialize(self, reference_text: str, library_text: str) -> None:
        """
        Build one independent index per corpus.

        Raises:
            InitializationError: If either corpus cannot be indexed. No
                partial state is kept.
        """
        with self._lock:
            self._corpora = None
            texts = dict(zip(self.config.corpus_names, (reference_text, library_text)))

            corpora: dict[str, CorpusIndex] = {}
            for name in self.config.corpus_names:
                corpora[name] = self._build_corpus(name, texts[name])

            self._corpora = corpora
            for corpus in corpora.values():
                stats = corpus.stats()
                logger.info(
                    "Indexed corpus '%s': %d chunks, %d terms",
                    stats.name,
                    stats.chunks,
                    stats.vocabulary_size,
                )

    def _build_corpus(self, name: str, text: Optional[str]) -> CorpusIndex:
        if not isinstance(text, str):
            raise InitializationError(
                "Corpus must be text",
                corpus=name,
                details=f"got {type(text).__name__}",
            )
        if not text.strip():
            raise InitializationError("Corpus is empty", corpus=name)

        try:
            chunks = self.chunker.chunk(text)
            embedder = self._embedder_factory(chunks)
            if embedder.dimensions == 0:
                raise InitializationError("Corpus contains no indexable terms", corpus=name)
            entries = [
                IndexEntry(chunk_text=chunk.text, vector=embedder.embed(chunk.text))
                for chunk in chunks
            ]
            index = VectorIndex.build(entries)
        except InitializationError:
            raise
        except Exception as e:
            logger.warning("Failed to index corpus '%s': %s", name, e)
            raise InitializationError(
                "Failed to build corpus index",
                corpus=name,
                details=str(e),
            ) from e

        return CorpusIndex(name=name, chunks=chunks, embedder=embedder, index=index)

    def query_hits(
        self,
        question: str,
        k_per_corpus: Optional[int] = None,
    ) -> dict[str, list[RetrievalHit]]:
        """Ranked hits per corpus, in corpus order."""
        with self._lock:
            return self._query_hits(question, k_per_corpus)

    def _query_hits(
        self,
        question: str,
        k_per_corpus: Optional[int],
    ) -> dict[str, list[RetrievalHit]]:
        if self._corpora is None:
            raise NotInitializedError()
        k = self.config.top_k_per_corpus if k_per_corpus is None else k_per_corpus
        if k < 0:
            raise ValueError(f"k_per_corpus must be >= 0, got {k}")

        hits: dict[str, list[RetrievalHit]] = {}
        for name in self.config.corpus_names:
            corpus = self._corpora[name]
            query_vector = corpus.embedder.embed(question)
            hits[name] = corpus.index.search_hits(query_vector, k)
            logger.debug(
                "Query against '%s' returned %d hits (top score %.4f)",
                name,
                len(hits[name]),
                hits[name][0].score if hits[name] else 0.0,
            )
        return hits

    def query(self, question: str, k_per_corpus: Optional[int] = None) -> str:
        """
        Build the context string for question.

        Raises:
            NotInitializedError: If initialize has not succeeded.
        """
        with self._lock:
            hits = self._query_hits(question, k_per_corpus)
        return self.format_context(hits)

    def format_context(self, hits: dict[str, list[RetrievalHit]]) -> str:
        sections: list[str] = []
        for name, corpus_hits in hits.items():
            if not corpus_hits:
                continue
            body = self.config.chunk_separator.join(hit.text for hit in corpus_hits)
            sections.append(f"[{name}]\n{body}")
        return self.config.corpus_separator.join(sections)

    def stats(self) -> dict[str, CorpusStats]:
        with self._lock:
            if self._corpora is None:
                raise NotInitializedError()
            return {name: corpus.stats() for name, corpus in self._corpora.items()}
