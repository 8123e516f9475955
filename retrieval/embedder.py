"""
TF-IDF Embedder - Local sparse-weight vectors, no external embedding service

Turns a text into an L2-normalized TF-IDF vector against a frozen
vocabulary. The vector has one position per vocabulary term.

Design:
- embed() is a pure function of its inputs plus the idf memo
- IdfCache belongs to one embedder (and so to one engine), never a module global
- EmbeddingProvider is the contract the engine depends on, so other
  strategies can replace TfidfEmbedder without touching VectorIndex or the chunker

Usage:
    from retrieval.embedder import TfidfEmbedder

    embedder = TfidfEmbedder.fit(chunks)
    vector = embedder.embed("where did the cat go")
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Optional, Protocol, Sequence, runtime_checkable

import numpy as np

from chunking.models import Chunk

from .exceptions import VocabularyStateError
from .tokenizer import tokenize
from .vocabulary import DocumentFrequencyTable, Vocabulary, VocabularyBuilder

logger = logging.getLogger(__name__)


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Anything that maps text to a fixed-length vector."""

    @property
    def dimensions(self) -> int: ...

    def embed(self, text: str) -> list[float]: ...


class IdfCache:
    """Memoized inverse document frequencies for one vocabulary."""

    def __init__(self) -> None:
        self._values: dict[str, float] = {}

    def get(
        self,
        term: str,
        df_table: DocumentFrequencyTable,
        total_chunks: int,
    ) -> float:
        value = self._values.get(term)
        if value is None:
            value = _idf(term, df_table, total_chunks)
            self._values[term] = value
        return value

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, term: object) -> bool:
        return term in self._values


def _idf(term: str, df_table: DocumentFrequencyTable, total_chunks: int) -> float:
    if total_chunks <= 0:
        return 0.0
    return math.log(total_chunks / max(df_table.lookup(term), 1))


def embed(
    text: str,
    vocabulary: Vocabulary,
    df_table: DocumentFrequencyTable,
    idf_cache: IdfCache,
    total_chunks: int,
) -> list[float]:
    """
    Compute the normalized TF-IDF vector of text.

    Args:
        text: Text to embed (chunk or query).
        vocabulary: Frozen vocabulary; its size fixes the vector length.
        df_table: Multi-chunk document frequencies.
        idf_cache: Memo for idf values of this vocabulary.
        total_chunks: Number of chunks the vocabulary was built from.

    Returns:
        Vector of len(vocabulary) floats with norm 1, or all zeros.

    Raises:
        VocabularyStateError: If the vocabulary is still being built.
    """
    if not vocabulary.is_frozen:
        raise VocabularyStateError(
            "Vocabulary must be frozen before embedding",
            state=vocabulary.state.value,
        )

    vector = np.zeros(len(vocabulary), dtype=np.float64)
    tokens = tokenize(text)
    if not tokens:
        return vector.tolist()

    # Out-of-vocabulary tokens still count toward the tf denominator.
    total_tokens = len(tokens)
    for term, count in Counter(tokens).items():
        index = vocabulary.index_of(term)
        if index is None:
            continue
        tf = count / total_tokens
        vector[index] = tf * idf_cache.get(term, df_table, total_chunks)

    norm = float(np.linalg.norm(vector))
    if norm > 0.0:
        vector /= norm
    return vector.tolist()


class TfidfEmbedder:
    """
    EmbeddingProvider backed by a corpus-specific vocabulary.

    Owns the vocabulary, document-frequency table and idf cache for exactly
    one corpus.
    """

    def __init__(
        self,
        vocabulary: Vocabulary,
        df_table: DocumentFrequencyTable,
        total_chunks: int,
        idf_cache: Optional[IdfCache] = None,
    ):
        self.vocabulary = vocabulary
        self.df_table = df_table
        self.total_chunks = total_chunks
        self.idf_cache = idf_cache if idf_cache is not None else IdfCache()

    @classmethod
    def fit(cls, chunks: Sequence[Chunk]) -> "TfidfEmbedder":
        """Build the vocabulary and document frequencies from chunks."""
        vocabulary, df_table = VocabularyBuilder().build(chunks)
        return cls(vocabulary, df_table, total_chunks=len(chunks))

    @property
    def dimensions(self) -> int:
        return len(self.vocabulary)

    def embed(self, text: str) -> list[float]:
        return embed(
            text,
            self.vocabulary,
            self.df_table,
            self.idf_cache,
            self.total_chunks,
        )

    def embed_batch(self, texts: list[str]) -> list[list[float]]:
        return [self.embed(text) for text in texts]
