"""
Vocabulary and document-frequency tables for TF-IDF retrieval.

A Vocabulary moves through two states:

    BUILDING --freeze()--> FROZEN

Terms can only be added while BUILDING; embedding requires FROZEN. The
VocabularyBuilder returns a frozen vocabulary together with the document
frequencies observed over the chunk corpus.

Usage:
    vocabulary, df_table = VocabularyBuilder().build(chunks)
    vocabulary.index_of("cat")   # -> 1
    df_table.lookup("the")       # -> 2
"""

from __future__ import annotations

import logging
from collections import Counter
from enum import Enum
from typing import Iterator, Optional, Sequence

from chunking.models import Chunk

from .exceptions import VocabularyStateError
from .tokenizer import distinct_tokens

logger = logging.getLogger(__name__)


class VocabularyState(str, Enum):
    BUILDING = "building"
    FROZEN = "frozen"


class Vocabulary:
    """Mapping from term to a stable vector position, assigned in first-seen order."""

    def __init__(self) -> None:
        self._index: dict[str, int] = {}
        self._state = VocabularyState.BUILDING

    @property
    def state(self) -> VocabularyState:
        return self._state

    @property
    def is_frozen(self) -> bool:
        return self._state is VocabularyState.FROZEN

    def add(self, term: str) -> int:
        """Return the index of term, assigning the next one if it is new."""
        if self.is_frozen:
            raise VocabularyStateError(
                f"Cannot add term {term!r} to a frozen vocabulary",
                state=self._state.value,
            )
        index = self._index.get(term)
        if index is None:
            index = len(self._index)
            self._index[term] = index
        return index

    def freeze(self) -> "Vocabulary":
        self._state = VocabularyState.FROZEN
        return self

    def index_of(self, term: str) -> Optional[int]:
        return self._index.get(term)

    def terms(self) -> list[str]:
        return list(self._index)

    def as_dict(self) -> dict[str, int]:
        return dict(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, term: object) -> bool:
        return term in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)}, state={self._state.value})"


class DocumentFrequencyTable:
    """
    Chunk counts for terms that occur in more than one chunk.

    Terms seen in a single chunk are not stored; lookup() treats any
    missing term as a document frequency of 1.
    """

    def __init__(self, counts: Optional[dict[str, int]] = None):
        self._counts: dict[str, int] = dict(counts or {})

    def lookup(self, term: str) -> int:
        return self._counts.get(term, 1)

    def as_dict(self) -> dict[str, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, term: object) -> bool:
        return term in self._counts

    def __repr__(self) -> str:
        return f"DocumentFrequencyTable(entries={len(self)})"


class VocabularyBuilder:
    """Scans a chunk corpus once to build a frozen vocabulary and df table."""

    def build(self, chunks: Sequence[Chunk]) -> tuple[Vocabulary, DocumentFrequencyTable]:
        vocabulary = Vocabulary()
        chunk_counts: Counter[str] = Counter()

        for chunk in chunks:
            for term in distinct_tokens(chunk.text):
                vocabulary.add(term)
                chunk_counts[term] += 1

        df_table = DocumentFrequencyTable(
            {term: count for term, count in chunk_counts.items() if count > 1}
        )
        vocabulary.freeze()

        logger.debug(
            "Built vocabulary: %d terms from %d chunks (%d multi-chunk terms)",
            len(vocabulary),
            len(chunks),
            len(df_table),
        )
        return vocabulary, df_table
