"""
In-memory vector index with exact top-k cosine search.

Entries keep their insertion order, which breaks ties between equal
similarities. A zero-magnitude vector on either side scores 0.0.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Union

import numpy as np

from .models import IndexEntry, RetrievalHit

logger = logging.getLogger(__name__)

EntryLike = Union[IndexEntry, tuple[str, Sequence[float]]]


class VectorIndex:
    def __init__(self, entries: Sequence[IndexEntry] = ()):
        dims = {len(entry.vector) for entry in entries}
        if len(dims) > 1:
            raise ValueError(f"Inconsistent vector dimensions in index: {sorted(dims)}")
        self._dimensions = dims.pop() if dims else 0

        # The matrix is the only copy of the vectors; entries are not retained.
        self._texts: list[str] = [entry.chunk_text for entry in entries]
        self._matrix = np.zeros((len(self._texts), self._dimensions), dtype=np.float64)
        for row, entry in enumerate(entries):
            self._matrix[row] = entry.vector
        self._norms = np.linalg.norm(self._matrix, axis=1)

    @classmethod
    def build(cls, entries: Iterable[EntryLike]) -> "VectorIndex":
        normalized = [
            entry if isinstance(entry, IndexEntry)
            else IndexEntry(chunk_text=entry[0], vector=list(entry[1]))
            for entry in entries
        ]
        index = cls(normalized)
        logger.debug("Built vector index: %d entries, %d dims", len(index), index.dimensions)
        return index

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def entries(self) -> list[IndexEntry]:
        """Entries rebuilt from the matrix rows."""
        return [
            IndexEntry(chunk_text=text, vector=row.tolist())
            for text, row in zip(self._texts, self._matrix)
        ]

    def __len__(self) -> int:
        return len(self._texts)

    def similarities(self, query_vector: Sequence[float]) -> np.ndarray:
        """Cosine similarity of query_vector against every entry, in insertion order."""
        if not self._texts:
            return np.zeros(0)
        query = np.asarray(query_vector, dtype=np.float64)
        if query.shape != (self._dimensions,):
            raise ValueError(
                f"Query has {query.shape[0] if query.ndim else 0} dims, index has {self._dimensions}"
            )
        dots = self._matrix @ query
        denom = self._norms * float(np.linalg.norm(query))
        return np.divide(dots, denom, out=np.zeros_like(dots), where=denom > 0)

    def search_hits(self, query_vector: Sequence[float], k: int) -> list[RetrievalHit]:
        if k < 0:
            raise ValueError(f"k must be >= 0, got {k}")
        if not self._texts or k == 0:
            return []

        scores = self.similarities(query_vector)
        # Stable sort on negated scores keeps insertion order among ties.
        order = np.argsort(-scores, kind="stable")[:k]
        return [
            RetrievalHit(
                text=self._texts[position],
                score=float(scores[position]),
                rank=rank,
                position=int(position),
            )
            for rank, position in enumerate(order, start=1)
        ]

    def search(self, query_vector: Sequence[float], k: int) -> list[str]:
        return [hit.text for hit in self.search_hits(query_vector, k)]
