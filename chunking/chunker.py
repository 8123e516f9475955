"""
Document Chunker - Sliding window chunking for the retrieval pipeline

Splits a raw corpus string into overlapping character windows.

Algorithm:
1. Validate chunk_size / overlap before touching the text.
2. Window i starts at i * (chunk_size - overlap) and spans chunk_size chars.
3. The final window is truncated to the remaining text.
4. Optionally (boundary_aware), a window end is pulled back to the last
   paragraph break, sentence end or whitespace inside the window; the next
   window then starts overlap chars before that end.

Usage:
    from chunking import DocumentChunker, ChunkingConfig

    chunker = DocumentChunker(ChunkingConfig(chunk_size=1000, overlap=200))
    chunks = chunker.chunk(reference_text)
"""

import logging
from typing import Optional

from .models import Chunk, ChunkingConfig, validate_chunk_params

logger = logging.getLogger(__name__)

# Preferred cut points, strongest first.
_BOUNDARIES = ("\n\n", ". ", "\n", " ")


def split_text(
    text: str,
    chunk_size: int,
    overlap: int,
    boundary_aware: bool = False,
) -> list[Chunk]:
    """
    Split text into overlapping windows.

    Args:
        text: The source document.
        chunk_size: Window length in characters (> 0).
        overlap: Characters shared by consecutive windows (0 <= overlap < chunk_size).
        boundary_aware: Prefer paragraph/sentence/word boundaries over hard cuts.

    Returns:
        Chunks in source order whose ranges exactly cover [0, len(text)).

    Raises:
        ConfigError: If chunk_size or overlap is invalid.
    """
    validate_chunk_params(chunk_size, overlap)

    chunks: list[Chunk] = []
    total = len(text)
    step = chunk_size - overlap
    start = 0

    while start < total:
        end = min(start + chunk_size, total)
        if boundary_aware and end < total:
            end = _find_boundary(text, start, end, overlap)

        chunks.append(Chunk(text=text[start:end], source_offset=start))

        if end >= total:
            break
        start = end - overlap if boundary_aware else start + step

    return chunks


def _find_boundary(text: str, start: int, end: int, overlap: int) -> int:
    """
    Find the best cut position in text[start:end].

    The cut must land after start + overlap so the next window still
    advances. Falls back to the hard cut when no boundary qualifies.
    """
    floor = start + overlap + 1
    for separator in _BOUNDARIES:
        pos = text.rfind(separator, floor, end)
        if pos != -1:
            cut = pos + len(separator)
            if floor <= cut <= end:
                return cut
    return end


class DocumentChunker:
    """Splits corpus text into overlapping chunks using a ChunkingConfig."""

    def __init__(self, config: Optional[ChunkingConfig] = None):
        self.config = config or ChunkingConfig()

    def chunk(self, text: str) -> list[Chunk]:
        chunks = split_text(
            text,
            chunk_size=self.config.chunk_size,
            overlap=self.config.overlap,
            boundary_aware=self.config.boundary_aware,
        )
        logger.debug(
            "Split %d chars into %d chunks (size=%d, overlap=%d)",
            len(text),
            len(chunks),
            self.config.chunk_size,
            self.config.overlap,
        )
        return chunks
