"""
Chunking Module - Overlapping character windows for retrieval

Splits long reference documents into overlapping chunks that are later
tokenized, vectorized and indexed by the retrieval package.

Quick Start:
    from chunking import DocumentChunker, ChunkingConfig

    chunker = DocumentChunker(ChunkingConfig(chunk_size=1000, overlap=200))
    chunks = chunker.chunk(text)
"""

__version__ = "1.0.0"

from .chunker import DocumentChunker, split_text
from .exceptions import ConfigError
from .models import Chunk, ChunkingConfig

__all__ = [
    "__version__",
    "DocumentChunker",
    "split_text",
    "ConfigError",
    "Chunk",
    "ChunkingConfig",
]
