"""
Data Models for the Chunking Pipeline

Defines:
1. Chunk - A contiguous window of a source document plus its start offset
2. ChunkingConfig - Window size, overlap and boundary handling

Usage:
    config = ChunkingConfig(chunk_size=1000, overlap=200)
    chunks = DocumentChunker(config).chunk(text)
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from .exceptions import ConfigError


class Chunk(BaseModel):
    """
    A single text window, ready for vocabulary building and embedding.
    """
    text: str = Field(
        ...,
        description="The chunk text content (a substring of the source)",
    )
    source_offset: int = Field(
        ...,
        description="Character offset of the chunk start within the source",
        ge=0,
    )

    @property
    def end_offset(self) -> int:
        return self.source_offset + len(self.text)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


def validate_chunk_params(chunk_size: int, overlap: int) -> None:
    if chunk_size <= 0:
        raise ConfigError(
            "chunk_size must be greater than 0",
            details=f"chunk_size={chunk_size}",
        )
    if overlap < 0:
        raise ConfigError(
            "overlap must not be negative",
            details=f"overlap={overlap}",
        )
    if overlap >= chunk_size:
        raise ConfigError(
            f"overlap ({overlap}) must be less than chunk_size ({chunk_size})",
        )


@dataclass(frozen=True)
class ChunkingConfig:
    """
    Configuration for the chunker.

    Defaults match the reference splitter settings (1000 characters with
    200 characters of overlap).
    """
    chunk_size: int = 1000
    overlap: int = 200
    boundary_aware: bool = False

    def __post_init__(self) -> None:
        validate_chunk_params(self.chunk_size, self.overlap)

    @property
    def step(self) -> int:
        return self.chunk_size - self.overlap
