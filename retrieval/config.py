from dataclasses import dataclass, field
import os
from typing import Optional

from chunking.models import ChunkingConfig


@dataclass
class RetrievalConfig:
    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    top_k_per_corpus: int = 3
    corpus_names: tuple[str, str] = ("reference", "library")
    chunk_separator: str = "\n\n"
    corpus_separator: str = "\n\n-----\n\n"
    reference_path: Optional[str] = None
    library_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "RetrievalConfig":
        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        defaults = ChunkingConfig()
        chunking = ChunkingConfig(
            chunk_size=_int("ZAI_CHUNK_SIZE", defaults.chunk_size),
            overlap=_int("ZAI_CHUNK_OVERLAP", defaults.overlap),
            boundary_aware=os.environ.get("ZAI_CHUNK_BOUNDARY_AWARE") == "1",
        )
        return cls(
            chunking=chunking,
            top_k_per_corpus=_int("ZAI_TOP_K", cls.top_k_per_corpus),
            reference_path=os.environ.get("ZAI_REFERENCE_PATH"),
            library_path=os.environ.get("ZAI_LIBRARY_PATH"),
        )
