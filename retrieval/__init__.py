"""
Retrieval component for retrieval-grounded chat.

Builds TF-IDF vectors over chunked corpora and answers exact top-k cosine
queries, returning a context string for the generation step.
"""

__version__ = "1.0.0"

from .config import RetrievalConfig
from .embedder import EmbeddingProvider, IdfCache, TfidfEmbedder, embed
from .engine import CorpusIndex, RetrievalEngine
from .exceptions import (
    ConfigError,
    InitializationError,
    NotInitializedError,
    RetrievalError,
    VocabularyStateError,
)
from .models import CorpusStats, IndexEntry, RetrievalHit
from .tokenizer import tokenize
from .vector_index import VectorIndex
from .vocabulary import (
    DocumentFrequencyTable,
    Vocabulary,
    VocabularyBuilder,
    VocabularyState,
)

__all__ = [
    "__version__",
    "RetrievalConfig",
    "EmbeddingProvider",
    "IdfCache",
    "TfidfEmbedder",
    "embed",
    "CorpusIndex",
    "RetrievalEngine",
    "ConfigError",
    "InitializationError",
    "NotInitializedError",
    "RetrievalError",
    "VocabularyStateError",
    "CorpusStats",
    "IndexEntry",
    "RetrievalHit",
    "tokenize",
    "VectorIndex",
    "DocumentFrequencyTable",
    "Vocabulary",
    "VocabularyBuilder",
    "VocabularyState",
]
