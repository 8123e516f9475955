"""
Pytest fixtures for the retrieval and generation tests.
"""

import pytest

from chunking import Chunk, ChunkingConfig
from retrieval import RetrievalConfig, RetrievalEngine, TfidfEmbedder


REFERENCE_TEXT = (
    "Memory allocation uses an allocator passed explicitly to every function. "
    "The general purpose allocator detects leaks and double frees. "
    "Comptime evaluation runs code at compile time to generate types. "
    "Error unions combine an error set with a payload type. "
    "The defer statement runs an expression when the scope exits."
)

LIBRARY_TEXT = (
    "std.ArrayList is a growable list backed by an allocator. "
    "std.HashMap stores key value pairs with a custom hash context. "
    "std.fs.File provides read and write access to files on disk. "
    "std.mem.eql compares two slices for equality. "
    "std.debug.print writes formatted output to standard error."
)


def make_chunks(*texts: str) -> list[Chunk]:
    chunks = []
    offset = 0
    for text in texts:
        chunks.append(Chunk(text=text, source_offset=offset))
        offset += len(text)
    return chunks


@pytest.fixture
def cat_dog_chunks():
    """Two-chunk corpus used for the end-to-end TF-IDF checks."""
    return make_chunks("the cat sat", "the dog ran")


@pytest.fixture
def cat_dog_embedder(cat_dog_chunks):
    return TfidfEmbedder.fit(cat_dog_chunks)


@pytest.fixture
def small_config():
    """Small windows so the sample corpora produce several chunks."""
    return RetrievalConfig(chunking=ChunkingConfig(chunk_size=80, overlap=20))


@pytest.fixture
def engine(small_config):
    return RetrievalEngine(small_config)


@pytest.fixture
def initialized_engine(engine):
    engine.initialize(REFERENCE_TEXT, LIBRARY_TEXT)
    return engine
