"""
Custom Exceptions for the Retrieval Engine.

Exception Hierarchy:
    RetrievalError (base)
    ├── InitializationError
    ├── NotInitializedError
    └── VocabularyStateError

    ConfigError (chunking.exceptions, re-exported here)

Usage:
    from retrieval.exceptions import NotInitializedError

    try:
        context = engine.query("How do I open a file?")
    except NotInitializedError:
        engine.initialize(reference, library)
"""

from __future__ import annotations

from typing import Optional

from chunking.exceptions import ConfigError


class RetrievalError(Exception):
    """
    Base exception for all retrieval errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A retrieval error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


class InitializationError(RetrievalError):
    """
    Raised when a corpus cannot be chunked, tokenized or indexed.

    The engine is left uninitialized; callers retry by running
    initialize again with both corpora.

    Attributes:
        corpus: Name of the corpus that failed (if known)
    """

    def __init__(
        self,
        message: str = "Failed to initialize retrieval engine",
        corpus: Optional[str] = None,
        details: Optional[str] = None,
    ):
        self.corpus = corpus
        if corpus:
            message = f"{message} [{corpus}]"
        super().__init__(message, details)


class NotInitializedError(RetrievalError):
    """Raised when query is called before a successful initialize."""

    def __init__(self, message: str = "Retrieval engine is not initialized"):
        super().__init__(message)


class VocabularyStateError(RetrievalError):
    """
    Raised when a vocabulary is used in the wrong lifecycle state.

    Adding terms to a frozen vocabulary, or embedding against one that is
    still being built, both raise this error.
    """

    def __init__(self, message: str, state: Optional[str] = None):
        self.state = state
        super().__init__(message, details=f"state={state}" if state else None)


__all__ = [
    "RetrievalError",
    "InitializationError",
    "NotInitializedError",
    "VocabularyStateError",
    "ConfigError",
]
