"""
Chunking errors.

ConfigError is the one error this package raises. The retrieval package
re-exports it as part of its own hierarchy.
"""

from __future__ import annotations

from typing import Optional


class ConfigError(ValueError):
    """
    Raised when chunk parameters are invalid.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(self, message: str = "Invalid chunking configuration", details: Optional[str] = None):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)
