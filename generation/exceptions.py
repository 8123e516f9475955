"""
Custom Exceptions for the generation step.

Exception Hierarchy:
    GenerationError (base)
    ├── GenerationConfigError
    └── GenerationTimeoutError
"""

from __future__ import annotations

from typing import Optional


class GenerationError(Exception):
    """
    Base exception for generation failures.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "Generation failed",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


class GenerationConfigError(GenerationError):
    """
    Raised when a required API setting is missing.

    Attributes:
        setting: Name of the missing environment setting
    """

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"{setting} not set. Please set it in the environment or .env file.")


class GenerationTimeoutError(GenerationError):
    """Raised when the model does not answer within the configured timeout."""

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(f"No response from model within {timeout_seconds}s")
