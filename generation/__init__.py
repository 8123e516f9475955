"""
Generation component for retrieval-grounded chat.

Hands the retrieved context and the user question to an OpenAI-compatible
chat endpoint.
"""

__version__ = "1.0.0"

from .client import ChatClient
from .config import GenerationConfig
from .exceptions import GenerationConfigError, GenerationError, GenerationTimeoutError
from .models import GenerateResponse
from .service import AssistantService

__all__ = [
    "__version__",
    "ChatClient",
    "GenerationConfig",
    "GenerationConfigError",
    "GenerationError",
    "GenerationTimeoutError",
    "GenerateResponse",
    "AssistantService",
]
