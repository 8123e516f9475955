from dataclasses import dataclass
import os
from typing import Optional

from .exceptions import GenerationConfigError


@dataclass
class GenerationConfig:
    api_url: Optional[str] = None
    api_key: Optional[str] = None
    api_model: Optional[str] = None
    temperature: float = 0.0
    timeout_seconds: float = 120.0
    max_context_tokens: int = 3000
    referer: str = "https://github.com/hexops/zai"
    title: str = "Zai"

    @classmethod
    def from_env(cls) -> "GenerationConfig":
        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        def _float(name: str, default: float) -> float:
            value = os.environ.get(name)
            return float(value) if value else default

        return cls(
            api_url=os.environ.get("ZAI_API_URL"),
            api_key=os.environ.get("ZAI_API_KEY"),
            api_model=os.environ.get("ZAI_API_MODEL"),
            temperature=_float("ZAI_TEMPERATURE", cls.temperature),
            timeout_seconds=_float("ZAI_TIMEOUT_SECONDS", cls.timeout_seconds),
            max_context_tokens=_int("ZAI_MAX_CONTEXT_TOKENS", cls.max_context_tokens),
        )

    def validate(self) -> None:
        """Raise GenerationConfigError for the first missing API setting."""
        for setting, value in (
            ("ZAI_API_URL", self.api_url),
            ("ZAI_API_KEY", self.api_key),
            ("ZAI_API_MODEL", self.api_model),
        ):
            if not value:
                raise GenerationConfigError(setting)
