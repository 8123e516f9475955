from typing import Any

from pydantic import BaseModel, Field


class GenerateResponse(BaseModel):
    question: str
    answer: str
    context: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)
