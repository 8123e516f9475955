from typing import Optional

from pydantic import BaseModel, Field


class IndexEntry(BaseModel):
    chunk_text: str
    vector: list[float]


class RetrievalHit(BaseModel):
    text: str
    score: float
    rank: int = Field(..., ge=1)
    position: int = Field(..., ge=0, description="Insertion position in the index")


class CorpusStats(BaseModel):
    name: str
    chunks: int
    vocabulary_size: int
    df_entries: int


class InitializeRequest(BaseModel):
    reference: str
    library: str


class InitializeResponse(BaseModel):
    corpora: list[CorpusStats] = Field(default_factory=list)


class QueryRequest(BaseModel):
    question: str
    k_per_corpus: Optional[int] = Field(None, ge=0, le=50)


class QueryResponse(BaseModel):
    question: str
    context: str
    hits: dict[str, list[RetrievalHit]] = Field(default_factory=dict)
