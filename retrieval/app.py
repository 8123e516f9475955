from fastapi import FastAPI, HTTPException

from .config import RetrievalConfig
from .engine import RetrievalEngine
from .exceptions import InitializationError, NotInitializedError
from .models import (
    CorpusStats,
    InitializeRequest,
    InitializeResponse,
    QueryRequest,
    QueryResponse,
)


def create_app(engine: RetrievalEngine | None = None) -> FastAPI:
    engine = engine or RetrievalEngine(RetrievalConfig.from_env())

    app = FastAPI(
        title="Retrieval Service",
        version="1.0.0",
        description="TF-IDF context retrieval over a reference and a library corpus.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "initialized": engine.is_initialized}

    @app.post("/initialize", response_model=InitializeResponse)
    def initialize(request: InitializeRequest) -> InitializeResponse:
        try:
            engine.initialize(request.reference, request.library)
        except InitializationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return InitializeResponse(corpora=list(engine.stats().values()))

    @app.post("/query", response_model=QueryResponse)
    def query(request: QueryRequest) -> QueryResponse:
        try:
            hits = engine.query_hits(request.question, request.k_per_corpus)
        except NotInitializedError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return QueryResponse(
            question=request.question,
            context=engine.format_context(hits),
            hits=hits,
        )

    @app.get("/stats", response_model=list[CorpusStats])
    def stats() -> list[CorpusStats]:
        try:
            return list(engine.stats().values())
        except NotInitializedError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    return app
