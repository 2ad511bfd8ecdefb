"""
API routes: keyword extraction and health.
"""

from __future__ import annotations

import asyncio
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from .models import HealthResponse, KeywordOut, KeywordRequest, KeywordResponse

router = APIRouter(prefix="/api", tags=["api"])


def _get_state(request: Request) -> tuple[Any, Any]:
    analyzer = getattr(request.app.state, "analyzer", None)
    resources = getattr(request.app.state, "resources", None)
    return analyzer, resources


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Health check with resource load counts."""
    analyzer, resources = _get_state(request)
    if resources is None:
        return HealthResponse(status="ok", ready=False)
    return HealthResponse(
        status="ok",
        ready=analyzer is not None,
        stopwords_loaded=len(resources.stopwords),
        idf_terms_loaded=len(resources.idf),
        skipped_lines=resources.skipped_lines,
    )


@router.post("/keywords", response_model=KeywordResponse)
async def extract_keywords(request: Request, body: KeywordRequest) -> KeywordResponse | JSONResponse:
    """Top-N TF-IDF keywords for one document."""
    analyzer, _ = _get_state(request)
    if analyzer is None:
        return JSONResponse(
            status_code=503,
            content={"detail": "Service unavailable: stopword or IDF resources not loaded."},
        )
    keywords = await asyncio.to_thread(
        analyzer.analyze_top_n, body.content, body.highest_first, body.top_n
    )
    return KeywordResponse(
        keywords=[KeywordOut(name=k.name, score=k.tfidf_value) for k in keywords]
    )
