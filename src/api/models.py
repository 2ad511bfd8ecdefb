"""
Request and response models for the keyword API.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class KeywordRequest(BaseModel):
    """Request body for POST /api/keywords."""

    content: Optional[str] = Field(None, description="Document text; empty or missing yields no keywords")
    top_n: int = 5
    highest_first: bool = True


class KeywordOut(BaseModel):
    """Single scored keyword."""

    name: str
    score: float


class KeywordResponse(BaseModel):
    """Response for POST /api/keywords."""

    keywords: List[KeywordOut] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    status: str = "ok"
    ready: bool = False
    stopwords_loaded: int = 0
    idf_terms_loaded: int = 0
    skipped_lines: int = 0
