"""
FastAPI application for the keyword extraction API.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .deps import build_analyzer
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load stopwords and IDF tables once on startup; publish the analyzer when ready."""
    analyzer, resources = build_analyzer()
    app.state.resources = resources
    app.state.analyzer = analyzer
    yield
    app.state.analyzer = None


app = FastAPI(
    title="TF-IDF Keywords API",
    description="Top-N keyword extraction for short documents",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
app.include_router(router)
