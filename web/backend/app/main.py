"""FastAPI application for the formgen web editor.

Provides REST API endpoints wrapping the formgen package for:
- Schema validation of editor input
- Submission checking against a form (the renderer's submit path)
- Code generation for the code preview
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# Ensure the formgen package is importable by adding the project root to sys.path.
_project_root = str(Path(__file__).resolve().parents[3])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formgen import __version__
from web.backend.app.routers import forms

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("FORMGEN_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

app = FastAPI(
    title="formgen API",
    description=(
        "REST API for the Form Generator. "
        "Validates form schemas, checks submissions and generates form code."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (FORMGEN_CORS_ORIGINS, comma separated; all by default)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(forms.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "formgen API",
        "version": __version__,
        "description": "Form Generator REST API",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
