"""FastAPI application for the storeverify registry.

Provides REST API endpoints wrapping the storeverify Python package for:
- Store registration and lookup
- Admin-gated store verification
- Admin succession
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the storeverify package is importable by adding the project root to sys.path.
_project_root = str(Path(__file__).resolve().parents[3])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storeverify import __version__
from web.backend.app.routers import admin, stores

app = FastAPI(
    title="storeverify API",
    description=(
        "REST API for the storeverify registry. "
        "Anyone can register a store; only the current admin can verify "
        "stores or transfer admin rights."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(stores.router)
app.include_router(admin.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "storeverify API",
        "version": __version__,
        "description": "Admin-gated store verification registry",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
