"""Liveness endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from adascan import __version__

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"status": "ok", "version": __version__}
