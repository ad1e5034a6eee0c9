"""
Main API router. Mounts all sub-routers.
"""

from fastapi import APIRouter

router = APIRouter()


# ── Health ───────────────────────────────────────────────────────────

@router.get("/health")
async def health():
    return {"status": "ok", "service": "pastebin"}


# ── Documents ────────────────────────────────────────────────────────

from .documents import documents_router

router.include_router(documents_router)
