from __future__ import annotations

from fastapi import APIRouter

from .agent import router as agent_router
from .meta import router as meta_router

api_router = APIRouter(prefix="/api")
api_router.include_router(meta_router)
api_router.include_router(agent_router)

__all__ = ["api_router"]
