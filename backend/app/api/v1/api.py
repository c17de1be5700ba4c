from __future__ import annotations
from fastapi import APIRouter

from app.api.v1.endpoints import geography

api_router = APIRouter()

# REST
api_router.include_router(geography.router)   # → /api/v1/geography/...
