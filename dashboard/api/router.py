"""Root API router."""

from __future__ import annotations

from fastapi import APIRouter

from dashboard.api import auth, health, invoices

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(invoices.router)


def get_api_router() -> APIRouter:
    return api_router
