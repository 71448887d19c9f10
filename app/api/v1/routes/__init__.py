"""API v1 route modules."""

from fastapi import APIRouter

from app.api.v1.routes import chat, providers

router = APIRouter()

# 라우터 등록
router.include_router(chat.router)
router.include_router(providers.router)
