from fastapi import APIRouter

from app.api.routers import sessions

api_router = APIRouter()

api_router.include_router(sessions.router)
