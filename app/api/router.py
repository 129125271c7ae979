from fastapi import APIRouter

from app.domains.promotions.api import routes as promotions

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(promotions.router)
