from fastapi import APIRouter

from app.api.routers import languages, quality_profiles, rules

api_router = APIRouter()

api_router.include_router(languages.router)
api_router.include_router(quality_profiles.router)
api_router.include_router(rules.router)
