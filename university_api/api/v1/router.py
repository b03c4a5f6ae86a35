"""Main API router aggregator."""

from fastapi import APIRouter

from university_api.api.v1 import universities

api_router = APIRouter()

api_router.include_router(universities.router, prefix="/universities", tags=["universities"])
