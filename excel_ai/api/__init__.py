"""
API routes initialization
"""

from fastapi import APIRouter

from .v1 import health, excel_generation

# Create main API router
router = APIRouter()

# Include v1 routes
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(excel_generation.router, prefix="/excel", tags=["excel"])
