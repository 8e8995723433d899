"""API v1 router."""
from fastapi import APIRouter

from edusystem.api.v1 import auth, materials, reviews, test_results, tests, users

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(materials.router, prefix="/materials", tags=["Materials"])
api_router.include_router(tests.router, prefix="/tests", tags=["Tests"])
api_router.include_router(test_results.router, prefix="/test-results", tags=["Test Results"])
api_router.include_router(reviews.router, prefix="/reviews", tags=["Reviews"])
