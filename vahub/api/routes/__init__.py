"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from vahub.api.routes.auth_routes import router as auth_router
from vahub.api.routes.job_routes import router as job_router
from vahub.api.routes.employer_routes import router as employer_router
from vahub.api.routes.admin_routes import router as admin_router
from vahub.api.routes.subscription_routes import router as subscription_router
from vahub.api.routes.profile_routes import router as profile_router
from vahub.api.routes.message_routes import router as message_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(job_router)
api_router.include_router(employer_router)
api_router.include_router(admin_router)
api_router.include_router(subscription_router)
api_router.include_router(profile_router)
api_router.include_router(message_router)
