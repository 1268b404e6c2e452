"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.contact import router as contact_router
from api.v1.routes.profile import router as profile_router
from api.v1.routes.projects import router as projects_router
from api.v1.routes.skills import router as skills_router
from api.v1.routes.uploads import router as uploads_router

router = APIRouter()
router.include_router(profile_router)
router.include_router(skills_router)
router.include_router(projects_router)
router.include_router(contact_router)
router.include_router(uploads_router)
