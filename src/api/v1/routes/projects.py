"""Project API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_portfolio_service
from api.v1.schemas.common import CreatedResponse
from api.v1.schemas.project import (
    CategoryFilter,
    ProjectCreate,
    ProjectListResponse,
    ProjectResponse,
)
from domain.services.portfolio_service import PortfolioService

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=ProjectListResponse,
    summary="List projects",
)
async def list_projects(
    category: CategoryFilter | None = Query(
        None, description="Restrict to one category; 'all' or omitted returns everything"
    ),
    service: PortfolioService = Depends(get_portfolio_service),
) -> ProjectListResponse:
    """Get projects, newest first, with signed thumbnail and media URLs."""
    projects = await service.get_projects(category.value if category else None)
    return ProjectListResponse(data=[ProjectResponse.from_view(p) for p in projects])


@router.get(
    "/featured",
    response_model=ProjectListResponse,
    summary="List featured projects",
)
async def list_featured_projects(
    service: PortfolioService = Depends(get_portfolio_service),
) -> ProjectListResponse:
    """Get up to six featured projects, newest first."""
    projects = await service.get_featured_projects()
    return ProjectListResponse(data=[ProjectResponse.from_view(p) for p in projects])


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a project",
    responses={
        201: {"description": "Project created successfully"},
        401: {"description": "Not authenticated"},
    },
)
async def create_project(
    body: ProjectCreate,
    _: CurrentAdmin,
    service: PortfolioService = Depends(get_portfolio_service),
) -> CreatedResponse:
    """Add a project. File ids come from a previous upload and are not checked here."""
    project_id = await service.add_project(
        title=body.title,
        description=body.description,
        category=body.category.value,
        tags=body.tags,
        featured=body.featured,
        thumbnail_id=body.thumbnail_id,
        media_id=body.media_id,
    )
    return CreatedResponse(id=project_id)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a project",
    responses={
        204: {"description": "Project and its files deleted"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(
    project_id: UUID,
    _: CurrentAdmin,
    service: PortfolioService = Depends(get_portfolio_service),
) -> None:
    """Delete a project and, best-effort, its thumbnail and media files."""
    await service.delete_project(project_id)
    return None
