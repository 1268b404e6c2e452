"""Skill API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_portfolio_service
from api.v1.schemas.skill import (
    SkillCreate,
    SkillDetailResponse,
    SkillListResponse,
    SkillResponse,
)
from domain.services.portfolio_service import PortfolioService

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get(
    "",
    response_model=SkillListResponse,
    summary="List skills",
)
async def list_skills(
    service: PortfolioService = Depends(get_portfolio_service),
) -> SkillListResponse:
    """Get all skills in insertion order, or the built-in set when none are stored."""
    result = await service.get_skills()
    return SkillListResponse(
        data=[SkillResponse.model_validate(skill) for skill in result.skills],
        is_default=result.is_default,
    )


@router.post(
    "",
    response_model=SkillDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a skill",
    responses={
        201: {"description": "Skill created successfully"},
        401: {"description": "Not authenticated"},
    },
)
async def create_skill(
    body: SkillCreate,
    _: CurrentAdmin,
    service: PortfolioService = Depends(get_portfolio_service),
) -> SkillDetailResponse:
    """Add a skill. Stored skills replace the built-in defaults."""
    skill = await service.add_skill(
        name=body.name,
        category=body.category,
        level=body.level,
        icon=body.icon,
        description=body.description,
    )
    return SkillDetailResponse(data=SkillResponse.model_validate(skill))


@router.delete(
    "/{skill_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a skill",
    responses={
        204: {"description": "Skill deleted successfully"},
        404: {"description": "Skill not found"},
    },
)
async def delete_skill(
    skill_id: UUID,
    _: CurrentAdmin,
    service: PortfolioService = Depends(get_portfolio_service),
) -> None:
    """Delete a stored skill."""
    await service.delete_skill(skill_id)
    return None
