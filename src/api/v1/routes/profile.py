"""Profile API routes."""

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_portfolio_service
from api.v1.schemas.profile import ProfileDetailResponse, ProfileResponse, ProfileUpdate
from domain.services.portfolio_service import PortfolioService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=ProfileDetailResponse,
    summary="Get the profile",
)
async def get_profile(
    service: PortfolioService = Depends(get_portfolio_service),
) -> ProfileDetailResponse:
    """Get the portfolio profile. Returns the built-in profile until one is saved."""
    view = await service.get_profile()
    return ProfileDetailResponse(
        data=ProfileResponse.from_view(view),
        is_default=view.is_default,
    )


@router.put(
    "",
    response_model=ProfileDetailResponse,
    summary="Create or update the profile",
    responses={
        200: {"description": "Profile saved"},
        400: {"description": "Invalid field value"},
        401: {"description": "Not authenticated"},
    },
)
async def update_profile(
    body: ProfileUpdate,
    _: CurrentAdmin,
    service: PortfolioService = Depends(get_portfolio_service),
) -> ProfileDetailResponse:
    """Save the profile. Optional fields omitted from the body are left unchanged."""
    view = await service.update_profile(body.model_dump(exclude_unset=True))
    return ProfileDetailResponse(data=ProfileResponse.from_view(view))
