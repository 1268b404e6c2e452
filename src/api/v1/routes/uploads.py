"""File upload API routes."""

from fastapi import APIRouter, Depends, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_portfolio_service
from api.v1.schemas.upload import UploadTargetResponse
from domain.services.portfolio_service import PortfolioService

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post(
    "",
    response_model=UploadTargetResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Get a signed upload URL",
    responses={502: {"description": "Storage backend unavailable"}},
)
async def create_upload(
    _: CurrentAdmin,
    service: PortfolioService = Depends(get_portfolio_service),
) -> UploadTargetResponse:
    """Reserve a file id and return a short-lived URL to upload its bytes to."""
    target = await service.generate_upload_url()
    return UploadTargetResponse.model_validate(target)
