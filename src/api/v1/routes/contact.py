"""Contact message API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_portfolio_service
from api.v1.schemas.common import CreatedResponse
from api.v1.schemas.contact import (
    ContactMessageCreate,
    ContactMessageDetailResponse,
    ContactMessageListResponse,
    ContactMessageResponse,
)
from domain.services.portfolio_service import PortfolioService

router = APIRouter(prefix="/contact/messages", tags=["contact"])


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a contact message",
)
async def submit_message(
    body: ContactMessageCreate,
    service: PortfolioService = Depends(get_portfolio_service),
) -> CreatedResponse:
    """Leave a message for the portfolio owner."""
    message_id = await service.submit_contact_message(
        name=body.name,
        email=body.email,
        message=body.message,
    )
    return CreatedResponse(id=message_id)


@router.get(
    "",
    response_model=ContactMessageListResponse,
    summary="List contact messages",
    responses={401: {"description": "Not authenticated"}},
)
async def list_messages(
    _: CurrentAdmin,
    service: PortfolioService = Depends(get_portfolio_service),
) -> ContactMessageListResponse:
    """Get the inbox, newest first, with the number of unread messages."""
    messages = await service.get_contact_messages()
    return ContactMessageListResponse(
        data=[ContactMessageResponse.model_validate(m) for m in messages],
        unread_count=await service.count_unread_messages(),
    )


@router.post(
    "/{message_id}/read",
    response_model=ContactMessageDetailResponse,
    summary="Mark a message as read",
    responses={404: {"description": "Message not found"}},
)
async def mark_message_read(
    message_id: UUID,
    _: CurrentAdmin,
    service: PortfolioService = Depends(get_portfolio_service),
) -> ContactMessageDetailResponse:
    """Mark a message as read. Idempotent."""
    message = await service.mark_contact_message_read(message_id)
    return ContactMessageDetailResponse(data=ContactMessageResponse.model_validate(message))
