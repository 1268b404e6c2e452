"""Unit tests for ContactService."""

from uuid import uuid4

import pytest

from core.exceptions import ContactMessageNotFoundError
from domain.entities.contact_message import ContactMessage
from domain.services.contact_service import ContactService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ContactService:
    return ContactService(lambda: uow)


class TestSubmit:
    @pytest.mark.asyncio
    async def test_stores_unread_message(self, service: ContactService, uow: FakeUnitOfWork):
        uow.messages.create.side_effect = lambda message: message

        message_id = await service.submit(
            name="Ravi", email="ravi@example.com", message="Need a music video edited"
        )

        stored = uow.messages.create.call_args.args[0]
        assert stored.id == message_id
        assert stored.read is False
        assert stored.name == "Ravi"
        assert uow.committed

    @pytest.mark.asyncio
    async def test_does_not_validate_fields(self, service: ContactService, uow: FakeUnitOfWork):
        uow.messages.create.side_effect = lambda message: message

        message_id = await service.submit(name="", email="not-an-email", message="")

        assert message_id is not None


class TestGetAll:
    @pytest.mark.asyncio
    async def test_returns_repository_order(self, service: ContactService, uow: FakeUnitOfWork):
        messages = [
            ContactMessage(name="B", email="b@example.com", message="second"),
            ContactMessage(name="A", email="a@example.com", message="first"),
        ]
        uow.messages.get_all.return_value = messages

        assert await service.get_all() == messages


class TestMarkRead:
    @pytest.mark.asyncio
    async def test_marks_unread_message(self, service: ContactService, uow: FakeUnitOfWork):
        message = ContactMessage(name="A", email="a@example.com", message="hi")
        uow.messages.get.return_value = message

        result = await service.mark_read(message.id)

        assert result.read is True
        uow.messages.update.assert_awaited_once_with(message)
        assert uow.messages.update.call_args.args[0].read is True
        assert uow.committed

    @pytest.mark.asyncio
    async def test_already_read_message_is_left_alone(
        self, service: ContactService, uow: FakeUnitOfWork
    ):
        message = ContactMessage(name="A", email="a@example.com", message="hi", read=True)
        uow.messages.get.return_value = message

        result = await service.mark_read(message.id)

        assert result.read is True
        uow.messages.update.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_missing_message_raises(self, service: ContactService, uow: FakeUnitOfWork):
        uow.messages.get.return_value = None

        with pytest.raises(ContactMessageNotFoundError):
            await service.mark_read(uuid4())

        uow.messages.update.assert_not_called()
        assert not uow.committed


class TestUnreadCount:
    @pytest.mark.asyncio
    async def test_returns_count(self, service: ContactService, uow: FakeUnitOfWork):
        uow.messages.count_unread.return_value = 3

        assert await service.unread_count() == 3
