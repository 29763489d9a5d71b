"""Tests for MessageService: direct messages between two users."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from discusshub.exceptions import ForbiddenError, InvalidInputError, NotFoundError
from discusshub.services.message_service import MessageService

from tests.support.factories import make_message

pytestmark = pytest.mark.unit

MESSAGE_ID = "5f1d7f3b9d1e8a0012345678"


@pytest.fixture
def message_model():
    with patch("discusshub.services.message_service.Message") as mock_message:
        mock_message.get = AsyncMock()
        yield mock_message


@pytest.fixture
def user_model():
    with patch("discusshub.services.message_service.User") as mock_user:
        mock_user.find_one = AsyncMock()
        yield mock_user


@pytest.fixture
def hydrate():
    with patch("discusshub.services.message_service.hydrate_message", new_callable=AsyncMock) as mock_hydrate:
        mock_hydrate.side_effect = lambda message: message
        yield mock_hydrate


def stored_message(sender_id: str, recipient_id: str, read: bool = False) -> MagicMock:
    """A message document whose set()/delete() behave like Beanie's."""
    message = MagicMock()
    message.senderId = sender_id
    message.recipientId = recipient_id
    message.read = read
    message.set = AsyncMock(side_effect=lambda update: setattr(message, "read", update["read"]))
    message.delete = AsyncMock()
    return message


class TestSendMessage:

    async def test_unknown_recipient_writes_nothing(self, message_model, user_model, hydrate, alice):
        user_model.find_one.return_value = None

        with pytest.raises(NotFoundError, match="Recipient not found"):
            await MessageService.send_message(str(alice.id), "nobody", "hello")

        message_model.assert_not_called()

    async def test_creates_unread_message(self, message_model, user_model, hydrate, alice, bob):
        user_model.find_one.return_value = bob
        message_model.return_value.insert = AsyncMock()

        result = await MessageService.send_message(str(alice.id), "bob", "  hello  ")

        message_model.assert_called_once_with(
            senderId=str(alice.id),
            recipientId=str(bob.id),
            content="hello",
        )
        message_model.return_value.insert.assert_awaited_once()
        assert result is message_model.return_value

    async def test_blank_content(self, message_model, user_model, hydrate, alice):
        with pytest.raises(InvalidInputError):
            await MessageService.send_message(str(alice.id), "bob", "   ")
        user_model.find_one.assert_not_awaited()


class TestListMessages:

    async def test_lists_sent_and_received_newest_first(self, message_model, alice):
        messages = [make_message(str(alice.id), "u2"), make_message("u3", str(alice.id))]
        message_model.find.return_value.to_list = AsyncMock(return_value=messages)

        with patch("discusshub.services.message_service.hydrate_messages", new_callable=AsyncMock) as mock_hydrate:
            mock_hydrate.return_value = ["m1", "m2"]
            result = await MessageService.list_messages(str(alice.id))

        message_model.find.assert_called_once_with(
            {"$or": [{"senderId": str(alice.id)}, {"recipientId": str(alice.id)}]},
            sort="-createdAt",
        )
        mock_hydrate.assert_awaited_once_with(messages)
        assert result == ["m1", "m2"]


class TestMarkRead:

    async def test_recipient_marks_read(self, message_model, hydrate, alice, bob):
        message = stored_message(str(alice.id), str(bob.id))
        message_model.get.return_value = message

        result = await MessageService.mark_read(MESSAGE_ID, str(bob.id))

        message.set.assert_awaited_once_with({"read": True})
        assert result.read is True

    async def test_is_idempotent(self, message_model, hydrate, alice, bob):
        message = stored_message(str(alice.id), str(bob.id))
        message_model.get.return_value = message

        first = await MessageService.mark_read(MESSAGE_ID, str(bob.id))
        second = await MessageService.mark_read(MESSAGE_ID, str(bob.id))

        assert first.read is True
        assert second.read is True
        message.set.assert_awaited_once()

    async def test_sender_cannot_mark_read(self, message_model, hydrate, alice, bob):
        message = stored_message(str(alice.id), str(bob.id))
        message_model.get.return_value = message

        with pytest.raises(ForbiddenError):
            await MessageService.mark_read(MESSAGE_ID, str(alice.id))
        message.set.assert_not_awaited()
        assert message.read is False

    async def test_missing_message(self, message_model, hydrate):
        message_model.get.return_value = None
        with pytest.raises(NotFoundError, match="Message not found"):
            await MessageService.mark_read(MESSAGE_ID, "u1")

    async def test_malformed_id(self, message_model, hydrate):
        with pytest.raises(InvalidInputError, match="Invalid message ID format"):
            await MessageService.mark_read("xyz", "u1")
        message_model.get.assert_not_awaited()


class TestDeleteMessage:

    @pytest.mark.parametrize("actor", ["sender", "recipient"])
    async def test_participants_may_delete(self, message_model, alice, bob, actor):
        message = stored_message(str(alice.id), str(bob.id))
        message_model.get.return_value = message
        acting_user = alice if actor == "sender" else bob

        result = await MessageService.delete_message(MESSAGE_ID, str(acting_user.id))

        message.delete.assert_awaited_once()
        assert result == {"message": "Message deleted successfully"}

    async def test_outsider_is_forbidden(self, message_model, alice, bob, carol):
        message = stored_message(str(alice.id), str(bob.id))
        message_model.get.return_value = message

        with pytest.raises(ForbiddenError):
            await MessageService.delete_message(MESSAGE_ID, str(carol.id))
        message.delete.assert_not_awaited()

    async def test_missing_message(self, message_model):
        message_model.get.return_value = None
        with pytest.raises(NotFoundError):
            await MessageService.delete_message(MESSAGE_ID, "u1")
