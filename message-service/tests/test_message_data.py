"""Tests for MessageData create / get / delete / update."""

import uuid

import pytest

from data.models.message import MessageState
from data.repositories.message_data import CreateMessageInput, MessageData
from data.stores.memory_store import InMemoryMessageStore
from utils.exceptions import NotFoundError, PersistenceError, ValidationError


def _expected(conversation_id: str, sender_id: str, tags: list) -> dict:
    return {
        "likes": [],
        "resolved": False,
        "deleted": False,
        "reactions": [],
        "text": "Hello world",
        "sender_id": sender_id,
        "conversation_id": conversation_id,
        "conversation": {"id": conversation_id},
        "likes_count": 0,
        "sender": {"id": sender_id},
        "tags": tags,
    }


def _matches(message_dict: dict, expected: dict) -> bool:
    return all(message_dict[key] == value for key, value in expected.items())


class TestCreate:
    @pytest.mark.asyncio
    async def test_creates_message_with_no_tags(self, message_data, conversation_id, sender_id):
        message = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
        )

        assert _matches(message.to_dict(), _expected(conversation_id, sender_id, []))
        assert message.id is not None

    @pytest.mark.asyncio
    async def test_creates_message_with_one_tag(self, message_data, conversation_id, sender_id):
        message = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
            ["firstTAG"],
        )

        assert _matches(message.to_dict(), _expected(conversation_id, sender_id, ["firstTAG"]))

    @pytest.mark.asyncio
    async def test_creates_message_with_multiple_tags(self, message_data, conversation_id, sender_id):
        tags = ["firstTAG", "secondTAG", "thirdTAG"]
        message = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
            tags,
        )

        assert message.tags == ["firstTAG", "secondTAG", "thirdTAG"]
        assert _matches(message.to_dict(), _expected(conversation_id, sender_id, tags))

    @pytest.mark.asyncio
    async def test_keeps_duplicate_tags_in_order(self, message_data, conversation_id, sender_id):
        message = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
            ["b", "a", "b"],
        )

        assert message.tags == ["b", "a", "b"]

    @pytest.mark.asyncio
    async def test_does_not_alias_caller_tag_list(self, message_data, conversation_id, sender_id):
        tags = ["TAG1"]
        message = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
            tags,
        )
        tags.append("TAG2")

        assert message.tags == ["TAG1"]
        assert (await message_data.get_message(message.id)).tags == ["TAG1"]

    @pytest.mark.asyncio
    async def test_accepts_uuid_references(self, message_data):
        conversation_id = uuid.uuid4()
        sender_id = uuid.uuid4()
        message = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
        )

        assert message.conversation_id == str(conversation_id)
        assert message.sender.id == str(sender_id)

    @pytest.mark.asyncio
    async def test_generates_distinct_ids(self, message_data, conversation_id, sender_id):
        ids = set()
        for _ in range(5):
            message = await message_data.create(
                CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
                sender_id,
            )
            ids.add(message.id)

        assert len(ids) == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", None])
    async def test_rejects_empty_text(self, message_data, store, conversation_id, sender_id, text):
        with pytest.raises(ValidationError):
            await message_data.create(
                CreateMessageInput(conversation_id=conversation_id, text=text),
                sender_id,
            )
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_rejects_missing_conversation(self, message_data, sender_id):
        with pytest.raises(ValidationError):
            await message_data.create(CreateMessageInput(conversation_id="", text="Hello world"), sender_id)

    @pytest.mark.asyncio
    async def test_rejects_missing_sender(self, message_data, conversation_id):
        with pytest.raises(ValidationError):
            await message_data.create(CreateMessageInput(conversation_id=conversation_id, text="Hello world"), None)

    @pytest.mark.asyncio
    async def test_stores_reference_ids_unchanged(self, message_data):
        message = await message_data.create(
            CreateMessageInput(conversation_id=" c ", text="Hello world"),
            " u ",
        )
        got = await message_data.get_message(message.id)

        assert got.conversation_id == " c "
        assert got.sender.id == " u "

    @pytest.mark.asyncio
    async def test_rejects_reference_id_over_column_length(self, message_data, store, sender_id):
        with pytest.raises(ValidationError):
            await message_data.create(
                CreateMessageInput(conversation_id="c" * 256, text="Hello world"),
                sender_id,
            )
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_rejects_text_over_max_length(self, message_data, conversation_id, sender_id, monkeypatch):
        from configs.settings import settings

        monkeypatch.setattr(settings, "message_max_length", 10)
        with pytest.raises(ValidationError):
            await message_data.create(
                CreateMessageInput(conversation_id=conversation_id, text="x" * 11),
                sender_id,
            )

    @pytest.mark.asyncio
    async def test_rejects_non_string_tags(self, message_data, conversation_id, sender_id):
        with pytest.raises(ValidationError):
            await message_data.create(
                CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
                sender_id,
                ["ok", 3],
            )

    @pytest.mark.asyncio
    async def test_surfaces_store_failure(self, conversation_id, sender_id):
        class BrokenStore(InMemoryMessageStore):
            async def insert(self, record):
                raise PersistenceError("Failed to store message")

        message_data = MessageData(BrokenStore())
        with pytest.raises(PersistenceError):
            await message_data.create(
                CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
                sender_id,
            )


class TestGetMessage:
    @pytest.mark.asyncio
    async def test_gets_created_message(self, message_data, conversation_id, sender_id):
        sent = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
            ["TAG1"],
        )

        got = await message_data.get_message(sent.id)

        assert got == sent
        assert got.to_dict() == sent.to_dict()

    @pytest.mark.asyncio
    async def test_accepts_uuid_object(self, message_data, conversation_id, sender_id):
        sent = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
        )

        got = await message_data.get_message(uuid.UUID(sent.id))

        assert got.id == sent.id

    @pytest.mark.asyncio
    async def test_accepts_uppercase_id(self, message_data, conversation_id, sender_id):
        sent = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
        )

        got = await message_data.get_message(sent.id.upper())

        assert got.id == sent.id

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, message_data):
        with pytest.raises(NotFoundError):
            await message_data.get_message(str(uuid.uuid4()))

    @pytest.mark.asyncio
    async def test_malformed_id_raises_not_found(self, message_data):
        with pytest.raises(NotFoundError):
            await message_data.get_message("not-a-message-id")


class TestDelete:
    @pytest.mark.asyncio
    async def test_marks_message_as_deleted(self, message_data, conversation_id, sender_id):
        message = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Message to delete"),
            sender_id,
        )
        assert message.deleted is False

        await message_data.delete(message.id)

        retrieved = await message_data.get_message(message.id)
        assert retrieved.deleted is True
        assert retrieved.state is MessageState.DELETED

    @pytest.mark.asyncio
    async def test_leaves_other_fields_untouched(self, message_data, conversation_id, sender_id):
        message = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Message to delete"),
            sender_id,
            ["keep"],
        )

        deleted = await message_data.delete(message.id)

        assert deleted.text == message.text
        assert deleted.tags == ["keep"]
        assert deleted.sender_id == sender_id
        assert deleted.conversation_id == conversation_id
        assert deleted.created_at == message.created_at
        assert deleted.updated_at == message.updated_at

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, message_data, conversation_id, sender_id):
        message = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Message to delete"),
            sender_id,
        )

        first = await message_data.delete(message.id)
        again = await message_data.delete(message.id)

        assert again.deleted is True
        assert again.to_dict() == first.to_dict()
        assert (await message_data.get_message(message.id)).deleted is True

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, message_data):
        with pytest.raises(NotFoundError):
            await message_data.delete(str(uuid.uuid4()))


class TestUpdateMessage:
    @pytest.mark.asyncio
    async def test_updates_tags_with_empty_list(self, message_data, conversation_id, sender_id):
        sent = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
            ["TAG1", "TAG2"],
        )
        assert sent.tags == ["TAG1", "TAG2"]

        updated = await message_data.update_message(sent.id, [])
        got = await message_data.get_message(sent.id)

        assert updated.tags == []
        assert got.tags == []

    @pytest.mark.asyncio
    async def test_updates_tags_with_non_empty_list(self, message_data, conversation_id, sender_id):
        sent = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
            ["TAG1", "TAG2"],
        )

        updated = await message_data.update_message(sent.id, ["TAG3"])
        got = await message_data.get_message(sent.id)

        assert updated.tags == ["TAG3"]
        assert got.tags == ["TAG3"]

    @pytest.mark.asyncio
    async def test_update_keeps_deleted_flag(self, message_data, conversation_id, sender_id):
        sent = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
        )
        await message_data.delete(sent.id)

        updated = await message_data.update_message(sent.id, ["TAG1"])

        assert updated.deleted is True
        assert updated.tags == ["TAG1"]

    @pytest.mark.asyncio
    async def test_returns_enriched_message(self, message_data, conversation_id, sender_id):
        sent = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
        )

        updated = await message_data.update_message(sent.id, ["TAG1"])

        assert updated.sender.id == sender_id
        assert updated.conversation.id == conversation_id

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, message_data):
        with pytest.raises(NotFoundError):
            await message_data.update_message(str(uuid.uuid4()), ["TAG1"])

    @pytest.mark.asyncio
    async def test_rejects_non_list_tags(self, message_data, conversation_id, sender_id):
        sent = await message_data.create(
            CreateMessageInput(conversation_id=conversation_id, text="Hello world"),
            sender_id,
        )

        with pytest.raises(ValidationError):
            await message_data.update_message(sent.id, "TAG1")
