"""Tests for the conversation store and transcript export"""
from datetime import datetime, timezone

import pytest

from logidesk.infra.storage import InMemoryKeyValueStore
from logidesk.models.conversation import Message, Sender
from logidesk.services.conversation import (
    CONVERSATIONS_STORAGE_KEY,
    CURRENT_CONVERSATION_STORAGE_KEY,
    GREETING_MESSAGE,
    ConversationStore,
    content_disposition,
    export_filename,
    format_transcript,
)
from logidesk.services.persistence import QUOTA_NOTICE
from logidesk.utils.datetime_helper import get_timezone


@pytest.fixture
def conversations(store, dt_clock):
    return ConversationStore(store, clock=dt_clock)


def _say(conversations, sender, content, conversation_id=None):
    message = conversations.create_message(sender, content)
    return conversations.append_message(conversation_id, message)


class TestAppend:
    def test_first_message_creates_conversation(self, conversations):
        conversation = _say(conversations, Sender.USER, "Hello")

        assert conversations.current_id == conversation.id
        assert conversation.title == "Conversation 1"
        assert conversation.last_message == "Hello"
        assert len(conversation.messages) == 1

    def test_appends_to_current(self, conversations):
        first = _say(conversations, Sender.USER, "Hello")
        second = _say(conversations, Sender.AI, "Hi there")

        assert first.id == second.id
        assert [m.content for m in second.messages] == ["Hello", "Hi there"]
        assert second.updated_at == second.messages[-1].timestamp

    def test_new_conversations_listed_first(self, conversations):
        _say(conversations, Sender.USER, "one")
        conversations.new_chat()
        _say(conversations, Sender.USER, "two")

        titles = [c.title for c in conversations.list_conversations()]
        assert titles == ["Conversation 2", "Conversation 1"]

    def test_unknown_target_starts_new_conversation(self, conversations):
        conversation = _say(conversations, Sender.USER, "Hello", conversation_id="gone")

        assert conversation.id != "gone"
        assert conversations.current_id == conversation.id


class TestPointer:
    def test_delete_current_then_append_creates_new_id(self, conversations):
        deleted = _say(conversations, Sender.USER, "Hello")

        assert conversations.delete_conversation(deleted.id) is True
        assert conversations.current_id is None

        fresh = _say(conversations, Sender.USER, "Again")
        assert fresh.id != deleted.id
        assert conversations.get_conversation(deleted.id) is None

    def test_delete_other_keeps_pointer(self, conversations):
        first = _say(conversations, Sender.USER, "one")
        conversations.new_chat()
        second = _say(conversations, Sender.USER, "two")

        conversations.delete_conversation(first.id)

        assert conversations.current_id == second.id

    def test_select_unknown_is_noop(self, conversations):
        current = _say(conversations, Sender.USER, "Hello")

        assert conversations.select_conversation("missing") is False
        assert conversations.current_id == current.id

    def test_select_existing(self, conversations):
        first = _say(conversations, Sender.USER, "one")
        conversations.new_chat()
        _say(conversations, Sender.USER, "two")

        assert conversations.select_conversation(first.id) is True
        assert conversations.current_id == first.id

    def test_greeting_when_no_current(self, conversations):
        messages = conversations.current_messages()

        assert len(messages) == 1
        assert messages[0].sender == Sender.AI
        assert messages[0].content == GREETING_MESSAGE

    def test_recent_messages_window(self, conversations):
        for i in range(5):
            conversation = _say(conversations, Sender.USER, f"m{i}")

        recent = conversations.recent_messages(conversation.id, 2)
        assert [m.content for m in recent] == ["m3", "m4"]


class TestPersistence:
    def test_reload_restores_conversations_and_pointer(self, store, conversations, dt_clock):
        conversation = _say(conversations, Sender.USER, "Hello")

        reloaded = ConversationStore(store, clock=dt_clock)

        assert reloaded.current_id == conversation.id
        assert reloaded.current.messages[0].content == "Hello"

    def test_pointer_stored_as_json_string(self, store, conversations):
        conversation = _say(conversations, Sender.USER, "Hello")
        assert store.get_json(CURRENT_CONVERSATION_STORAGE_KEY) == conversation.id

        conversations.new_chat()
        assert store.get_json(CURRENT_CONVERSATION_STORAGE_KEY) == ""

    def test_quota_overflow_keeps_messages_in_memory(self, dt_clock):
        # Room for the pointer but not for the conversation list
        store = InMemoryKeyValueStore(quota_bytes=80)
        conversations = ConversationStore(store, clock=dt_clock)

        conversation = _say(conversations, Sender.USER, "Hello")
        _say(conversations, Sender.AI, "Hi there")

        assert [m.content for m in conversations.current.messages] == ["Hello", "Hi there"]
        assert conversations.last_notice == QUOTA_NOTICE
        assert store.get(CONVERSATIONS_STORAGE_KEY) is None
        assert store.get_json(CURRENT_CONVERSATION_STORAGE_KEY) == conversation.id

    def test_dangling_pointer_is_dropped(self, store, dt_clock):
        store.set_json(CONVERSATIONS_STORAGE_KEY, [])
        store.set_json(CURRENT_CONVERSATION_STORAGE_KEY, "gone")

        assert ConversationStore(store, clock=dt_clock).current_id is None


class TestExport:
    def _messages(self):
        return [
            Message(id="1", sender=Sender.USER, content="Where is my cargo?",
                    timestamp=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
            Message(id="2", sender=Sender.AI, content="In Odesa port.",
                    timestamp=datetime(2024, 1, 2, 3, 4, 9, tzinfo=timezone.utc)),
        ]

    def test_transcript_format(self):
        text = format_transcript(self._messages(), timezone.utc)

        assert text == (
            "You (02.01.2024, 03:04:05):\nWhere is my cargo?\n\n"
            "AI Assistant (02.01.2024, 03:04:09):\nIn Odesa port.\n\n"
        )

    def test_transcript_is_repeatable(self):
        messages = self._messages()
        assert format_transcript(messages, timezone.utc) == format_transcript(messages, timezone.utc)

    def test_transcript_uses_display_zone(self):
        text = format_transcript(self._messages()[:1], get_timezone("Europe/Kyiv"))
        assert text.startswith("You (02.01.2024, 05:04:05):")

    def test_export_unknown_conversation(self, conversations):
        with pytest.raises(KeyError):
            conversations.export_conversation("missing", timezone.utc)

    def test_export_filename(self):
        assert export_filename("Conversation 3") == "Conversation 3.txt"
        assert export_filename("???") == "conversation.txt"

    def test_ascii_content_disposition(self):
        assert content_disposition("Conversation 3.txt") == 'attachment; filename="Conversation 3.txt"'

    def test_non_ascii_content_disposition_is_latin1_safe(self):
        header = content_disposition(export_filename("Нова розмова"))

        assert header == (
            'attachment; filename="conversation.txt"; '
            "filename*=UTF-8''%D0%9D%D0%BE%D0%B2%D0%B0%20%D1%80%D0%BE%D0%B7%D0%BC%D0%BE%D0%B2%D0%B0.txt"
        )
        header.encode("latin-1")

    def test_mixed_title_keeps_ascii_part_in_fallback(self):
        header = content_disposition(export_filename("Рейс Kyiv-Lviv"))
        assert header.startswith('attachment; filename="Kyiv-Lviv.txt"; filename*=UTF-8\'\'')
