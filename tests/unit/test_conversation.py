"""Unit tests for the bounded conversation history."""

import pytest

from relay_llm.conversation import Conversation
from relay_llm.models.conversation_types import ConversationMessage, TurnRole


def user(text: str) -> ConversationMessage:
    return ConversationMessage(role=TurnRole.USER, content=text)


@pytest.mark.unit
class TestConversation:
    """Test FIFO bound, snapshots and capacity changes."""

    def test_append_below_capacity_keeps_order(self):
        conversation = Conversation(3)
        for text in ("a", "b"):
            conversation.append(user(text))

        assert len(conversation) == 2
        assert [m.content for m in conversation.snapshot()] == ["a", "b"]

    def test_oldest_messages_are_evicted_first(self):
        conversation = Conversation(3)
        for index in range(7):
            conversation.append(user(str(index)))

        assert len(conversation) == 3
        assert [m.content for m in conversation.snapshot()] == ["4", "5", "6"]

    def test_length_never_exceeds_capacity(self):
        conversation = Conversation(2)
        for index in range(10):
            conversation.append(user(str(index)))
            assert len(conversation) <= 2

    def test_snapshot_is_isolated_from_later_appends(self):
        conversation = Conversation(5)
        conversation.append(user("first"))
        snapshot = conversation.snapshot()

        conversation.append(user("second"))

        assert [m.content for m in snapshot] == ["first"]

    def test_snapshot_is_a_deep_copy(self):
        conversation = Conversation(5)
        conversation.append(ConversationMessage(
            role=TurnRole.ASSISTANT,
            content=[{"type": "text", "text": "hi"}],
        ))

        snapshot = conversation.snapshot()
        snapshot[0].content[0]["text"] = "changed"

        assert conversation.last().content[0]["text"] == "hi"

    def test_set_capacity_shrinks_from_the_head(self):
        conversation = Conversation(5)
        for index in range(5):
            conversation.append(user(str(index)))

        conversation.set_capacity(2)

        assert conversation.max_message_history == 2
        assert [m.content for m in conversation.snapshot()] == ["3", "4"]

    def test_set_capacity_grow_keeps_messages(self):
        conversation = Conversation(2)
        conversation.append(user("a"))
        conversation.append(user("b"))

        conversation.set_capacity(4)
        conversation.append(user("c"))

        assert [m.content for m in conversation.snapshot()] == ["a", "b", "c"]

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_capacity_below_one_is_rejected(self, capacity):
        with pytest.raises(ValueError):
            Conversation(capacity)
        with pytest.raises(ValueError):
            Conversation(3).set_capacity(capacity)

    def test_clear_and_last(self):
        conversation = Conversation(3)
        assert conversation.last() is None

        conversation.append(user("x"))
        assert conversation.last().content == "x"

        conversation.clear()
        assert len(conversation) == 0
        assert conversation.last() is None

    def test_to_wire(self):
        conversation = Conversation(3)
        conversation.append(user("hello"))

        assert conversation.to_wire() == [{"role": "user", "content": "hello"}]
