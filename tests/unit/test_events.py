"""Unit tests for the webhook-fed EventBus."""

from writing_assistant.chat.events import MESSAGE_NEW, EventBus


class TestEventBus:
    async def test_delivers_to_handlers_of_matching_type(self) -> None:
        bus = EventBus()
        received: list[str] = []

        async def on_message(event: dict) -> None:
            received.append(event["id"])

        bus.on(MESSAGE_NEW, on_message)
        await bus.publish({"type": MESSAGE_NEW, "id": "1"})
        await bus.publish({"type": "reaction.new", "id": "2"})

        assert received == ["1"]

    async def test_failing_handler_does_not_block_others(self) -> None:
        bus = EventBus()
        received: list[str] = []

        async def broken(event: dict) -> None:
            raise RuntimeError("boom")

        async def working(event: dict) -> None:
            received.append(event["type"])

        bus.on(MESSAGE_NEW, broken)
        bus.on(MESSAGE_NEW, working)
        await bus.publish({"type": MESSAGE_NEW})

        assert received == [MESSAGE_NEW]

    async def test_handler_can_unsubscribe_during_dispatch(self) -> None:
        bus = EventBus()
        calls: list[str] = []

        async def once(event: dict) -> None:
            calls.append("once")
            bus.off(MESSAGE_NEW, once)

        async def always(event: dict) -> None:
            calls.append("always")

        bus.on(MESSAGE_NEW, once)
        bus.on(MESSAGE_NEW, always)
        await bus.publish({"type": MESSAGE_NEW})
        await bus.publish({"type": MESSAGE_NEW})

        assert calls == ["once", "always", "always"]
        assert bus.handler_count(MESSAGE_NEW) == 1

    async def test_events_without_type_are_ignored(self) -> None:
        bus = EventBus()
        bus.off("unknown", lambda event: None)

        await bus.publish({"cid": "messaging:abc"})

        assert bus.handler_count("unknown") == 0
