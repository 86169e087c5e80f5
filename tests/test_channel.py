import pytest

from notify_registry import DeliveryError, InvalidArgument, NotificationRegistry, TopicChannel


def test_channel_publish_and_receive():
    registry = NotificationRegistry()
    channel = TopicChannel(registry, "orders")
    received = []
    channel.on_message(received.append)

    channel.publish({"id": 1})
    registry.publish("orders", {"id": 2})

    assert received == [{"id": 1}, {"id": 2}]
    assert channel.subscriber_count == 1


def test_close_releases_only_own_subscriptions():
    registry = NotificationRegistry()
    other = []
    registry.subscribe("orders", other.append)

    channel = TopicChannel(registry, "orders")
    channel.on_message(lambda _: None)
    channel.on_message(lambda _: None)
    assert registry.subscriber_count("orders") == 3

    assert channel.close() == 2
    assert channel.close() == 0
    assert registry.subscriber_count("orders") == 1

    channel.publish("still here")
    assert other == ["still here"]


def test_context_manager_closes():
    registry = NotificationRegistry()
    with TopicChannel(registry, "t") as channel:
        channel.on_message(lambda _: None)
        assert registry.subscriber_count("t") == 1
    assert registry.subscriber_count("t") == 0


def test_close_after_manual_unsubscribe():
    registry = NotificationRegistry()
    channel = TopicChannel(registry, "t")
    h = channel.on_message(lambda _: None)
    registry.unsubscribe(h)
    assert channel.close() == 1
    assert registry.subscriber_count("t") == 0


def test_channel_propagates_delivery_error():
    registry = NotificationRegistry()
    channel = TopicChannel(registry, "t")

    def failing(_):
        raise RuntimeError("nope")

    h = channel.on_message(failing)
    with pytest.raises(DeliveryError) as info:
        channel.publish(1)
    assert info.value.handles == [h]


def test_channel_rejects_empty_topic():
    with pytest.raises(InvalidArgument):
        TopicChannel(NotificationRegistry(), "")
