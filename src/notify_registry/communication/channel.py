from __future__ import annotations

from typing import Any, Callable, List

from ..errors import InvalidArgument
from .registry import NotificationRegistry, SubscriptionHandle


class TopicChannel:
    """One topic on a registry, remembering the subscriptions made through it."""

    def __init__(self, registry: NotificationRegistry, topic: str):
        if not isinstance(topic, str) or not topic:
            raise InvalidArgument(f"Topic must be a non-empty string, got {topic!r}")
        self.registry = registry
        self.topic = topic
        self._handles: List[SubscriptionHandle] = []

    def publish(self, payload: Any):
        self.registry.publish(self.topic, payload)

    def on_message(self, cb: Callable[[Any], None]) -> SubscriptionHandle:
        handle = self.registry.subscribe(self.topic, cb)
        self._handles.append(handle)
        return handle

    @property
    def subscriber_count(self) -> int:
        return self.registry.subscriber_count(self.topic)

    def close(self) -> int:
        """Unsubscribe everything registered through this channel."""
        handles, self._handles = self._handles, []
        for handle in handles:
            self.registry.unsubscribe(handle)
        return len(handles)

    def __enter__(self) -> "TopicChannel":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
