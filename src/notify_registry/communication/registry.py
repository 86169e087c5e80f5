from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..errors import DeliveryError, DeliveryFailure, InvalidArgument
from ..settings import RegistrySettings

logger = logging.getLogger(__name__)

Callback = Callable[[Any], None]

_ids = itertools.count(1)


@dataclass(frozen=True)
class SubscriptionHandle:
    """Opaque token for one subscription. Only useful for ``unsubscribe``."""

    topic: str
    id: int = field(default_factory=lambda: next(_ids))

    def __repr__(self) -> str:
        return f"<SubscriptionHandle #{self.id} topic={self.topic!r}>"


class NotificationRegistry:
    """Thread-safe, synchronous topic pub-sub.

    Callbacks run outside the lock, so a subscriber may itself subscribe,
    unsubscribe or publish. Each publish delivers to the subscribers that
    were registered when it started.
    """

    def __init__(self, settings: Optional[RegistrySettings] = None):
        self.settings = settings or RegistrySettings()
        self._subscribers: Dict[str, List[Tuple[SubscriptionHandle, Callback]]] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------

    def subscribe(self, topic: str, callback: Callback) -> SubscriptionHandle:
        if not isinstance(topic, str) or not topic:
            raise InvalidArgument(f"Topic must be a non-empty string, got {topic!r}")
        if not callable(callback):
            raise InvalidArgument(f"Callback for topic {topic!r} is not callable")
        handle = SubscriptionHandle(topic)
        with self._lock:
            self._subscribers.setdefault(topic, []).append((handle, callback))
        logger.debug("subscribed %r", handle)
        return handle

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        """Remove a subscription. Unknown or already-removed handles are ignored."""
        if not isinstance(handle, SubscriptionHandle):
            return
        with self._lock:
            entries = self._subscribers.get(handle.topic)
            if not entries:
                return
            for i, (h, _) in enumerate(entries):
                if h == handle:
                    del entries[i]
                    break
            else:
                return
            if not entries and self.settings.prune_empty_topics:
                del self._subscribers[handle.topic]
        logger.debug("unsubscribed %r", handle)

    def clear(self, topic: Optional[str] = None) -> int:
        """Drop every subscription of ``topic`` (or of all topics). Returns how many were removed."""
        with self._lock:
            if topic is None:
                removed = sum(len(v) for v in self._subscribers.values())
                self._subscribers.clear()
            else:
                removed = len(self._subscribers.pop(topic, ()))
        if removed:
            logger.debug("cleared %d subscription(s) from %s", removed, topic or "all topics")
        return removed

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    def publish(self, topic: str, payload: Any) -> None:
        with self._lock:
            snapshot = list(self._subscribers.get(topic, ()))
        if not snapshot:
            logger.debug("publish on %r: no subscribers", topic)
            return

        failures: List[DeliveryFailure] = []
        for handle, cb in snapshot:
            try:
                cb(payload)
            except Exception as exc:
                if self.settings.log_failures:
                    logger.warning("subscriber %r failed on topic %r", handle, topic, exc_info=True)
                failures.append(DeliveryFailure(handle, exc))

        logger.debug("published to %d subscriber(s) on %r, %d failed", len(snapshot), topic, len(failures))
        if failures:
            raise DeliveryError(topic, failures) from failures[0].error

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def subscriber_count(self, topic: str) -> int:
        with self._lock:
            return len(self._subscribers.get(topic, ()))

    def topics(self) -> List[str]:
        with self._lock:
            return [t for t, entries in self._subscribers.items() if entries]

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {t: len(entries) for t, entries in self._subscribers.items() if entries}

    def __len__(self) -> int:
        with self._lock:
            return sum(len(v) for v in self._subscribers.values())
