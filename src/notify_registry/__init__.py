from __future__ import annotations

"""In-process, thread-safe topic notification registry."""

from .communication import NotificationRegistry, SubscriptionHandle, TopicChannel
from .errors import DeliveryError, DeliveryFailure, InvalidArgument, RegistryError
from .settings import RegistrySettings

__all__ = [
    "NotificationRegistry",
    "SubscriptionHandle",
    "TopicChannel",
    "RegistrySettings",
    "RegistryError",
    "InvalidArgument",
    "DeliveryError",
    "DeliveryFailure",
]
