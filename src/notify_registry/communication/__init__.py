from .channel import TopicChannel
from .registry import NotificationRegistry, SubscriptionHandle

__all__ = ["NotificationRegistry", "SubscriptionHandle", "TopicChannel"]
