"""Exception types raised by the notification registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from .communication.registry import SubscriptionHandle


class RegistryError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(RegistryError, ValueError):
    """A topic or callback was rejected before any state changed."""


@dataclass(frozen=True)
class DeliveryFailure:
    """One subscriber that raised during a publish."""

    handle: "SubscriptionHandle"
    error: Exception


class DeliveryError(RegistryError):
    """Raised by ``publish`` after every subscriber was tried and at least one failed.

    ``failures`` keeps the delivery order, so ``failures[0]`` is the first
    subscriber that raised.
    """

    def __init__(self, topic: str, failures: Sequence[DeliveryFailure]):
        self.topic = topic
        self.failures: List[DeliveryFailure] = list(failures)
        first = self.failures[0].error if self.failures else None
        msg = f"{len(self.failures)} subscriber(s) failed on topic {topic!r}"
        if first is not None:
            msg += f"; first error: {type(first).__name__}: {first}"
        super().__init__(msg)

    @property
    def handles(self) -> List["SubscriptionHandle"]:
        return [f.handle for f in self.failures]
