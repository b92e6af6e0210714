"""
Notification Hub

Registry of observers plus a synchronous broadcast. Delivery follows
registration order. A failing observer does not stop delivery to the
others: the error is logged, recorded in the BroadcastReport and the
broadcast continues.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from hostel.errors import NotificationDeliveryError
from hostel.notifications.observers import Observer


logger = logging.getLogger(__name__)


@dataclass
class DeliveryFailure:
    """A single failed delivery.

    Attributes:
        observer: Display name of the observer that failed
        error: The exception raised by its receive method
    """
    observer: str
    error: Exception

    def __str__(self) -> str:
        return f"{self.observer}: {self.error}"


@dataclass
class BroadcastReport:
    """Outcome of a broadcast.

    Attributes:
        message: The broadcast payload
        delivered: Number of observers that received it without error
        failures: Deliveries that raised
    """
    message: str
    delivered: int = 0
    failures: List[DeliveryFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise NotificationDeliveryError if any delivery failed."""
        if self.failures:
            raise NotificationDeliveryError(self.failures)


class NotificationHub:
    """Publishes text messages to registered observers.

    Registration is not deduplicated: an observer registered twice is
    delivered to twice. Removal is by identity.
    """

    def __init__(self):
        self._observers: List[Observer] = []

    @property
    def observers(self) -> tuple:
        return tuple(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def register(self, observer: Observer) -> None:
        """Add an observer to the end of the delivery list."""
        self._observers.append(observer)
        logger.debug(f"Registered observer '{observer.name}' ({len(self._observers)} total)")

    def unregister(self, observer: Observer) -> None:
        """Remove the first registration of this exact observer object.

        Unregistering an observer that is not registered does nothing.
        """
        for index, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[index]
                logger.debug(f"Unregistered observer '{observer.name}'")
                return
        logger.debug(f"Observer '{observer.name}' was not registered")

    def broadcast(self, message: str) -> BroadcastReport:
        """Deliver a message to every registered observer.

        Delivery is synchronous and in registration order. Observers
        registered or removed by a receiver during the broadcast do not
        affect the current delivery.

        Args:
            message: Text to deliver.

        Returns:
            BroadcastReport with the delivery count and any failures.
        """
        report = BroadcastReport(message=message)

        for observer in list(self._observers):
            try:
                observer.receive(message)
            except Exception as e:
                logger.exception(f"Observer '{observer.name}' failed to receive notification")
                report.failures.append(DeliveryFailure(observer=observer.name, error=e))
            else:
                report.delivered += 1
                logger.debug(f"Delivered notification to '{observer.name}'")

        return report
