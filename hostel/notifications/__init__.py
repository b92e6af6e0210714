"""
Notifications Module for Hostel Registration

Provides the NotificationHub and the standard observers that receive
its broadcasts.
"""

from hostel.notifications.observers import Observer, ConsoleObserver, RecordingObserver
from hostel.notifications.hub import NotificationHub, BroadcastReport, DeliveryFailure

__all__ = [
    "Observer",
    "ConsoleObserver",
    "RecordingObserver",
    "NotificationHub",
    "BroadcastReport",
    "DeliveryFailure",
]
