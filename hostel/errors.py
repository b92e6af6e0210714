"""
Hostel Error Hierarchy

Defines all custom exceptions used by the hostel registration system.
Every error here is recoverable: callers are expected to catch it,
report it and keep running.

Error Hierarchy:
    HostelError (base)
    ├── ValidationFailureError (a pipeline stage rejected the student)
    ├── RegistrationError
    │   ├── DuplicateRegistrationError (name already registered)
    │   └── ProximityViolationError (student lives too close)
    ├── NotificationDeliveryError (one or more observers failed)
    └── ConfigurationError (invalid/missing configuration)
"""

from typing import List, Optional


class HostelError(Exception):
    """Base exception for all hostel registration errors."""
    pass


class ValidationFailureError(HostelError):
    """A validation pipeline stage rejected the student.

    Raised only by ``PipelineResult.raise_for_failure()``; the pipeline
    itself returns failures as values.

    Attributes:
        result: The failing StageResult
    """

    def __init__(self, result):
        super().__init__(result.message)
        self.result = result

    @property
    def stage(self) -> str:
        return self.result.stage


class RegistrationError(HostelError):
    """Base class for errors raised by the registration service."""
    pass


class DuplicateRegistrationError(RegistrationError):
    """A student with the same name is already registered.

    Attributes:
        name: The duplicated student name
    """

    def __init__(self, name: str):
        super().__init__(f"Student {name} is already registered")
        self.name = name


class ProximityViolationError(RegistrationError):
    """Student lives closer to the hostel than the allowed minimum.

    Attributes:
        name: Student name
        distance: Reported distance from the hostel
        threshold: Minimum distance required
    """

    def __init__(self, name: str, distance: int, threshold: int):
        super().__init__(
            f"{name} lives too close to the hostel "
            f"(distance {distance} < {threshold})"
        )
        self.name = name
        self.distance = distance
        self.threshold = threshold


class NotificationDeliveryError(HostelError):
    """One or more observers failed to receive a broadcast.

    Attributes:
        failures: List of DeliveryFailure records
    """

    def __init__(self, failures: List, message: Optional[str] = None):
        names = ", ".join(f.observer for f in failures)
        super().__init__(message or f"Notification delivery failed for: {names}")
        self.failures = failures


class ConfigurationError(HostelError):
    """Raised when configuration is invalid or cannot be loaded.

    The message should tell the user which value or file is wrong.
    """
    pass
