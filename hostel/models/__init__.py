"""Domain models for hostel registration."""

from hostel.models.student import Student

__all__ = ["Student"]
