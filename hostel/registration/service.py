"""
Registration Service

Business rules applied before a student is stored. The proximity rule
here is its own rule instance and does not share state with the
pipeline's ProximityStage.
"""

import logging
from typing import Optional

from hostel.errors import DuplicateRegistrationError, ProximityViolationError
from hostel.models.student import Student
from hostel.registration.repository import StudentRepository
from hostel.validation.stages import DEFAULT_MIN_DISTANCE


logger = logging.getLogger(__name__)


class RegistrationService:
    """Business logic layer for student registration."""

    def __init__(
        self,
        repository: Optional[StudentRepository] = None,
        min_distance: int = DEFAULT_MIN_DISTANCE,
    ):
        """Initialize the service.

        Args:
            repository: Storage to use. A fresh one is created if omitted.
            min_distance: Minimum distance from the hostel to be eligible.
        """
        self.repository = repository if repository is not None else StudentRepository()
        self.min_distance = min_distance

    def register(self, student: Student) -> Student:
        """Register a student.

        Raises:
            ProximityViolationError: If the student lives too close.
            DuplicateRegistrationError: If the name is already registered.
        """
        if student.distance < self.min_distance:
            raise ProximityViolationError(student.name, student.distance, self.min_distance)

        if self.repository.exists(student.name):
            raise DuplicateRegistrationError(student.name)

        self.repository.add(student)
        logger.info(f"Registered student {student.name}")
        return student

    def lookup(self, name: str) -> Optional[Student]:
        return self.repository.get(name)
