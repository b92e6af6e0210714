"""
Registration Controller

Presentation layer: calls the service and converts registration errors
into console messages so the caller keeps running.
"""

import logging
from typing import Callable

import click

from hostel.errors import RegistrationError
from hostel.models.student import Student
from hostel.registration.service import RegistrationService


logger = logging.getLogger(__name__)


class RegistrationController:
    """Presentation layer for student registration."""

    def __init__(self, service: RegistrationService, echo: Callable[[str], None] = click.echo):
        self.service = service
        self._echo = echo

    def register(self, student: Student) -> bool:
        """Register a student and print the outcome.

        Returns:
            True if the student was registered, False otherwise.
        """
        try:
            self.service.register(student)
        except RegistrationError as e:
            logger.warning(f"Registration rejected for {student.name}: {e}")
            self._echo(f"Registration failed: {e}")
            return False

        self._echo(f"Student {student.name} registered successfully")
        return True
