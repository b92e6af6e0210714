"""
Registration Module for Hostel Registration

Three-layer wrapper around student registration:
- StudentRepository: in-memory data access keyed by name
- RegistrationService: business rules (proximity, uniqueness)
- RegistrationController: presentation, turns errors into messages
"""

from hostel.registration.repository import StudentRepository
from hostel.registration.service import RegistrationService
from hostel.registration.controller import RegistrationController

__all__ = [
    "StudentRepository",
    "RegistrationService",
    "RegistrationController",
]
