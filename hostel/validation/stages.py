"""
Validation Stages

Defines the Stage protocol and the standard stages used to vet a hostel
applicant. Stages are stateless: they read the student, return a
StageResult and keep nothing between calls.
"""

from dataclasses import dataclass
from typing import List, Protocol

from hostel.models.student import Student
from hostel.validation.result import StageResult


DEFAULT_MIN_DISTANCE = 10


class Stage(Protocol):
    """
    Protocol for pipeline stages.

    Implementations must provide:
    - A display name used in results and logs
    - An evaluate method that never raises for an expected rejection
    """

    name: str

    def evaluate(self, student: Student) -> StageResult:
        """
        Evaluate the student against this stage's rule.

        Args:
            student: The student being validated

        Returns:
            StageResult.success(...) or StageResult.failure(...)
        """


@dataclass(frozen=True)
class ProximityStage:
    """Rejects students living closer than ``threshold`` to the hostel."""
    threshold: int = DEFAULT_MIN_DISTANCE
    name: str = "proximity"

    def evaluate(self, student: Student) -> StageResult:
        if student.distance < self.threshold:
            return StageResult.failure(
                self.name,
                f"{student.name} lives too close to the hostel "
                f"(distance {student.distance} < {self.threshold})",
            )
        return StageResult.success(self.name, f"Proximity check passed for {student.name}")


@dataclass(frozen=True)
class PaymentStage:
    """Rejects students who have not paid the hostel fee."""
    name: str = "payment"

    def evaluate(self, student: Student) -> StageResult:
        if not student.fee_paid:
            return StageResult.failure(self.name, f"{student.name} has not paid the hostel fee")
        return StageResult.success(self.name, f"Fee payment verified for {student.name}")


@dataclass(frozen=True)
class AllocationStage:
    """Final action stage; allocates a room and never fails."""
    name: str = "allocation"

    def evaluate(self, student: Student) -> StageResult:
        return StageResult.success(self.name, f"Room allocated to {student.name}")


def default_stages(min_distance: int = DEFAULT_MIN_DISTANCE) -> List[Stage]:
    """Build the standard proximity → payment → allocation stage list."""
    return [ProximityStage(threshold=min_distance), PaymentStage(), AllocationStage()]
