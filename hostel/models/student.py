"""
Student Model

Immutable record of a hostel applicant. Created once and passed by
reference through validation stages and registration layers.
"""

from pydantic import BaseModel, ConfigDict, Field


class Student(BaseModel):
    """A hostel applicant.

    Attributes:
        name: Identifying name, unique within a run
        distance: Distance from the hostel in domain units
        fee_paid: Whether the hostel fee has been paid
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Student name")
    distance: int = Field(..., ge=0, description="Distance from the hostel")
    fee_paid: bool = Field(..., description="Whether the hostel fee is paid")

    def __str__(self) -> str:
        status = "paid" if self.fee_paid else "unpaid"
        return f"{self.name} (distance {self.distance}, fee {status})"
