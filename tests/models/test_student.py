"""
Tests for hostel.models.student
"""

import pytest
from pydantic import ValidationError

from hostel.models import Student


class TestStudent:
    def test_fields(self, john):
        assert john.name == "John Doe"
        assert john.distance == 15
        assert john.fee_paid is True

    def test_is_immutable(self, john):
        with pytest.raises(ValidationError):
            john.distance = 3
        assert john.distance == 15

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Student(name="", distance=15, fee_paid=True)

    def test_negative_distance_rejected(self):
        with pytest.raises(ValidationError):
            Student(name="Ann", distance=-1, fee_paid=True)

    def test_str_mentions_fee_status(self, unpaid):
        assert "Sam" in str(unpaid)
        assert "unpaid" in str(unpaid)
