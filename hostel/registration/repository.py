"""In-memory student storage keyed by name."""

from typing import Dict, List, Optional

from hostel.models.student import Student


class StudentRepository:
    """Data access layer for registered students."""

    def __init__(self):
        self._students: Dict[str, Student] = {}

    def add(self, student: Student) -> None:
        self._students[student.name] = student

    def get(self, name: str) -> Optional[Student]:
        return self._students.get(name)

    def exists(self, name: str) -> bool:
        return name in self._students

    def all(self) -> List[Student]:
        return list(self._students.values())

    def __len__(self) -> int:
        return len(self._students)
