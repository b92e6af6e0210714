"""
Validation Result Data Models

Defines StageResult and PipelineResult dataclasses used to report the
outcome of each stage and of a whole pipeline run.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from hostel.errors import ValidationFailureError


@dataclass(frozen=True)
class StageResult:
    """Outcome of a single stage evaluation.

    Attributes:
        stage: Name of the stage that produced this result
        passed: Whether the stage accepted the student
        message: Success text, or the failure reason naming the student
            and the violated rule
    """
    stage: str
    passed: bool
    message: str

    @classmethod
    def success(cls, stage: str, message: str) -> "StageResult":
        return cls(stage=stage, passed=True, message=message)

    @classmethod
    def failure(cls, stage: str, reason: str) -> "StageResult":
        return cls(stage=stage, passed=False, message=reason)


@dataclass
class PipelineResult:
    """Outcome of a pipeline run.

    Only stages that actually ran appear in ``results``; anything after
    the first failure is absent.

    Attributes:
        student: Name of the validated student
        results: Stage results in evaluation order
    """
    student: str
    results: List[StageResult] = field(default_factory=list)

    @property
    def failure(self) -> Optional[StageResult]:
        for result in self.results:
            if not result.passed:
                return result
        return None

    @property
    def passed(self) -> bool:
        return self.failure is None

    @property
    def stages_run(self) -> List[str]:
        return [r.stage for r in self.results]

    def raise_for_failure(self) -> None:
        """Raise ValidationFailureError if any stage failed."""
        failure = self.failure
        if failure is not None:
            raise ValidationFailureError(failure)

    def format_human(self) -> str:
        """Format result for human-readable console output."""
        if self.passed:
            lines = [f"✅ {self.student}: Accepted"]
        else:
            lines = [f"❌ {self.student}: Rejected at {self.failure.stage}"]

        for result in self.results:
            prefix = "  ✅" if result.passed else "  ❌"
            lines.append(f"{prefix} [{result.stage}] {result.message}")

        return "\n".join(lines)
