"""
Validation Pipeline

Runs an ordered list of stages against a student. Evaluation is
sequential and stops at the first failing stage; that stage's result is
surfaced unchanged to the caller.
"""

import logging
from typing import Callable, Iterable, List, Optional

from hostel.models.student import Student
from hostel.validation.result import PipelineResult, StageResult
from hostel.validation.stages import Stage


logger = logging.getLogger(__name__)

ResultCallback = Callable[[StageResult], None]


class ValidationPipeline:
    """Ordered chain of validation stages with first-failure-aborts semantics.

    The pipeline owns its stage list (insertion order preserved) but not
    the students it validates. An empty pipeline accepts every student.
    """

    def __init__(self, stages: Optional[Iterable[Stage]] = None):
        """Initialize the pipeline.

        Args:
            stages: Initial stages, evaluated in the given order.
        """
        self._stages: List[Stage] = list(stages or [])

    @property
    def stages(self) -> tuple:
        return tuple(self._stages)

    def add_stage(self, stage: Stage) -> "ValidationPipeline":
        """Append a stage to the end of the pipeline.

        Returns:
            The pipeline itself, so calls can be chained.
        """
        self._stages.append(stage)
        return self

    def __len__(self) -> int:
        return len(self._stages)

    def run(self, student: Student, on_result: Optional[ResultCallback] = None) -> PipelineResult:
        """Validate a student.

        Each stage result is handed to ``on_result`` as soon as it is
        produced, before the next stage runs.

        Args:
            student: The student to validate.
            on_result: Optional callback invoked after every stage.

        Returns:
            PipelineResult holding the results of every stage that ran.
        """
        result = PipelineResult(student=student.name)

        for stage in self._stages:
            outcome = stage.evaluate(student)
            result.results.append(outcome)

            if outcome.passed:
                logger.info(f"[{outcome.stage}] {outcome.message}")
            else:
                logger.warning(f"[{outcome.stage}] {outcome.message}")

            if on_result is not None:
                on_result(outcome)

            if not outcome.passed:
                skipped = len(self._stages) - len(result.results)
                logger.debug(f"Pipeline stopped at '{outcome.stage}', {skipped} stage(s) skipped")
                break

        return result
