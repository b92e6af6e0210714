"""
Validation Module for Hostel Registration

Provides the ordered, first-failure-aborts validation pipeline and the
standard stage set (proximity, payment, allocation).
"""

from hostel.validation.result import StageResult, PipelineResult
from hostel.validation.stages import (
    Stage,
    ProximityStage,
    PaymentStage,
    AllocationStage,
    default_stages,
)
from hostel.validation.pipeline import ValidationPipeline

__all__ = [
    "StageResult",
    "PipelineResult",
    "Stage",
    "ProximityStage",
    "PaymentStage",
    "AllocationStage",
    "default_stages",
    "ValidationPipeline",
]
