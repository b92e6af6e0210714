"""
Register Subcommand Module

Validates a single student through the pipeline, stores them via the
registration layers and notifies the configured observers.
"""

import sys
from typing import Optional

import click
from pydantic import ValidationError

from cli.help_texts import (
    DISTANCE_HELP,
    ExitCodes,
    FEE_PAID_HELP,
    MIN_DISTANCE_HELP,
    NAME_HELP,
    REGISTER_HELP,
)
from cli.shared_options import config_option, log_level_option
from cli.wiring import build_controller, build_hub, build_pipeline, echo_stage_result, load_config
from hostel.models import Student


@click.command(help=REGISTER_HELP)
@click.option("--name", "-n", required=True, help=NAME_HELP)
@click.option("--distance", "-d", required=True, type=int, help=DISTANCE_HELP)
@click.option("--fee-paid/--fee-unpaid", default=False, help=FEE_PAID_HELP)
@click.option("--min-distance", type=click.IntRange(min=0), default=None, help=MIN_DISTANCE_HELP)
@config_option()
@log_level_option()
def register(
    name: str,
    distance: int,
    fee_paid: bool,
    min_distance: Optional[int],
    config_file: Optional[str],
    log_level: Optional[str],
):
    """Validate and register a student.

    Examples:
        # Eligible student
        hostel-registration register --name "John Doe" --distance 15 --fee-paid

        # Stricter threshold from the command line
        hostel-registration register -n Jane -d 12 --fee-paid --min-distance 20
    """
    config = load_config(config_file, {
        "min_distance": min_distance,
        "log_level": log_level.lower() if log_level else None,
    })

    try:
        student = Student(name=name, distance=distance, fee_paid=fee_paid)
    except ValidationError as e:
        errors = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        click.echo(f"Error: invalid student: {errors}", err=True)
        sys.exit(ExitCodes.VALIDATION_FAILED)

    click.echo(f"Validating {student}...")
    result = build_pipeline(config).run(student, on_result=echo_stage_result)

    if not result.passed:
        click.echo(f"Validation failed: {result.failure.message}", err=True)
        sys.exit(ExitCodes.VALIDATION_FAILED)

    if not build_controller(config).register(student):
        sys.exit(ExitCodes.VALIDATION_FAILED)

    report = build_hub(config).broadcast(f"Student {student.name} has been allocated a room")
    if not report.ok:
        for failure in report.failures:
            click.echo(f"Notification failed: {failure}", err=True)
        sys.exit(ExitCodes.NOTIFICATION_FAILED)
