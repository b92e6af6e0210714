"""
Demo Subcommand Module

Runs the reference scenarios: an eligible student, one living too
close, one with an unpaid fee, a duplicate registration and an observer
leaving the hub.
"""

from typing import Optional

import click

from cli.help_texts import DEMO_HELP
from cli.shared_options import config_option, log_level_option
from cli.wiring import build_controller, build_hub, build_pipeline, echo_stage_result, load_config
from hostel.models import Student


SCENARIOS = [
    Student(name="John Doe", distance=15, fee_paid=True),
    Student(name="Jane", distance=5, fee_paid=True),
    Student(name="Sam", distance=15, fee_paid=False),
]


@click.command(help=DEMO_HELP)
@config_option()
@log_level_option()
def demo(config_file: Optional[str], log_level: Optional[str]):
    """Run the reference registration scenarios."""
    config = load_config(config_file, {"log_level": log_level.lower() if log_level else None})

    pipeline = build_pipeline(config)
    hub = build_hub(config)
    controller = build_controller(config)

    results = []
    for student in SCENARIOS:
        click.echo(f"\n== {student} ==")
        result = pipeline.run(student, on_result=echo_stage_result)
        results.append(result)
        if not result.passed:
            click.echo(f"Validation failed: {result.failure.message}")
            continue
        if controller.register(student):
            hub.broadcast(f"Student {student.name} has been allocated a room")

    click.echo("\n== Duplicate registration ==")
    controller.register(SCENARIOS[0])

    if hub.observers:
        leaving = hub.observers[0]
        click.echo(f"\n== {leaving.name} unsubscribes ==")
        hub.unregister(leaving)
    hub.broadcast("Hostel rules have been updated")

    click.echo("\n== Summary ==")
    for result in results:
        click.echo(result.format_human())
