"""Mini README: Entry point CLI for running bankqueue scenarios.

This script exposes a Typer CLI that loads a JSON scenario (or the built-in
demo), queues every transaction into the tiered dispatcher, applies them in
order and prints a JSON report of outcomes and final balances. Settings are
drawn from ``BANKQUEUE_`` environment variables when available.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from bankqueue.configuration import get_settings
from bankqueue.exceptions import BankQueueError
from bankqueue.logging_utils import configure_root_logger
from bankqueue.processing import Scenario, demo_scenario, load_scenario, process_all

cli = typer.Typer(help="Queue and apply bank transactions from scenario files.")


def _run_scenario(scenario: Scenario, capacity: Optional[int]) -> None:
    try:
        settings = get_settings()
    except ValidationError as error:
        typer.echo(f"Error: invalid BANKQUEUE_ settings: {error}", err=True)
        raise typer.Exit(code=1) from error
    configure_root_logger(settings.log_level)
    effective_capacity = capacity or settings.tier_capacity
    try:
        built = scenario.build(effective_capacity)
        report = process_all(built.dispatcher)
    except BankQueueError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error

    payload = {
        "environment": settings.environment,
        "capacity_per_tier": effective_capacity,
        **report.as_dict(),
        "balances": built.balances(),
    }
    typer.echo(json.dumps(payload, indent=2))


@cli.command()
def run(
    scenario_path: Path = typer.Argument(..., help="Path to a JSON scenario file."),
    capacity: Optional[int] = typer.Option(None, min=1, help="Slots per tier heap."),
) -> None:
    """Process every transaction described in a scenario file."""

    try:
        scenario = load_scenario(scenario_path)
    except (BankQueueError, OSError) as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error
    _run_scenario(scenario, capacity)


@cli.command()
def demo(
    capacity: Optional[int] = typer.Option(None, min=1, help="Slots per tier heap."),
) -> None:
    """Process the built-in demo scenario."""

    _run_scenario(demo_scenario(), capacity)


if __name__ == "__main__":
    cli()
