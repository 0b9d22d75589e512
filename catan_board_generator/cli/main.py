from __future__ import annotations

import json
import time
from typing import Dict, Optional

import click
from rich.console import Console
from rich.progress import BarColumn, Progress, TimeRemainingColumn
from rich.table import Table

from catan_board_generator.generation.randomizer import generate_board
from catan_board_generator.generation.seeding import derive_seed, draw_seed
from catan_board_generator.generation.types import BoardConfig

from .render import board_payload, breakdown_table, corner_scores_table, render_board


def _format_pct(value: float) -> str:
    return f"{100.0 * value:.1f}%"


def _constraint_options(command):
    options = [
        click.option(
            "--prevent-same-resources/--allow-same-resources",
            default=False,
            show_default=True,
            help="Avoid identical neighbouring resources.",
        ),
        click.option(
            "--keep-desert-center/--free-desert",
            default=False,
            show_default=True,
            help="Always put the desert on the center tile.",
        ),
        click.option(
            "--no-same-neighbors/--allow-same-neighbors",
            default=True,
            show_default=True,
            help="Avoid identical neighbouring numbers.",
        ),
        click.option(
            "--pip-min",
            type=click.IntRange(2, 6),
            default=2,
            show_default=True,
            help="Lowest allowed interior corner score.",
        ),
        click.option(
            "--pip-max",
            type=click.IntRange(6, 13),
            default=13,
            show_default=True,
            help="Highest allowed interior corner score.",
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _build_config(
    prevent_same_resources: bool,
    keep_desert_center: bool,
    no_same_neighbors: bool,
    pip_min: int,
    pip_max: int,
) -> BoardConfig:
    if pip_min > pip_max:
        raise click.BadParameter(
            f"--pip-min ({pip_min}) must not exceed --pip-max ({pip_max}).",
            param_hint="--pip-min",
        )
    return BoardConfig(
        prevent_same_resources=prevent_same_resources,
        keep_desert_center=keep_desert_center,
        no_same_neighbors=no_same_neighbors,
        pip_min=pip_min,
        pip_max=pip_max,
    )


@click.group()
@click.version_option(package_name="catan-board-generator")
def cli():
    """Generate Catan-style boards under soft placement constraints."""


@cli.command()
@_constraint_options
@click.option("--resource-seed", type=int, default=None, help="Seed for the resource layer.")
@click.option("--number-seed", type=int, default=None, help="Seed for the number layer.")
@click.option("--corner-scores", is_flag=True, default=False, help="Also list interior corner scores.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the board as JSON.")
def generate(
    prevent_same_resources: bool,
    keep_desert_center: bool,
    no_same_neighbors: bool,
    pip_min: int,
    pip_max: int,
    resource_seed: Optional[int],
    number_seed: Optional[int],
    corner_scores: bool,
    as_json: bool,
):
    """
    Generate one board.

    Without seeds a fresh pair is drawn; the seeds are printed so the same
    board can be rebuilt with --resource-seed/--number-seed.
    """
    config = _build_config(prevent_same_resources, keep_desert_center, no_same_neighbors, pip_min, pip_max)
    board = generate_board(config, resource_seed=resource_seed, number_seed=number_seed)

    if as_json:
        click.echo(json.dumps(board_payload(board), indent=2))
        return

    console = Console()
    console.print(render_board(board))
    console.print(breakdown_table(board))
    if corner_scores:
        console.print(corner_scores_table(board))
    console.print(f"Resource seed: {board.resource_seed}")
    console.print(f"Number seed:   {board.number_seed}")


@cli.command()
@_constraint_options
@click.option("--runs", type=click.IntRange(min=1), default=100, show_default=True, help="Boards to generate.")
@click.option("--seed", "base_seed", type=int, default=None, help="Base seed; per-run seeds are derived from it.")
def sweep(
    prevent_same_resources: bool,
    keep_desert_center: bool,
    no_same_neighbors: bool,
    pip_min: int,
    pip_max: int,
    runs: int,
    base_seed: Optional[int],
):
    """
    Generate many boards and report how often each rule is satisfied.
    """
    config = _build_config(prevent_same_resources, keep_desert_center, no_same_neighbors, pip_min, pip_max)
    base_seed = draw_seed() if base_seed is None else base_seed
    console = Console()
    console.print(f"[green]Sweeping[/green] runs={runs} base_seed={base_seed}")

    totals: Dict[str, float] = {
        "hot_adjacency": 0.0,
        "same_number_adjacency": 0.0,
        "same_resource_adjacency": 0.0,
        "pip_below": 0.0,
        "pip_above": 0.0,
    }
    zero_resource = 0
    zero_number = 0
    zero_board = 0

    started = time.time()
    with Progress(
        "[progress.description]{task.description}",
        BarColumn(),
        "[progress.percentage]{task.percentage:>3.0f}%",
        TimeRemainingColumn(),
        console=console,
    ) as progress:
        bar = progress.add_task("Generating...", total=runs)
        for run_index in range(runs):
            board = generate_board(
                config,
                resource_seed=derive_seed(base_seed, "resources", run_index),
                number_seed=derive_seed(base_seed, "numbers", run_index),
            )
            breakdown = board.breakdown
            for key in totals:
                totals[key] += getattr(breakdown, key)
            number_total = breakdown.total - breakdown.same_resource_adjacency
            zero_resource += int(breakdown.same_resource_adjacency == 0)
            zero_number += int(number_total == 0)
            zero_board += int(breakdown.total == 0)
            progress.update(bar, advance=1)
    elapsed = time.time() - started

    summary = Table(title=f"Sweep Summary - {runs} boards")
    summary.add_column("Measure")
    summary.add_column("Value", justify="right")
    summary.add_row("Resource layer clean", _format_pct(zero_resource / runs))
    summary.add_row("Number layer clean", _format_pct(zero_number / runs))
    summary.add_row("Board clean", _format_pct(zero_board / runs))
    for key, value in totals.items():
        summary.add_row(f"Avg {key.replace('_', ' ')}", f"{value / runs:.3f}")
    console.print(summary)
    console.print(f"[green]Done.[/green] Runtime: {elapsed:.2f}s")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
