"""finpro project: multi-year growth projection."""

from __future__ import annotations

import json
import math
from datetime import date

import click


def _finite(ctx, param, value: float) -> float:
    if not math.isfinite(value):
        raise click.BadParameter("must be a finite number")
    return value


@click.command()
@click.argument("snapshot", required=False, type=click.Path(dir_okay=False))
@click.option("--savings", default=100_000, show_default=True, type=float, callback=_finite, help="Monthly savings.")
@click.option(
    "--rate", default=5.0, show_default=True, type=float, callback=_finite, help="Expected annual return in percent."
)
@click.option("--years", default=20, show_default=True, type=int, help="Projection horizon in years.")
@click.option("--start-year", default=None, type=int, help="Calendar year of offset 0 (defaults to this year).")
@click.option("--json", "as_json", is_flag=True, help="Print plain JSON instead of a table.")
@click.pass_obj
def project(
    config,
    snapshot: str | None,
    savings: float,
    rate: float,
    years: int,
    start_year: int | None,
    as_json: bool,
) -> None:
    """Project optimistic, median, and pessimistic portfolio growth."""
    from finpro.core.cli.common import build_dashboard, load_snapshot_or_demo
    from finpro.financial.calculators import SimulationParams, aggregate_holdings
    from finpro.financial.dashboard import projection_to_dicts

    snap, is_demo = load_snapshot_or_demo(snapshot, config)
    total_assets = aggregate_holdings(snap.latest_holdings).total_assets

    # Input boundary: snap to slider ranges before the engine sees anything.
    params = SimulationParams.clamped(savings, rate / 100, years)
    start = start_year if start_year is not None else date.today().year
    points = build_dashboard(config).project(total_assets, params, start_year=start)

    if as_json:
        payload = {
            "total_assets": total_assets,
            "monthly_savings": params.monthly_savings,
            "annual_return_rate": params.annual_return_rate,
            "horizon_years": params.horizon_years,
            "demo": is_demo,
            "points": projection_to_dicts(points),
        }
        click.echo(json.dumps(payload, indent=2))
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(
        title=(
            f"Projection: {params.monthly_savings:,}/month at {params.annual_return_rate:.1%} "
            f"for {params.horizon_years}y" + (" (demo data)" if is_demo else "")
        )
    )
    table.add_column("Year")
    for col in ("Pessimistic", "Median", "Optimistic"):
        table.add_column(col, justify="right")
    for p in points:
        table.add_row(str(p.calendar_year), f"{p.pessimistic:,}", f"{p.median:,}", f"{p.optimistic:,}")
    Console().print(table)
