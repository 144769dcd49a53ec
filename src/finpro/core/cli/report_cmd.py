"""finpro report: dashboard summary for one snapshot."""

from __future__ import annotations

import json

import click


@click.command()
@click.argument("snapshot", required=False, type=click.Path(dir_okay=False))
@click.option("--month", default=None, help="Current month as YYYY/MM (defaults to the snapshot's latest month).")
@click.option("--json", "as_json", is_flag=True, help="Print plain JSON instead of tables.")
@click.pass_obj
def report(config, snapshot: str | None, month: str | None, as_json: bool) -> None:
    """Show holdings, health score, income, rebalancing, cash flow, and goals."""
    from finpro.core.cli.common import build_dashboard, load_snapshot_or_demo
    from finpro.financial.models import YearMonth

    snap, is_demo = load_snapshot_or_demo(snapshot, config)
    try:
        current = YearMonth.parse(month) if month else None
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--month") from e

    result = build_dashboard(config).build_report(snap, current_month=current)

    if as_json:
        payload = result.to_dict()
        payload["demo"] = is_demo
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    _render(result, is_demo)


def _render(result, is_demo: bool) -> None:
    from rich.console import Console
    from rich.table import Table

    console = Console()
    title = f"Portfolio {result.month}" + (" (demo data)" if is_demo else "")
    console.print(f"[bold]{title}[/bold]  total {result.total_assets:,}")

    holdings = Table(title="Holdings by category")
    holdings.add_column("Category")
    holdings.add_column("Balance", justify="right")
    holdings.add_column("Weight", justify="right")
    for entry, total in zip(result.rebalance.entries, result.totals):
        holdings.add_row(total.category, f"{total.balance:,}", f"{entry.current_weight:.1%}")
    console.print(holdings)

    health = result.health
    console.print(f"Health score: [bold]{health.score}[/bold] ({health.status.value}): {health.advice}")
    console.print(
        f"Income: {result.income.annual_income:,}/year, "
        f"{result.income.monthly_income:,}/month, {result.income.daily_income:,}/day"
    )

    rebalance = Table(title="Rebalancing")
    for col in ("Category", "Current", "Target", "Diff (pt)", "Amount", "Status"):
        rebalance.add_column(col, justify="left" if col in ("Category", "Status") else "right")
    for e in result.rebalance.entries:
        rebalance.add_row(
            e.category,
            f"{e.current_weight:.1%}",
            f"{e.target_weight:.1%}",
            f"{e.diff_percent_points:+.1f}",
            f"{e.diff_amount:+,}",
            e.status.value,
        )
    console.print(rebalance)
    console.print(f"To reach target allocation: {result.rebalance.total_rebalance_amount:,}")

    flow = Table(title="Cash flow")
    flow.add_column("Month")
    flow.add_column("Amount", justify="right")
    flow.add_column("Type")
    for p in result.cash_flow:
        flow.add_row(str(p.month), f"{p.amount:,}", p.type.value)
    console.print(flow)

    for g in result.goals:
        console.print(f"Goal {g.goal.name}: {g.percent}% (remaining {g.remaining:,}, due {g.goal.deadline})")
