"""
Snapshot loading, the data-access side of the engine boundary.

Reads the payload shape produced by the spreadsheet endpoint:

    {
      "latestMonth": "2024/02",
      "latestData": [{"month", "category", "label", "balance", "memo"?}, ...],
      "raw":        [... full history, same record shape ...],
      "summary":    [{"category", "balance"}, ...],
      "goals":      [{"name", "category", "target", "deadline"}, ...]
    }

A payload without a ``summary`` list is treated as malformed. An empty list
is a valid portfolio with no holdings yet. Substituting the demo
snapshot on failure is the caller's decision (see the CLI); the analytics
engine never knows where a snapshot came from.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import Any

import yaml
from loguru import logger

from finpro.core.exceptions import FileIOError, SnapshotError
from finpro.core.utils.file_io import safe_write
from finpro.financial.calculators import tables
from finpro.financial.models import Goal, HoldingRecord, PortfolioSnapshot, YearMonth


def _record_from_dict(item: Mapping[str, Any], default_month: YearMonth) -> HoldingRecord:
    return HoldingRecord(
        month=YearMonth.parse(item.get("month") or default_month),
        category=str(item.get("category") or tables.OTHER),
        label=str(item.get("label") or ""),
        balance=item.get("balance"),
        memo=item.get("memo") or None,
    )


def _goal_from_dict(item: Mapping[str, Any]) -> Goal:
    return Goal(
        name=str(item["name"]),
        category=str(item.get("category") or ""),
        target=item.get("target"),
        deadline=str(item["deadline"]),
    )


def snapshot_from_dict(payload: Any) -> PortfolioSnapshot:
    """Build a PortfolioSnapshot from an endpoint payload.

    Raises:
        SnapshotError: if the payload is not a mapping, lacks ``summary``, or
            contains unparseable months, goals, or deadlines.
    """
    if not isinstance(payload, Mapping) or not isinstance(payload.get("summary"), list):
        raise SnapshotError("Snapshot payload has no category summary")

    try:
        latest_month = YearMonth.parse(payload["latestMonth"])
        latest = [_record_from_dict(item, latest_month) for item in payload.get("latestData") or []]
        history = [_record_from_dict(item, latest_month) for item in payload.get("raw") or []]
        goals = [_goal_from_dict(item) for item in payload.get("goals") or []]
    except (KeyError, TypeError, ValueError) as e:
        raise SnapshotError(f"Malformed snapshot payload: {e}") from e

    logger.debug(f"Loaded snapshot {latest_month}: {len(latest)} holdings, {len(history)} history rows")
    return PortfolioSnapshot(
        latest_holdings=tuple(latest),
        historical_holdings=tuple(history),
        goals=tuple(goals),
        latest_month=latest_month,
    )


def snapshot_to_dict(snapshot: PortfolioSnapshot) -> dict[str, Any]:
    """Inverse of snapshot_from_dict; ``summary`` is recomputed from the latest holdings."""

    def record(r: HoldingRecord) -> dict[str, Any]:
        out = {"month": str(r.month), "category": r.category, "label": r.label, "balance": r.balance}
        if r.memo:
            out["memo"] = r.memo
        return out

    summary: dict[str, int] = {}
    for r in snapshot.latest_holdings:
        summary[r.category] = summary.get(r.category, 0) + r.balance

    return {
        "latestMonth": str(snapshot.latest_month),
        "latestData": [record(r) for r in snapshot.latest_holdings],
        "raw": [record(r) for r in snapshot.historical_holdings],
        "summary": [{"category": c, "balance": b} for c, b in summary.items()],
        "goals": [
            {"name": g.name, "category": g.category, "target": g.target, "deadline": g.deadline.isoformat()}
            for g in snapshot.goals
        ],
    }


def load_snapshot(path: str) -> PortfolioSnapshot:
    """Load a snapshot from a JSON or YAML file."""
    ext = os.path.splitext(path)[1].lower()
    try:
        with open(path, encoding="utf-8") as f:
            if ext in (".yaml", ".yml"):
                payload = yaml.safe_load(f)
            else:
                payload = json.load(f)
    except OSError as e:
        raise FileIOError(f"Cannot read snapshot {path}: {e}") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise SnapshotError(f"Cannot parse snapshot {path}: {e}") from e
    return snapshot_from_dict(payload)


def save_snapshot(snapshot: PortfolioSnapshot, path: str) -> None:
    """Write a snapshot as YAML (.yaml/.yml) or JSON (anything else)."""
    payload = snapshot_to_dict(snapshot)
    ext = os.path.splitext(path)[1].lower()
    if ext in (".yaml", ".yml"):
        content = yaml.safe_dump(payload, allow_unicode=True, sort_keys=False)
    else:
        content = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    safe_write(path, content)


# === Demonstration dataset ===

_DEMO_PAYLOAD = {
    "latestMonth": "2024/02",
    "summary": [
        {"category": tables.CASH, "balance": 1_850_000},
        {"category": tables.SECURITIES, "balance": 4_650_000},
        {"category": tables.CRYPTO, "balance": 920_000},
        {"category": tables.INSURANCE_PENSION, "balance": 2_110_000},
    ],
    "latestData": [
        {"month": "2024/02", "category": tables.CASH, "label": "Online Bank", "balance": 1_350_000},
        {"month": "2024/02", "category": tables.CASH, "label": "City Bank", "balance": 500_000},
        {"month": "2024/02", "category": tables.SECURITIES, "label": "Brokerage A", "balance": 3_250_000},
        {"month": "2024/02", "category": tables.SECURITIES, "label": "Brokerage B", "balance": 1_400_000},
        {"month": "2024/02", "category": tables.CRYPTO, "label": "Bitcoin", "balance": 920_000},
        {"month": "2024/02", "category": tables.INSURANCE_PENSION, "label": "Savings Insurance", "balance": 1_100_000},
        {"month": "2024/02", "category": tables.INSURANCE_PENSION, "label": "Mutual Aid Pension", "balance": 1_010_000},
    ],
    "raw": [
        {"month": "2024/01", "category": tables.CASH, "label": "Online Bank", "balance": 1_300_000},
        {"month": "2024/01", "category": tables.SECURITIES, "label": "Brokerage A", "balance": 3_100_000},
        {"month": "2024/02", "category": tables.CASH, "label": "Online Bank", "balance": 1_350_000},
        {"month": "2024/02", "category": tables.SECURITIES, "label": "Brokerage A", "balance": 3_250_000},
        {"month": "2024/03", "category": tables.CASH, "label": "Bonus", "balance": 400_000, "memo": "scheduled"},
    ],
    "goals": [
        {"name": "10M total assets", "category": "Overall", "target": 10_000_000, "deadline": "2025-12-31"},
        {"name": "New car fund", "category": "Savings", "target": 3_000_000, "deadline": "2024-06-30"},
    ],
}

DEMO_SNAPSHOT = snapshot_from_dict(_DEMO_PAYLOAD)
