"""Shared test fixtures for finpro."""

import tempfile

import pytest

from finpro.financial.models import Goal, HoldingRecord, PortfolioSnapshot, YearMonth


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def feb_2024():
    return YearMonth(2024, 2)


@pytest.fixture
def latest_holdings(feb_2024):
    return [
        HoldingRecord(feb_2024, "Cash", "Online Bank", 1_350_000),
        HoldingRecord(feb_2024, "Cash", "City Bank", 500_000),
        HoldingRecord(feb_2024, "Securities", "Brokerage A", 3_250_000),
        HoldingRecord(feb_2024, "Securities", "Brokerage B", 1_400_000),
        HoldingRecord(feb_2024, "Crypto", "Bitcoin", 920_000),
        HoldingRecord(feb_2024, "Insurance & Pension", "Savings Insurance", 1_100_000),
        HoldingRecord(feb_2024, "Insurance & Pension", "Mutual Aid Pension", 1_010_000),
    ]


@pytest.fixture
def sample_snapshot(latest_holdings, feb_2024):
    history = [
        HoldingRecord(YearMonth(2024, 1), "Cash", "Online Bank", 1_300_000),
        *latest_holdings,
        HoldingRecord(YearMonth(2024, 4), "Cash", "Bonus", 400_000, memo="scheduled"),
    ]
    goals = [
        Goal("10M total", "Overall", 10_000_000, "2025-12-31"),
        Goal("New car", "Savings", 3_000_000, "2024-06-30"),
    ]
    return PortfolioSnapshot(
        latest_holdings=latest_holdings,
        historical_holdings=history,
        goals=goals,
        latest_month=feb_2024,
    )
