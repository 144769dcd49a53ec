"""Goal progress against total assets."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from finpro.financial.calculators.holdings import guarded_total
from finpro.financial.models import Goal


@dataclass(frozen=True)
class GoalProgress:
    goal: Goal
    percent: int  # 0..100
    remaining: int  # amount still missing, never negative


def goal_progress(goal: Goal, total_assets: int) -> GoalProgress:
    """Progress percentage is floored and capped at 100."""
    percent = min(100, math.floor(total_assets / guarded_total(goal.target) * 100))
    return GoalProgress(goal=goal, percent=max(0, percent), remaining=max(0, goal.target - total_assets))


def track_goals(goals: Iterable[Goal], total_assets: int) -> list[GoalProgress]:
    return [goal_progress(g, total_assets) for g in goals]
