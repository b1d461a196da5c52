from collections.abc import Mapping
from datetime import datetime
from typing import Any

from models import Goal
from schemas.goals import GoalOut, GoalView
from services.progress import goal_progress, progress_description

CATEGORY_ICONS = {
    "weight": "monitor_weight",
    "exercise": "directions_run",
    "hydration": "water_drop",
    "steps": "directions_walk",
    "nutrition": "restaurant",
    "sleep": "bedtime",
}
DEFAULT_ICON = "flag"

_PROGRESS_FIELDS = ("current_value", "target", "category", "initial_value", "completed")


def goal_values(values: Mapping[str, Any], existing: Goal | None = None) -> dict:
    """
    Complete a create/update payload with the derived progress and icon.
    Progress is fixed at submit time; a completed goal is always 100.
    """
    out = dict(values)
    merged = {
        field: out.get(field, getattr(existing, field, None))
        for field in _PROGRESS_FIELDS
    }
    if existing is None or any(field in values for field in _PROGRESS_FIELDS):
        if merged["completed"]:
            out["progress"] = 100
        else:
            out["progress"] = goal_progress(
                merged["current_value"],
                merged["target"],
                merged["category"] or "",
                merged["initial_value"],
            )
    if not out.get("icon") and (existing is None or not existing.icon):
        out["icon"] = CATEGORY_ICONS.get(merged["category"], DEFAULT_ICON)
    return out


def goal_view(goal: Goal, now: datetime) -> GoalView:
    base = GoalOut.model_validate(goal)
    return GoalView(
        **base.model_dump(),
        progress_description=progress_description(goal.progress),
        start_days_ago=max(0, (now - goal.start_date).days),
    )
