# -*- coding: utf-8 -*-
"""Workout ordering.

Scheduled workouts sort chronologically; whenever either side of a
comparison has no scheduled date, the more recently created workout comes
first (higher id first when created_at ties). The comparator is used as-is
(it is not transitive across mixed scheduled/unscheduled lists), so results
depend on list.sort's algorithm and the input order, which is insertion
order.
"""

from __future__ import annotations

from datetime import date
from functools import cmp_to_key
from typing import Any, Dict, List


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def compare_workouts(a: Dict[str, Any], b: Dict[str, Any]) -> int:
    """Three-way comparison of two normalized workout records (<0: a first)."""
    a_date = a.get("scheduled_date")
    b_date = b.get("scheduled_date")
    if a_date and b_date:
        return _sign((a_date - b_date).days)
    by_created = _sign((b["created_at"] - a["created_at"]).total_seconds())
    if by_created:
        return by_created
    # Same instant: the higher id was created later.
    return _sign(b.get("id", 0) - a.get("id", 0))


def sort_workouts(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(records, key=cmp_to_key(compare_workouts))


def current_workout(records: List[Dict[str, Any]], today: date) -> Dict[str, Any] | None:
    ordered = sort_workouts(records)
    for record in ordered:
        if record.get("scheduled_date") == today:
            return record
    return ordered[0] if ordered else None


def upcoming_workouts(records: List[Dict[str, Any]], today: date, limit: int) -> List[Dict[str, Any]]:
    scheduled = [r for r in records if r.get("scheduled_date") and r["scheduled_date"] > today]
    scheduled.sort(key=lambda r: r["scheduled_date"])
    return scheduled[:limit]
