# -*- coding: utf-8 -*-
"""Goals — Pydantic models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class GoalCreate(BaseModel):
    user_id: int
    title: str = Field(..., min_length=1, max_length=128)
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=64)
    target_value: float
    current_value: float = 0.0
    unit: str = Field(..., max_length=32)
    target_date: Optional[date] = None
    completed: bool = False


class Goal(GoalCreate):
    id: int
    created_at: datetime


def goal_sort_key(record: Dict[str, Any]) -> date:
    # A goal without a target date sorts as the earliest possible date.
    return record.get("target_date") or date.min
