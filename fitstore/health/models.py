# -*- coding: utf-8 -*-
"""Health metrics — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class HealthMetricCreate(BaseModel):
    user_id: int
    weight: float = Field(..., gt=0, le=500, description="kg")
    height: float = Field(..., gt=0, le=300, description="cm")
    recorded_date: Optional[datetime] = Field(None, description="Defaults to the creation time")


class HealthMetric(BaseModel):
    id: int
    user_id: int
    weight: float
    height: float
    bmi: float
    recorded_date: datetime
    created_at: datetime
