# -*- coding: utf-8 -*-
"""Diet plans and meals — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


MealType = Literal["breakfast", "lunch", "dinner", "snack"]


class DietPlanCreate(BaseModel):
    user_id: int
    name: str = Field(..., min_length=1, max_length=128)
    description: Optional[str] = None
    daily_calories: int = Field(..., ge=0)
    protein_target: Optional[int] = Field(None, ge=0, description="g/day")
    carbs_target: Optional[int] = Field(None, ge=0, description="g/day")
    fat_target: Optional[int] = Field(None, ge=0, description="g/day")


class DietPlan(DietPlanCreate):
    id: int
    created_at: datetime


class MealCreate(BaseModel):
    diet_plan_id: int
    name: str = Field(..., min_length=1, max_length=128)
    meal_type: MealType
    time: Optional[str] = Field(None, description="HH:MM")
    calories: int = Field(..., ge=0)
    protein: Optional[int] = Field(None, ge=0)
    carbs: Optional[int] = Field(None, ge=0)
    fat: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None


class Meal(MealCreate):
    id: int
    created_at: datetime
