# -*- coding: utf-8 -*-
"""Workouts and exercises — Pydantic models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class WorkoutCreate(BaseModel):
    user_id: int
    name: str = Field(..., min_length=1, max_length=128)
    description: Optional[str] = None
    duration: int = Field(..., ge=0, description="minutes")
    workout_type: Optional[str] = Field(None, max_length=64)
    scheduled_date: Optional[date] = None
    completed: bool = False


class Workout(WorkoutCreate):
    id: int
    created_at: datetime


class ExerciseCreate(BaseModel):
    workout_id: int
    name: str = Field(..., min_length=1, max_length=128)
    sets: int = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    weight: Optional[float] = Field(None, ge=0, description="kg")
    duration: Optional[int] = Field(None, ge=0, description="seconds")
    rest_time: Optional[int] = Field(None, ge=0, description="seconds")
    notes: Optional[str] = None


class Exercise(ExerciseCreate):
    id: int
    created_at: datetime
