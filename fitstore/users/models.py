# -*- coding: utf-8 -*-
"""Users — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=128)
    email: Optional[str] = Field(None, max_length=254)
    avatar: Optional[str] = None


class User(UserCreate):
    id: int
    created_at: datetime
