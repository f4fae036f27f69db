# -*- coding: utf-8 -*-
"""Articles — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    content: str
    summary: str
    image_url: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=64)
    read_time: int = Field(..., ge=0, description="minutes")


class Article(ArticleCreate):
    id: int
    created_at: datetime
