# -*- coding: utf-8 -*-
"""Storage backends."""

from __future__ import annotations

from typing import Optional

from ..config import Settings, settings as default_settings
from .base import Storage
from .memory import Clock, MemStorage


def create_storage(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> Storage:
    """Build the store a process should create once at startup and pass to its consumers."""
    cfg = settings or default_settings
    return MemStorage(
        clock=clock,
        seed_articles=cfg.seed_articles,
        articles_limit=cfg.articles_limit,
        upcoming_limit=cfg.upcoming_limit,
    )


__all__ = ["Clock", "MemStorage", "Storage", "create_storage"]
