from __future__ import annotations

import logging
import os


class Settings:
    """Centralized configuration for the fitness data store."""

    def __init__(self) -> None:
        self.seed_articles: bool = (os.environ.get("FITSTORE_SEED_ARTICLES") or "1").strip() in {
            "1",
            "true",
            "True",
        }
        self.articles_limit: int = int(os.environ.get("FITSTORE_ARTICLES_LIMIT") or "10")
        self.upcoming_limit: int = int(os.environ.get("FITSTORE_UPCOMING_LIMIT") or "5")
        self.log_level: str = (os.environ.get("FITSTORE_LOG_LEVEL") or "INFO").strip().upper()


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, level or settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
