# -*- coding: utf-8 -*-
"""Read-side normalization of stored records.

Every getter passes stored dicts through one of these functions before
building a model, so reads always see the same shape:
- timestamps are timezone-aware ``datetime`` values (ISO strings are parsed);
- date-only fields are ``date`` values;
- optional fields that may be missing (``avatar``, ``image_url``) are present,
  ``None`` when absent; other values (an empty string included) are kept.

All functions are pure and idempotent; they return a new dict.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Dict, Optional


def as_datetime(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    else:
        dt = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def as_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


def normalize_record(record: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(record)
    out["created_at"] = as_datetime(out.get("created_at"))
    return out


def normalize_user(record: Dict[str, Any]) -> Dict[str, Any]:
    out = normalize_record(record)
    out["avatar"] = out.get("avatar")
    return out


def normalize_health_metric(record: Dict[str, Any]) -> Dict[str, Any]:
    out = normalize_record(record)
    out["recorded_date"] = as_datetime(out.get("recorded_date")) or out["created_at"]
    return out


def normalize_workout(record: Dict[str, Any]) -> Dict[str, Any]:
    out = normalize_record(record)
    out["scheduled_date"] = as_date(out.get("scheduled_date"))
    return out


def normalize_article(record: Dict[str, Any]) -> Dict[str, Any]:
    out = normalize_record(record)
    out["image_url"] = out.get("image_url")
    return out


def normalize_goal(record: Dict[str, Any]) -> Dict[str, Any]:
    out = normalize_record(record)
    out["target_date"] = as_date(out.get("target_date"))
    return out
