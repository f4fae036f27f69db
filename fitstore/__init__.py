# -*- coding: utf-8 -*-
"""In-memory data access for users, health metrics, diet, workouts, articles and goals."""

from .errors import InvalidInputError, NotFoundError, StorageError
from .storage import MemStorage, Storage, create_storage

__all__ = [
    "InvalidInputError",
    "MemStorage",
    "NotFoundError",
    "Storage",
    "StorageError",
    "create_storage",
]
