# -*- coding: utf-8 -*-
"""Storage errors."""

from __future__ import annotations

from typing import Any


class StorageError(Exception):
    """Base class for errors raised by a storage backend."""


class NotFoundError(StorageError, LookupError):
    def __init__(self, entity: str, entity_id: Any) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class InvalidInputError(StorageError, ValueError):
    """Input a backend cannot store (e.g. a height that makes BMI undefined)."""
