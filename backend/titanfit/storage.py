"""
String-keyed durable storage.

The whole application state is kept as one JSON document under a single key.
Writes commit before returning; database errors are left to the caller.
"""
from __future__ import annotations
from typing import Callable, Optional, Protocol

from sqlalchemy.orm import Session

from . import models


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class SqlKeyValueStore:
    """KeyValueStore backed by the 'storage_entries' table."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_item(self, key: str) -> Optional[str]:
        db = self.session_factory()
        try:
            entry = db.query(models.StorageEntry).filter(models.StorageEntry.key == key).first()
            return entry.value if entry else None
        finally:
            db.close()

    def set_item(self, key: str, value: str) -> None:
        db = self.session_factory()
        try:
            entry = db.query(models.StorageEntry).filter(models.StorageEntry.key == key).first()
            if entry:
                entry.value = value
            else:
                db.add(models.StorageEntry(key=key, value=value))
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
