"""
SQLAlchemy models for the TitanFit database tables.
"""
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from .database import Base


class StorageEntry(Base):
    """One string-keyed document in the 'storage_entries' table."""
    __tablename__ = "storage_entries"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<StorageEntry(key={self.key}, size={len(self.value or '')})>"
