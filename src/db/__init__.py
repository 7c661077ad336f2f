"""
Persistence layer for Cell Escape.

Provides the save-record codec plus interfaces and implementations for:
- FileSaveRepository: plain-text save file on disk
- InMemorySaveRepository: for testing (no filesystem access)
"""

from __future__ import annotations

from src.db.codec import SaveFormatError, deserialize, serialize
from src.db.interfaces import SaveRepository
from src.db.memory import InMemorySaveRepository
from src.db.savefile import FileSaveRepository

__all__ = [
    # Codec
    "SaveFormatError",
    "deserialize",
    "serialize",
    # Protocol interface
    "SaveRepository",
    # Implementations
    "FileSaveRepository",
    "InMemorySaveRepository",
]
