"""
Loading of the store directory document.

The document is a JSON array of store objects. It is re-read on every call so
edits to the file show up without restarting the service; the collection is
small enough that this costs nothing noticeable.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from storefinder.core.config import settings
from storefinder.schemas.stores import StoreRecord


_STORES_ADAPTER = TypeAdapter(List[StoreRecord])


class StoreDataError(Exception):
    """Base class for failures to produce the store collection."""

    public_message = "Failed to load store data."

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class StoreDataUnavailableError(StoreDataError):
    """The store document could not be read."""

    public_message = "Failed to load store data."


class InvalidStoreDataError(StoreDataError):
    """The store document was read but is not a well-formed list of stores."""

    public_message = "Invalid store data format."


def load_stores(path: Optional[Path] = None) -> List[StoreRecord]:
    """
    Read and validate the store document.

    Every record must have `name`, `address` and `tags`; a document with any
    malformed record is rejected as a whole.
    """
    stores_path = Path(path) if path is not None else settings.STORES_PATH

    try:
        raw = stores_path.read_bytes()
    except OSError as e:
        raise StoreDataUnavailableError(f"Error reading {stores_path}: {e}") from e

    try:
        return _STORES_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise InvalidStoreDataError(f"Error parsing {stores_path}: {e}") from e
