"""
Key-Value Store

Whole-collection persistence on top of StoreEntry rows. Each collection is a
JSON array under a stable key; reads parse and validate the whole array,
writes replace it in a single statement. There are no partial updates, no
transactions across keys and no indexes: callers scan the loaded list.

The store itself is synchronous. Services expose async methods and call it
through sync_to_async, with simulate_latency standing in for the round-trip
of a networked backend.

Usage:
    store = KeyValueStore()
    users = store.load(Collection.USERS, UserAccount)
    store.save(Collection.USERS, users)
"""

import asyncio
import json
import logging
from typing import Any, TypeVar

from django.conf import settings
from django.db import transaction
from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import StoreCorrupt
from .models import Collection, StoreEntry

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

DEFAULT_KEY_PREFIX = "ariomuse_"


class KeyValueStore:
    """Collections of pydantic records serialised as JSON text."""

    def __init__(self, key_prefix: str | None = None):
        if key_prefix is None:
            key_prefix = getattr(settings, "STORE_KEY_PREFIX", DEFAULT_KEY_PREFIX)
        self.key_prefix = key_prefix

    def key_for(self, collection: Collection | str) -> str:
        return f"{self.key_prefix}{Collection(collection).value}"

    # ----- Collections -----

    def load(self, collection: Collection | str, record_type: type[RecordT]) -> list[RecordT]:
        """
        Load every record of a collection.

        Args:
            collection: Collection to read
            record_type: Pydantic model each element must validate against

        Returns:
            The records in stored order, or an empty list if nothing is stored yet

        Raises:
            StoreCorrupt: If the stored text is not a JSON array of valid records
        """
        key = self.key_for(collection)
        raw = self._read(key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise StoreCorrupt(key, f"expected a JSON array, got {type(raw).__name__}")
        try:
            return TypeAdapter(list[record_type]).validate_python(raw)
        except ValidationError as e:
            raise StoreCorrupt(key, str(e)) from e

    def save(self, collection: Collection | str, records: list[BaseModel]) -> None:
        """Replace the whole collection with `records`."""
        key = self.key_for(collection)
        self._write(key, [record.model_dump(mode="json") for record in records])
        logger.debug(f"Saved {len(records)} records to {key}")

    def reset(self, collection: Collection | str) -> None:
        """Drop a collection entirely. Used to recover from StoreCorrupt."""
        key = self.key_for(collection)
        deleted, _ = StoreEntry.objects.filter(key=key).delete()
        if deleted:
            logger.warning(f"Reset collection {key}")

    # ----- Singleton records -----

    def get(self, key: str, record_type: type[RecordT]) -> RecordT | None:
        """Read a single record, or None if the key is absent."""
        raw = self._read(key)
        if raw is None:
            return None
        try:
            return record_type.model_validate(raw)
        except ValidationError as e:
            raise StoreCorrupt(key, str(e)) from e

    def set(self, key: str, record: BaseModel) -> None:
        self._write(key, record.model_dump(mode="json"))

    def clear(self, key: str) -> None:
        StoreEntry.objects.filter(key=key).delete()

    # ----- Raw access -----

    def _read(self, key: str) -> Any:
        entry = StoreEntry.get_or_none(key)
        if entry is None:
            return None
        try:
            return json.loads(entry.value)
        except json.JSONDecodeError as e:
            raise StoreCorrupt(key, f"invalid JSON: {e}") from e

    def _write(self, key: str, document: Any) -> None:
        with transaction.atomic():
            StoreEntry.objects.update_or_create(
                key=key,
                defaults={"value": json.dumps(document)},
            )


async def simulate_latency(operation: str) -> None:
    """
    Sleep for the configured latency of a store operation.

    STORE_SIMULATED_LATENCY maps operation names ("auth", "update", "list",
    "save") to seconds. Missing or zero entries return immediately.
    """
    latency = getattr(settings, "STORE_SIMULATED_LATENCY", {}).get(operation, 0)
    if latency:
        await asyncio.sleep(latency)
