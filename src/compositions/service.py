"""
Composition Service

CRUD over the compositions collection, scoped by an explicit user id. Every
operation loads the whole collection, works on the list and writes it back.

Ownership is not checked here: get_by_id returns any user's composition and
callers decide whether the current user may see it.
"""

import logging

from asgiref.sync import sync_to_async

from src.store.models import Collection
from src.store.store import KeyValueStore, simulate_latency
from .exceptions import CompositionNotFound
from .types import Composition, CompositionSettings

logger = logging.getLogger(__name__)


class CompositionService:
    """Per-user composition library backed by the key-value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _load(self) -> list[Composition]:
        return self.store.load(Collection.COMPOSITIONS, Composition)

    def _save(self, compositions: list[Composition]) -> None:
        self.store.save(Collection.COMPOSITIONS, compositions)

    async def list_by_user(self, user_id: str) -> list[Composition]:
        """Return the user's compositions, most recently updated first."""
        await simulate_latency("list")
        compositions = await sync_to_async(self._load)()
        owned = [c for c in compositions if c.user_id == user_id]
        return sorted(owned, key=lambda c: c.updated_at, reverse=True)

    async def get_by_id(self, composition_id: str) -> Composition | None:
        compositions = await sync_to_async(self._load)()
        return next((c for c in compositions if c.id == composition_id), None)

    async def save(self, composition: Composition) -> None:
        """Insert or fully replace the composition with the same id."""
        await simulate_latency("save")
        await sync_to_async(self._upsert)(composition)

    def _upsert(self, composition: Composition) -> None:
        compositions = self._load()
        for i, existing in enumerate(compositions):
            if existing.id == composition.id:
                compositions[i] = composition
                break
        else:
            compositions.append(composition)
        self._save(compositions)
        logger.info(f"Saved composition {composition.id} for user {composition.user_id}")

    async def delete_by_id(self, composition_id: str) -> None:
        """Remove a composition. Unknown ids are ignored."""
        await sync_to_async(self._delete)(composition_id)

    def _delete(self, composition_id: str) -> None:
        compositions = self._load()
        remaining = [c for c in compositions if c.id != composition_id]
        if len(remaining) == len(compositions):
            return
        self._save(remaining)
        logger.info(f"Deleted composition {composition_id}")

    # ----- Field updates -----

    async def _update(self, composition_id: str, change) -> Composition:
        composition = await self.get_by_id(composition_id)
        if composition is None:
            raise CompositionNotFound(composition_id)
        updated = change(composition)
        await self.save(updated)
        return updated

    async def set_favorite(self, composition_id: str, is_favorite: bool) -> Composition:
        return await self._update(
            composition_id, lambda c: c.touched(is_favorite=is_favorite)
        )

    async def set_tags(self, composition_id: str, tags: set[str] | list[str]) -> Composition:
        cleaned = {t.strip() for t in tags if t and t.strip()}
        return await self._update(composition_id, lambda c: c.touched(tags=cleaned))

    async def add_version(
        self,
        composition_id: str,
        notation: str,
        commentary: str | None = None,
        settings: CompositionSettings | None = None,
    ) -> Composition:
        """Append a regenerated version and make it current."""
        return await self._update(
            composition_id,
            lambda c: c.with_version(notation, commentary, settings),
        )
