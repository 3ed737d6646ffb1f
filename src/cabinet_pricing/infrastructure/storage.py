"""Key-value store for catalog data, projects and settings.

Records are kept as plain JSON-compatible dicts grouped by collection key.
The store treats every record as opaque; cabinets are normalized by the
application layer when they are read.
"""

from __future__ import annotations

import copy
import json
import logging
import uuid
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any

from cabinet_pricing.domain.value_objects import PricingSettings

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"
TAXONOMIES_KEY = "taxonomies"


class StorageKey(str, Enum):
    """Record collections held by the store."""

    CABINETS = "cabinets"
    MATERIALS = "materials"
    ACCESSORIES = "accessories"
    PROJECTS = "projects"
    USERS = "users"
    COMPONENTS = "components"


class StorageError(Exception):
    """Raised when a write to the store fails."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.message = message
        self.key = key
        super().__init__(message)


def empty_taxonomies() -> dict[str, list[Any]]:
    return {
        "categories": [],
        "materialTypes": [],
        "accessoryCategories": [],
        "componentCategories": [],
    }


class KeyValueStore(ABC):
    """Collection store over a single JSON-compatible document.

    Reads never raise: a failing read is logged and yields an empty
    collection, empty taxonomies or default settings. Writes raise
    StorageError, except the settings and taxonomies writers which report
    failure through their return value.
    """

    @abstractmethod
    def _load(self) -> dict[str, Any]:
        """Return the whole document."""

    @abstractmethod
    def _dump(self, document: dict[str, Any]) -> None:
        """Persist the whole document."""

    # --- Collections ---

    def get_all(self, key: StorageKey) -> list[dict[str, Any]]:
        try:
            items = self._load().get(StorageKey(key).value, [])
        except (OSError, ValueError) as e:
            logger.error(f"Failed to get all {key}: {e}")
            return []
        if not isinstance(items, list):
            logger.error(f"Collection {key} is not a list; ignoring stored value")
            return []
        return [item for item in items if isinstance(item, dict)]

    def get_by_id(self, key: StorageKey, item_id: str) -> dict[str, Any] | None:
        return next((i for i in self.get_all(key) if i.get("id") == item_id), None)

    def get_by_name(self, key: StorageKey, name: str) -> dict[str, Any] | None:
        return next((i for i in self.get_all(key) if i.get("name") == name), None)

    def create(self, key: StorageKey, item: dict[str, Any]) -> dict[str, Any]:
        """Append a record, keeping its id if it has one."""
        new_item = dict(item)
        if "id" not in new_item:
            new_item["id"] = str(uuid.uuid4())
        self._write_collection(key, self.get_all(key) + [new_item])
        return new_item

    def save(self, key: StorageKey, item: dict[str, Any]) -> dict[str, Any]:
        """Append a record under a freshly generated id."""
        new_item = {**item, "id": str(uuid.uuid4())}
        self._write_collection(key, self.get_all(key) + [new_item])
        return new_item

    def update(self, key: StorageKey, item: dict[str, Any]) -> dict[str, Any]:
        """Replace the record sharing ``item``'s id. Unknown ids change nothing."""
        items = [item if existing.get("id") == item.get("id") else existing for existing in self.get_all(key)]
        self._write_collection(key, items)
        return item

    def remove(self, key: StorageKey, item_id: str) -> bool:
        """Delete the whole record with the given id."""
        items = [i for i in self.get_all(key) if i.get("id") != item_id]
        try:
            self._write_collection(key, items)
        except StorageError:
            return False
        return True

    def _write_collection(self, key: StorageKey, items: list[dict[str, Any]]) -> None:
        name = StorageKey(key).value
        try:
            document = self._load()
            document[name] = items
            self._dump(document)
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Failed to write {name}: {e}")
            raise StorageError(f"Failed to write {name}: {e}", key=name) from e

    # --- Taxonomies ---

    def get_taxonomies(self) -> dict[str, Any]:
        try:
            taxonomies = self._load().get(TAXONOMIES_KEY)
        except (OSError, ValueError) as e:
            logger.error(f"Error getting taxonomies: {e}")
            return empty_taxonomies()
        if not isinstance(taxonomies, dict):
            return empty_taxonomies()
        return taxonomies

    def save_taxonomies(self, taxonomies: dict[str, Any]) -> bool:
        try:
            document = self._load()
            document[TAXONOMIES_KEY] = taxonomies
            self._dump(document)
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error saving taxonomies: {e}")
            return False
        return True

    # --- Settings ---

    def get_settings(self) -> PricingSettings:
        try:
            stored = self._load().get(SETTINGS_KEY)
        except (OSError, ValueError) as e:
            logger.error(f"Error getting settings: {e}")
            return PricingSettings()
        if not isinstance(stored, dict):
            return PricingSettings()
        return PricingSettings.from_dict(stored)

    def update_settings(self, settings: PricingSettings) -> bool:
        try:
            document = self._load()
            document[SETTINGS_KEY] = settings.to_dict()
            self._dump(document)
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error saving settings: {e}")
            return False
        return True

    # --- Shortcuts ---

    def get_furniture_presets(self) -> list[dict[str, Any]]:
        """Cabinet records flagged as presets."""
        return [c for c in self.get_all(StorageKey.CABINETS) if c.get("isPreset") is True]


class InMemoryStore(KeyValueStore):
    """Store held in process memory. Useful for tests and the default API app."""

    def __init__(self, document: dict[str, Any] | None = None) -> None:
        self._document: dict[str, Any] = copy.deepcopy(document) if document else {}

    def _load(self) -> dict[str, Any]:
        return copy.deepcopy(self._document)

    def _dump(self, document: dict[str, Any]) -> None:
        self._document = copy.deepcopy(document)


class JsonFileStore(KeyValueStore):
    """Store persisted as one JSON document on disk.

    A missing file reads as an empty store and is created on first write.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Store file {self.path} does not contain a JSON object")
        return data

    def _dump(self, document: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug(f"Wrote store file {self.path}")
