"""
Portfolio persistence.

The whole portfolio is stored as ONE serialized JSON array under a fixed
namespace key. Backends only need to read, write and remove that blob; the
record-level operations (upsert, delete, ...) are shared.

Every property written through a repository is materialized first, so records
read back always carry a breakdown.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from property_calculator.calculator import materialize
from property_calculator.data.options import STORAGE_KEY
from property_calculator.exceptions import PropertyNotFoundError, StorageError
from property_calculator.models import Property

_PORTFOLIO = TypeAdapter(list[Property])


def dump_portfolio(properties: Iterable[Property]) -> bytes:
    """Serialize properties to the stored JSON array (camelCase field names)."""
    return _PORTFOLIO.dump_json(list(properties), by_alias=True, indent=2)


def parse_portfolio(raw: bytes | str) -> list[Property]:
    """Parse a stored JSON array. Raises pydantic.ValidationError on bad data."""
    return _PORTFOLIO.validate_json(raw)


@runtime_checkable
class PropertyRepository(Protocol):
    """Contract the front-ends rely on for storing the portfolio."""

    def load_all(self) -> list[Property]:
        """Return every stored property; empty when nothing usable is stored."""
        ...

    def save_all(self, properties: Iterable[Property]) -> None:
        """Replace the stored portfolio."""
        ...

    def upsert(self, prop: Property) -> None:
        """Replace the property with the same id, or append it."""
        ...

    def delete_by_id(self, property_id: str) -> None:
        """Remove the property with this id (no-op if absent)."""
        ...

    def clear_all(self) -> None:
        """Remove the stored portfolio entirely."""
        ...

    def get(self, property_id: str) -> Property:
        """Return the stored property with this id."""
        ...


class BlobRepository(ABC):
    """Record operations over a single stored blob."""

    key: str = STORAGE_KEY

    @abstractmethod
    def _read(self) -> bytes | None:
        """Return the stored blob, or None when nothing is stored."""

    @abstractmethod
    def _write(self, data: bytes) -> None:
        ...

    @abstractmethod
    def _remove(self) -> None:
        ...

    def load_all(self) -> list[Property]:
        try:
            raw = self._read()
            if raw is None:
                return []
            properties = parse_portfolio(raw)
        except (OSError, ValidationError) as exc:
            logger.warning(f"Failed to load properties from {self.key!r}: {exc}")
            return []
        logger.debug(f"Loaded {len(properties)} properties from {self.key!r}")
        return [materialize(p) for p in properties]

    def save_all(self, properties: Iterable[Property]) -> None:
        materialized = [materialize(p) for p in properties]
        self._write(dump_portfolio(materialized))
        logger.debug(f"Saved {len(materialized)} properties to {self.key!r}")

    def upsert(self, prop: Property) -> None:
        properties = self.load_all()
        for i, existing in enumerate(properties):
            if existing.id == prop.id:
                properties[i] = prop
                break
        else:
            properties.append(prop)
        self.save_all(properties)

    def delete_by_id(self, property_id: str) -> None:
        properties = self.load_all()
        remaining = [p for p in properties if p.id != property_id]
        if len(remaining) == len(properties):
            logger.debug(f"No property with id {property_id!r} to delete")
        self.save_all(remaining)

    def clear_all(self) -> None:
        self._remove()
        logger.debug(f"Cleared {self.key!r}")

    def get(self, property_id: str) -> Property:
        for prop in self.load_all():
            if prop.id == property_id:
                return prop
        raise PropertyNotFoundError(f"No property with id {property_id!r}")


class JsonFileRepository(BlobRepository):
    """Stores the portfolio at <data_dir>/<key>.json."""

    def __init__(self, data_dir: str | Path, key: str = STORAGE_KEY) -> None:
        self.key = key
        self.data_dir = Path(data_dir).expanduser()
        self.path = self.data_dir / f"{key}.json"

    def _read(self) -> bytes | None:
        if not self.path.exists():
            return None
        return self.path.read_bytes()

    def _write(self, data: bytes) -> None:
        tmp_path = self.path.with_suffix(".json.tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            tmp_path.replace(self.path)
        except OSError as exc:
            raise StorageError(f"Cannot write {self.path}: {exc}") from exc

    def _remove(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot remove {self.path}: {exc}") from exc


class InMemoryRepository(BlobRepository):
    """Keeps the serialized blob in a dict keyed by the namespace key."""

    def __init__(self, key: str = STORAGE_KEY) -> None:
        self.key = key
        self.store: dict[str, bytes] = {}

    def _read(self) -> bytes | None:
        return self.store.get(self.key)

    def _write(self, data: bytes) -> None:
        self.store[self.key] = data

    def _remove(self) -> None:
        self.store.pop(self.key, None)
