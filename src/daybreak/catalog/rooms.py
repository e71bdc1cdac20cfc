"""Load the room catalog and answer object lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import ValidationError
import yaml

from daybreak import config
from daybreak.domain.enums import Room
from daybreak.domain.models import RoomObject
from daybreak.domain.rules import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    rooms: Mapping[Room, tuple[RoomObject, ...]]
    _index: Mapping[str, tuple[Room, RoomObject]] = field(repr=False, compare=False)

    def objects_in(self, room: Room) -> tuple[RoomObject, ...]:
        return self.rooms[Room(room)]

    def find_object(self, object_id: str) -> RoomObject | None:
        entry = self._index.get(object_id)
        return entry[1] if entry else None

    def room_of(self, object_id: str) -> Room | None:
        entry = self._index.get(object_id)
        return entry[0] if entry else None

    def total_objects(self) -> int:
        return len(self._index)


_CATALOG_CACHE: Catalog | None = None


def _parse_room(key: Any) -> Room:
    try:
        return Room(str(key))
    except ValueError as exc:
        raise CatalogError(f"Unknown room in catalog: {key}") from exc


def _parse_object(room: Room, entry: Any) -> RoomObject:
    if not isinstance(entry, dict):
        raise CatalogError(f"Catalog entry in {room.value} must be a mapping, got {entry!r}")
    try:
        return RoomObject(**entry)
    except ValidationError as exc:
        raise CatalogError(f"Invalid object in {room.value}: {exc}") from exc


def build_catalog(data: Mapping[str, Any]) -> Catalog:
    """Validate raw catalog data and freeze it."""
    raw_rooms = data.get("rooms") or {}
    if not isinstance(raw_rooms, dict):
        raise CatalogError("Catalog 'rooms' must be a mapping of room -> objects.")
    rooms: dict[Room, tuple[RoomObject, ...]] = {}
    index: dict[str, tuple[Room, RoomObject]] = {}
    for key, entries in raw_rooms.items():
        room = _parse_room(key)
        objects = tuple(_parse_object(room, entry) for entry in entries or [])
        if not objects:
            raise CatalogError(f"Room {room.value} has no objects.")
        for obj in objects:
            if obj.id in index:
                other_room = index[obj.id][0]
                raise CatalogError(
                    f"Object id {obj.id} appears in both {other_room.value} and {room.value}."
                )
            index[obj.id] = (room, obj)
        rooms[room] = objects
    missing = [room.value for room in Room if room not in rooms]
    if missing:
        raise CatalogError(f"Catalog is missing rooms: {', '.join(missing)}")
    ordered = {room: rooms[room] for room in Room}
    return Catalog(rooms=MappingProxyType(ordered), _index=MappingProxyType(index))


def load_catalog(path: Path | None = None) -> Catalog:
    """Load the default catalog once and cache it; explicit paths are not cached."""
    global _CATALOG_CACHE
    if path is None and _CATALOG_CACHE is not None:
        return _CATALOG_CACHE
    catalog_path = path or config.CATALOG_PATH
    data = yaml.safe_load(Path(catalog_path).read_text(encoding="utf-8")) or {}
    catalog = build_catalog(data)
    logger.debug(
        "Loaded catalog from %s: %d rooms, %d objects",
        catalog_path,
        len(catalog.rooms),
        catalog.total_objects(),
    )
    if path is None:
        _CATALOG_CACHE = catalog
    return catalog


def objects_in(room: Room) -> tuple[RoomObject, ...]:
    return load_catalog().objects_in(room)


def find_object(object_id: str) -> RoomObject | None:
    return load_catalog().find_object(object_id)
