"""Rejection types and checks for player commands."""

from __future__ import annotations

from daybreak.domain.enums import Room
from daybreak.domain.models import RoomObject


class ActivationError(ValueError):
    code = "activation_error"

    def __init__(self, object_id: str, message: str) -> None:
        super().__init__(message)
        self.object_id = object_id


class InvalidObject(ActivationError):
    code = "invalid_object"

    def __init__(self, object_id: str) -> None:
        super().__init__(object_id, f"Unknown object id: {object_id}")


class ObjectNotInCurrentRoom(ActivationError):
    code = "object_not_in_current_room"

    def __init__(self, object_id: str, object_room: Room, current_room: Room) -> None:
        super().__init__(
            object_id,
            f"{object_id} is in the {object_room.value}, not the {current_room.value}.",
        )
        self.object_room = object_room
        self.current_room = current_room


class CatalogError(ValueError):
    """Raised when catalog data breaks a load-time invariant."""


def ensure_object_in_room(
    object_id: str,
    found: RoomObject | None,
    object_room: Room | None,
    current_room: Room,
) -> RoomObject:
    if found is None or object_room is None:
        raise InvalidObject(object_id)
    if object_room != current_room:
        raise ObjectNotInCurrentRoom(object_id, object_room, current_room)
    return found
