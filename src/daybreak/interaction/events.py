"""Activation events for audio and haptic collaborators."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

from daybreak.domain.enums import ActionTag, Room, TimeOfDay

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivationEvent:
    object_id: str
    object_name: str
    action: ActionTag
    room: Room
    day: int
    time_of_day: TimeOfDay


Listener = Callable[[ActivationEvent], None]


class EventBus:
    """Fan activation events out to listeners without feeding anything back."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: ActivationEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Activation listener %r failed for %s", listener, event.object_id)

    def __len__(self) -> int:
        return len(self._listeners)
