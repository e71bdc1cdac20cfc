"""Player and scheduler intents understood by the reducer."""

from __future__ import annotations

from dataclasses import dataclass

from daybreak.domain.enums import Room


@dataclass(frozen=True)
class EnterRoom:
    room: Room


@dataclass(frozen=True)
class Activate:
    object_id: str


@dataclass(frozen=True)
class TogglePlay:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class AdvanceTime:
    pass


Intent = EnterRoom | Activate | TogglePlay | Reset | AdvanceTime
