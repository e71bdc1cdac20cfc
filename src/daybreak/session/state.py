"""Game state snapshots and their derived values."""

from __future__ import annotations

from dataclasses import dataclass, field

from daybreak import config
from daybreak.catalog.rooms import Catalog
from daybreak.character.vitals import CharacterVitals
from daybreak.domain.enums import Mood, Room, TimeOfDay


@dataclass(frozen=True)
class GameState:
    day: int = config.INITIAL_DAY
    is_playing: bool = False
    current_room: Room = Room.BEDROOM
    completed_actions: frozenset[str] = field(default_factory=frozenset)
    character: CharacterVitals = field(default_factory=CharacterVitals)
    time_of_day: TimeOfDay = TimeOfDay.MORNING

    @property
    def mood(self) -> Mood:
        return self.character.mood

    @property
    def score(self) -> int:
        return score(self)

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "is_playing": self.is_playing,
            "current_room": self.current_room.value,
            "completed_actions": sorted(self.completed_actions),
            "character": self.character.to_dict(),
            "time_of_day": self.time_of_day.value,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "GameState":
        is_playing = payload.get("is_playing")
        return cls(
            day=max(1, int(payload.get("day") or config.INITIAL_DAY)),
            is_playing=is_playing if isinstance(is_playing, bool) else False,
            current_room=Room(payload.get("current_room") or Room.BEDROOM.value),
            completed_actions=frozenset(payload.get("completed_actions") or []),
            character=CharacterVitals.from_dict(payload.get("character") or {}),
            time_of_day=TimeOfDay(payload.get("time_of_day") or TimeOfDay.MORNING.value),
        )


def initial_state() -> GameState:
    return GameState(
        day=config.INITIAL_DAY,
        is_playing=False,
        current_room=Room.BEDROOM,
        completed_actions=frozenset(),
        character=CharacterVitals(
            energy=config.INITIAL_ENERGY,
            hygiene=config.INITIAL_HYGIENE,
            hunger=config.INITIAL_HUNGER,
        ),
        time_of_day=TimeOfDay.MORNING,
    )


def score(state: GameState) -> int:
    return len(state.completed_actions) * config.SCORE_PER_ACTION


def progress(state: GameState, catalog: Catalog) -> tuple[int, int]:
    """Completed objects today against everything the catalog offers."""
    return len(state.completed_actions), catalog.total_objects()
