"""Session controller: the single writer of the game state."""

from __future__ import annotations

import logging

from daybreak import config
from daybreak.catalog.rooms import Catalog, load_catalog
from daybreak.character.vitals import CharacterVitals
from daybreak.cycle.clock import TickSchedule, Ticker
from daybreak.domain.enums import Mood, Room, TimeOfDay
from daybreak.domain.models import RoomObject
from daybreak.interaction.events import EventBus
from daybreak.interaction.results import ActionOutcome, ActionResult
from daybreak.session.intents import Activate, AdvanceTime, EnterRoom, Intent, Reset, TogglePlay
from daybreak.session.reducer import reduce
from daybreak.session.state import GameState, initial_state, progress

logger = logging.getLogger(__name__)


class GameSession:
    """Holds the current snapshot and routes every command through the reducer.

    Successful commands push the previous snapshot onto a bounded undo
    history. Rejected and no-op commands leave both state and history alone.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        bus: EventBus | None = None,
        state: GameState | None = None,
        schedule: TickSchedule | None = None,
        history_limit: int = config.HISTORY_LIMIT,
    ) -> None:
        self.catalog = catalog or load_catalog()
        self.bus = bus if bus is not None else EventBus()
        self._state = state or initial_state()
        self.ticker = Ticker(schedule or TickSchedule())
        self.history_limit = history_limit
        self._history: list[GameState] = []
        logger.info("Session started on day %d", self._state.day)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def schedule(self) -> TickSchedule:
        return self.ticker.schedule

    @property
    def history(self) -> tuple[GameState, ...]:
        return tuple(self._history)

    @property
    def vitals(self) -> CharacterVitals:
        return self._state.character

    @property
    def mood(self) -> Mood:
        return self._state.mood

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def progress(self) -> tuple[int, int]:
        return progress(self._state, self.catalog)

    @property
    def day(self) -> int:
        return self._state.day

    @property
    def time_of_day(self) -> TimeOfDay:
        return self._state.time_of_day

    @property
    def current_room(self) -> Room:
        return self._state.current_room

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing

    @property
    def completed_actions(self) -> frozenset[str]:
        return self._state.completed_actions

    def room_objects(self) -> tuple[RoomObject, ...]:
        return self.catalog.objects_in(self._state.current_room)

    def dispatch(self, intent: Intent) -> ActionResult:
        result = reduce(self._state, intent, catalog=self.catalog)
        if result.outcome == ActionOutcome.SUCCESS:
            self._push(self._state)
            self._state = result.state
            if result.event is not None:
                self.bus.emit(result.event)
        return result

    def enter_room(self, room: Room | str) -> ActionResult:
        return self.dispatch(EnterRoom(Room(room)))

    def activate(self, object_id: str) -> ActionResult:
        return self.dispatch(Activate(object_id))

    def toggle_play(self) -> ActionResult:
        result = self.dispatch(TogglePlay())
        if not self._state.is_playing:
            self.ticker.clear()
        return result

    def advance_time(self) -> ActionResult:
        return self.dispatch(AdvanceTime())

    def reset(self) -> ActionResult:
        result = self.dispatch(Reset())
        self._history.clear()
        self.ticker.clear()
        logger.info("Session reset")
        return result

    def tick(self, elapsed_seconds: float) -> list[ActionResult]:
        """Feed wall time to the clock; nothing accrues while paused."""
        if not self._state.is_playing:
            return []
        steps = self.ticker.due(elapsed_seconds)
        return [self.advance_time() for _ in range(steps)]

    def set_speed(self, speed: int) -> TickSchedule:
        self.ticker.schedule = self.ticker.schedule.with_speed(speed)
        logger.info("Clock speed set to %dx", speed)
        return self.ticker.schedule

    def cycle_speed(self) -> TickSchedule:
        return self.set_speed(self.ticker.schedule.next_speed().speed)

    def undo(self) -> GameState | None:
        if not self._history:
            return None
        self._state = self._history.pop()
        return self._state

    def _push(self, state: GameState) -> None:
        self._history.append(state)
        if len(self._history) > self.history_limit:
            del self._history[0]
