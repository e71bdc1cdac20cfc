"""Pure state transitions for every session command."""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Iterable

from daybreak.catalog.rooms import Catalog, load_catalog
from daybreak.cycle.clock import advance_time
from daybreak.domain.enums import Room
from daybreak.interaction.engine import activate
from daybreak.interaction.results import ActionOutcome, ActionResult, CommandType
from daybreak.session.intents import Activate, AdvanceTime, EnterRoom, Intent, Reset, TogglePlay
from daybreak.session.state import GameState, initial_state

logger = logging.getLogger(__name__)


def enter_room(state: GameState, room: Room) -> GameState:
    return replace(state, current_room=Room(room))


def toggle_play(state: GameState) -> GameState:
    return replace(state, is_playing=not state.is_playing)


def reset(state: GameState) -> GameState:
    return initial_state()


def _result(
    action: CommandType,
    state: GameState,
    summary: str,
    outcome: ActionOutcome = ActionOutcome.SUCCESS,
) -> ActionResult:
    return ActionResult(action=action, outcome=outcome, summary=summary, state=state)


def reduce(
    state: GameState,
    intent: Intent,
    catalog: Catalog | None = None,
) -> ActionResult:
    if isinstance(intent, EnterRoom):
        room = Room(intent.room)
        if room == state.current_room:
            return _result(
                CommandType.ENTER_ROOM,
                state,
                f"You are already in the {room.value}.",
                ActionOutcome.NO_EFFECT,
            )
        return _result(CommandType.ENTER_ROOM, enter_room(state, room), f"You walk into the {room.value}.")
    if isinstance(intent, Activate):
        return activate(state, intent.object_id, catalog=catalog or load_catalog())
    if isinstance(intent, TogglePlay):
        updated = toggle_play(state)
        summary = "Playing." if updated.is_playing else "Paused."
        return _result(CommandType.TOGGLE_PLAY, updated, summary)
    if isinstance(intent, Reset):
        return _result(CommandType.RESET, reset(state), "The routine starts over.")
    if isinstance(intent, AdvanceTime):
        if not state.is_playing:
            return _result(
                CommandType.ADVANCE_TIME,
                state,
                "The clock is paused.",
                ActionOutcome.NO_EFFECT,
            )
        updated = advance_time(state)
        summary = f"It is now {updated.time_of_day.value}."
        if updated.day != state.day:
            summary = f"Day {updated.day} begins."
        return _result(CommandType.ADVANCE_TIME, updated, summary)
    raise TypeError(f"Unknown intent: {intent!r}")


def replay(
    intents: Iterable[Intent],
    state: GameState | None = None,
    catalog: Catalog | None = None,
) -> list[GameState]:
    """Fold intents over a snapshot, returning every state along the way."""
    current = state or initial_state()
    snapshots = [current]
    for intent in intents:
        current = reduce(current, intent, catalog=catalog).state
        snapshots.append(current)
    logger.debug("Replayed %d intents", len(snapshots) - 1)
    return snapshots
