"""Apply object interactions to a game state."""

from __future__ import annotations

from dataclasses import replace
import logging

from daybreak.catalog.rooms import Catalog, load_catalog
from daybreak.domain.rules import ActivationError, ensure_object_in_room
from daybreak.interaction.effects import apply_effect
from daybreak.interaction.events import ActivationEvent
from daybreak.interaction.results import ActionOutcome, ActionResult, CommandType
from daybreak.session.state import GameState

logger = logging.getLogger(__name__)


def activate(
    state: GameState,
    object_id: str,
    catalog: Catalog | None = None,
) -> ActionResult:
    """Use an object in the current room.

    A successful result carries the activation event; delivering it is left
    to the caller once the new state is in place.
    """
    catalog = catalog or load_catalog()
    try:
        obj = ensure_object_in_room(
            object_id,
            catalog.find_object(object_id),
            catalog.room_of(object_id),
            state.current_room,
        )
    except ActivationError as exc:
        logger.warning("Rejected activation of %s: %s", object_id, exc)
        return ActionResult(
            action=CommandType.ACTIVATE,
            outcome=ActionOutcome.REJECTED,
            summary=str(exc),
            state=state,
            error=exc.code,
        )
    if object_id in state.completed_actions:
        return ActionResult(
            action=CommandType.ACTIVATE,
            outcome=ActionOutcome.NO_EFFECT,
            summary=f"You already used the {obj.name} today.",
            state=state,
        )
    updated = replace(
        state,
        completed_actions=state.completed_actions | {object_id},
        character=apply_effect(state.character, obj.action),
    )
    logger.debug(
        "Activated %s (%s): %s -> %s",
        object_id,
        obj.action.value,
        state.character.present(),
        updated.character.present(),
    )
    return ActionResult(
        action=CommandType.ACTIVATE,
        outcome=ActionOutcome.SUCCESS,
        summary=f"You {obj.action.value} at the {obj.name}.",
        state=updated,
        event=ActivationEvent(
            object_id=obj.id,
            object_name=obj.name,
            action=obj.action,
            room=state.current_room,
            day=state.day,
            time_of_day=state.time_of_day,
        ),
    )
