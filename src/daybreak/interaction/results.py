"""Result structures for player commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from daybreak.interaction.events import ActivationEvent
    from daybreak.session.state import GameState


class CommandType(StrEnum):
    ENTER_ROOM = "enter_room"
    ACTIVATE = "activate"
    TOGGLE_PLAY = "toggle_play"
    RESET = "reset"
    ADVANCE_TIME = "advance_time"


class ActionOutcome(StrEnum):
    SUCCESS = "success"
    NO_EFFECT = "no_effect"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ActionResult:
    action: CommandType
    outcome: ActionOutcome
    summary: str
    state: "GameState"
    error: str | None = None
    event: "ActivationEvent | None" = None

    @property
    def changed(self) -> bool:
        return self.outcome == ActionOutcome.SUCCESS
