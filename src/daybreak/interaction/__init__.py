"""Object interactions and their effects on the character."""

from daybreak.interaction.engine import activate
from daybreak.interaction.events import ActivationEvent, EventBus
from daybreak.interaction.results import ActionOutcome, ActionResult, CommandType

__all__ = [
    "activate",
    "ActionOutcome",
    "ActionResult",
    "ActivationEvent",
    "CommandType",
    "EventBus",
]
