"""Vitals effects for each object action."""

from __future__ import annotations

from dataclasses import dataclass

from daybreak.character.vitals import CharacterVitals
from daybreak.domain.enums import ActionTag


@dataclass(frozen=True)
class ActionEffect:
    energy: int = 10
    hunger: int = -5
    set_hygiene: int | None = None
    set_hunger: int | None = None


_DEFAULT_EFFECT = ActionEffect()

EFFECTS = {
    ActionTag.SLEEP: _DEFAULT_EFFECT,
    ActionTag.RELAX: _DEFAULT_EFFECT,
    ActionTag.DRESS: _DEFAULT_EFFECT,
    ActionTag.WATCH: _DEFAULT_EFFECT,
    ActionTag.READ: _DEFAULT_EFFECT,
    ActionTag.EAT: ActionEffect(hunger=0, set_hunger=100),
    ActionTag.SNACK: _DEFAULT_EFFECT,
    ActionTag.COOK: _DEFAULT_EFFECT,
    ActionTag.WORKOUT: _DEFAULT_EFFECT,
    ActionTag.CARDIO: _DEFAULT_EFFECT,
    ActionTag.STRETCH: _DEFAULT_EFFECT,
    ActionTag.SHOWER: ActionEffect(hunger=0, set_hygiene=100),
    ActionTag.BRUSH: _DEFAULT_EFFECT,
    ActionTag.SKINCARE: _DEFAULT_EFFECT,
}


def effect_for(action: ActionTag) -> ActionEffect:
    return EFFECTS.get(ActionTag(action), _DEFAULT_EFFECT)


def apply_effect(vitals: CharacterVitals, action: ActionTag) -> CharacterVitals:
    effect = effect_for(action)
    updated = vitals.adjust(energy=effect.energy, hunger=effect.hunger)
    if effect.set_hygiene is not None:
        updated = updated.with_values(hygiene=effect.set_hygiene)
    if effect.set_hunger is not None:
        updated = updated.with_values(hunger=effect.set_hunger)
    return updated
