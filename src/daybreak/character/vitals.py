"""Character vitals and the mood derived from them."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from daybreak import config
from daybreak.domain.enums import Mood

EXHAUSTED_BELOW = 20
HUNGRY_BELOW = 25
GRUBBY_BELOW = 25
HAPPY_AT = 80
CONTENT_AT = 50


def clamp(value: float, low: int = config.VITAL_MIN, high: int = config.VITAL_MAX) -> int:
    return int(max(low, min(high, value)))


@dataclass(frozen=True)
class CharacterVitals:
    energy: int = config.INITIAL_ENERGY
    hygiene: int = config.INITIAL_HYGIENE
    hunger: int = config.INITIAL_HUNGER
    social: int | None = None
    production: int | None = None

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            object.__setattr__(self, item.name, clamp(value))

    @property
    def mood(self) -> Mood:
        return derive_mood(self)

    def present(self) -> dict[str, int]:
        """Vitals that are tracked for this character, by name."""
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }

    def with_values(self, **values: int) -> "CharacterVitals":
        return replace(self, **values)

    def adjust(self, **deltas: int) -> "CharacterVitals":
        updated: dict[str, int] = {}
        for name, delta in deltas.items():
            current = getattr(self, name)
            if current is None:
                continue
            updated[name] = current + delta
        return replace(self, **updated)

    def to_dict(self) -> dict:
        return {
            "energy": self.energy,
            "hygiene": self.hygiene,
            "hunger": self.hunger,
            "social": self.social,
            "production": self.production,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "CharacterVitals":
        social = payload.get("social")
        production = payload.get("production")
        return cls(
            energy=_int_or(payload.get("energy"), config.INITIAL_ENERGY),
            hygiene=_int_or(payload.get("hygiene"), config.INITIAL_HYGIENE),
            hunger=_int_or(payload.get("hunger"), config.INITIAL_HUNGER),
            social=int(social) if social is not None else None,
            production=int(production) if production is not None else None,
        )


def _int_or(value: object, default: int) -> int:
    # 0 is a real reading, so only a missing value falls back.
    return default if value is None else int(value)


def derive_mood(vitals: CharacterVitals) -> Mood:
    """Classify a vitals snapshot; urgent needs win over the overall average."""
    if vitals.energy < EXHAUSTED_BELOW:
        return Mood.EXHAUSTED
    if vitals.hunger < HUNGRY_BELOW:
        return Mood.HUNGRY
    if vitals.hygiene < GRUBBY_BELOW:
        return Mood.GRUBBY
    values = list(vitals.present().values())
    average = sum(values) / len(values)
    if average >= HAPPY_AT:
        return Mood.HAPPY
    if average >= CONTENT_AT:
        return Mood.CONTENT
    return Mood.TIRED
