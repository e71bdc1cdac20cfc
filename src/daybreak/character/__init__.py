"""Character needs for the routine simulation."""

from daybreak.character.vitals import CharacterVitals, clamp, derive_mood

__all__ = [
    "CharacterVitals",
    "clamp",
    "derive_mood",
]
