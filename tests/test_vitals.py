from daybreak.character.vitals import CharacterVitals, clamp, derive_mood
from daybreak.domain.enums import Mood


def test_clamp_bounds():
    assert clamp(-5) == 0
    assert clamp(150) == 100
    assert clamp(42) == 42


def test_construction_clamps_values():
    vitals = CharacterVitals(energy=120, hygiene=-10, hunger=50, social=300)
    assert vitals.energy == 100
    assert vitals.hygiene == 0
    assert vitals.social == 100
    assert vitals.production is None


def test_adjust_clamps_and_skips_untracked():
    vitals = CharacterVitals(energy=95, hygiene=70, hunger=3)
    updated = vitals.adjust(energy=10, hunger=-5, social=20)
    assert updated.energy == 100
    assert updated.hunger == 0
    assert updated.social is None
    assert vitals.energy == 95


def test_mood_priorities():
    assert derive_mood(CharacterVitals(energy=10, hygiene=10, hunger=10)) == Mood.EXHAUSTED
    assert derive_mood(CharacterVitals(energy=90, hygiene=10, hunger=10)) == Mood.HUNGRY
    assert derive_mood(CharacterVitals(energy=90, hygiene=10, hunger=90)) == Mood.GRUBBY
    assert derive_mood(CharacterVitals(energy=90, hygiene=90, hunger=90)) == Mood.HAPPY
    assert derive_mood(CharacterVitals(energy=80, hygiene=70, hunger=60)) == Mood.CONTENT
    assert derive_mood(CharacterVitals(energy=30, hygiene=30, hunger=30)) == Mood.TIRED


def test_mood_counts_optional_vitals():
    base = CharacterVitals(energy=85, hygiene=85, hunger=85)
    assert base.mood == Mood.HAPPY
    assert base.with_values(social=20, production=20).mood == Mood.CONTENT


def test_mood_rederived_from_snapshot():
    vitals = CharacterVitals(energy=15, hygiene=70, hunger=60)
    restored = CharacterVitals.from_dict(vitals.to_dict())
    assert restored == vitals
    assert restored.mood == vitals.mood == Mood.EXHAUSTED
