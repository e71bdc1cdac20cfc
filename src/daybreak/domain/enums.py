"""Shared enums for the simulation core and front-ends."""

from __future__ import annotations

from enum import StrEnum


class Room(StrEnum):
    BEDROOM = "bedroom"
    LIVING = "living"
    KITCHEN = "kitchen"
    GYM = "gym"
    BATHROOM = "bathroom"


class ActionTag(StrEnum):
    SLEEP = "sleep"
    RELAX = "relax"
    DRESS = "dress"
    WATCH = "watch"
    READ = "read"
    EAT = "eat"
    SNACK = "snack"
    COOK = "cook"
    WORKOUT = "workout"
    CARDIO = "cardio"
    STRETCH = "stretch"
    SHOWER = "shower"
    BRUSH = "brush"
    SKINCARE = "skincare"


class TimeOfDay(StrEnum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


class Mood(StrEnum):
    EXHAUSTED = "exhausted"
    HUNGRY = "hungry"
    GRUBBY = "grubby"
    HAPPY = "happy"
    CONTENT = "content"
    TIRED = "tired"
