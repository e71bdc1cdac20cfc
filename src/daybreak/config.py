"""Tunable constants for the routine simulation."""

from __future__ import annotations

import os
from pathlib import Path

INITIAL_DAY = 1
INITIAL_ENERGY = 80
INITIAL_HYGIENE = 70
INITIAL_HUNGER = 60

VITAL_MIN = 0
VITAL_MAX = 100

SCORE_PER_ACTION = 10

SPEED_MULTIPLIERS = (1, 2, 4)
DEFAULT_SPEED = 1
TICK_SECONDS = 30.0

HISTORY_LIMIT = 50

CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.yml"

LOG_LEVEL = os.environ.get("DAYBREAK_LOG_LEVEL", "WARNING").upper()
