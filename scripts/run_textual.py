from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from daybreak import config
from daybreak.catalog.rooms import load_catalog
from daybreak.cycle.clock import TickSchedule
from daybreak.ui.app import RoutineApp


def main() -> None:
    parser = argparse.ArgumentParser(description="Daybreak Textual front-end.")
    parser.add_argument(
        "--speed",
        type=int,
        choices=list(config.SPEED_MULTIPLIERS),
        default=config.DEFAULT_SPEED,
        help="Clock speed multiplier.",
    )
    parser.add_argument(
        "--tick-seconds",
        type=float,
        default=config.TICK_SECONDS,
        help="Real seconds per part of the day at 1x speed.",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Path to an alternative room catalog YAML file.",
    )
    parser.add_argument(
        "--no-cues",
        action="store_true",
        help="Disable the terminal bell on completed actions.",
    )
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        filename=str(ROOT / "daybreak.log"),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    catalog = load_catalog(Path(args.catalog)) if args.catalog else load_catalog()
    app = RoutineApp(
        catalog=catalog,
        schedule=TickSchedule(speed=args.speed, base_seconds=args.tick_seconds),
        cues=not args.no_cues,
    )
    app.run()


if __name__ == "__main__":
    main()
