from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from daybreak import config
from daybreak.cycle.clock import TickSchedule
from daybreak.interaction.events import ActivationEvent
from daybreak.interaction.results import ActionOutcome, ActionResult
from daybreak.session.controller import GameSession
from daybreak.ui.commands import HELP_LINES, handle_command, object_lines, status_lines


def _print_result(result: ActionResult) -> None:
    if result.outcome == ActionOutcome.REJECTED:
        print(f"[{result.action}] Not possible: {result.summary}")
        return
    print(f"[{result.action}] {result.summary}")


def _cue(event: ActivationEvent) -> None:
    print(f"\a* {event.object_name} done")


def _print_status(session: GameSession) -> None:
    print("")
    for line in status_lines(session):
        print(line)
    for line in object_lines(session):
        print(line)


def main() -> None:
    parser = argparse.ArgumentParser(description="Daybreak terminal loop.")
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
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    session = GameSession(schedule=TickSchedule(speed=args.speed, base_seconds=args.tick_seconds))
    session.bus.subscribe(_cue)
    for line in HELP_LINES:
        print(line)

    last = time.monotonic()
    while True:
        _print_status(session)
        try:
            value = input("> ").strip()
        except EOFError:
            break
        now = time.monotonic()
        for result in session.tick(now - last):
            _print_result(result)
        last = now
        if not value:
            continue
        if value.lower() == "q":
            break
        reply = handle_command(session, value)
        for result in reply.results:
            _print_result(result)
        for message in reply.messages:
            print(message)
    print(f"Final score: {session.score}")


if __name__ == "__main__":
    main()
