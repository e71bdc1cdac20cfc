"""Text command parsing shared by the terminal front-ends."""

from __future__ import annotations

from dataclasses import dataclass, field

from daybreak.domain.enums import Room
from daybreak.interaction.results import ActionResult
from daybreak.session.controller import GameSession

HELP_LINES = [
    "1-9) Use an object in this room",
    "go <room>) Walk to bedroom, living, kitchen, gym or bathroom",
    "p) Play / pause",
    "t) Advance time",
    "s) Change clock speed",
    "u) Undo",
    "r) Reset",
    "q) Quit",
]


@dataclass
class CommandReply:
    results: list[ActionResult] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)


def _parse_choice(value: str, count: int) -> int | None:
    if not value.isdigit():
        return None
    index = int(value) - 1
    if index < 0 or index >= count:
        return None
    return index


def _parse_room(value: str) -> Room | None:
    key = value.strip().lower()
    if key.startswith("go "):
        key = key[3:].strip()
    if key == "living room":
        key = Room.LIVING.value
    try:
        return Room(key)
    except ValueError:
        return None


def handle_command(session: GameSession, value: str) -> CommandReply:
    reply = CommandReply()
    command = value.strip().lower()
    if command.isdigit():
        objects = session.room_objects()
        index = _parse_choice(command, len(objects))
        if index is None:
            reply.messages.append(f"Choose an object between 1 and {len(objects)}.")
            return reply
        reply.results.append(session.activate(objects[index].id))
        return reply
    if command == "p":
        reply.results.append(session.toggle_play())
    elif command == "t":
        reply.results.append(session.advance_time())
    elif command == "r":
        reply.results.append(session.reset())
    elif command == "s":
        schedule = session.cycle_speed()
        reply.messages.append(f"Clock speed {schedule.speed}x.")
    elif command == "u":
        if session.undo() is None:
            reply.messages.append("Nothing to undo.")
        else:
            reply.messages.append("Undone.")
    else:
        room = _parse_room(command)
        if room is None:
            reply.messages.append(f"Unknown command: {value.strip()}")
            reply.messages.extend(HELP_LINES)
            return reply
        reply.results.append(session.enter_room(room))
    return reply


def status_lines(session: GameSession) -> list[str]:
    state = session.state
    completed, total = session.progress
    vitals = session.vitals.present()
    return [
        (
            f"Day {state.day}  {state.time_of_day.value.title()}  "
            f"{'Playing' if state.is_playing else 'Paused'} ({session.schedule.speed}x)"
        ),
        f"Room: {state.current_room.value.title()}  Score {session.score}  Done {completed}/{total}",
        "  ".join(f"{name.title()} {value}" for name, value in vitals.items()),
        f"Mood: {session.mood.value}",
    ]


def object_lines(session: GameSession) -> list[str]:
    lines: list[str] = []
    for idx, obj in enumerate(session.room_objects(), start=1):
        done = " (done)" if obj.id in session.completed_actions else ""
        lines.append(f"{idx}) {obj.marker} {obj.name}: {obj.action.value}{done}")
    return lines
