import pytest

from daybreak.domain.enums import Mood, Room, TimeOfDay
from daybreak.interaction.events import EventBus
from daybreak.interaction.results import ActionOutcome, CommandType
from daybreak.session.controller import GameSession
from daybreak.session.intents import Activate, AdvanceTime, EnterRoom, TogglePlay
from daybreak.session.reducer import replay, reset, toggle_play
from daybreak.session.state import initial_state, score


def test_initial_values(session):
    state = session.state
    assert state.day == 1
    assert state.is_playing is False
    assert state.current_room == Room.BEDROOM
    assert state.completed_actions == frozenset()
    assert (session.vitals.energy, session.vitals.hygiene, session.vitals.hunger) == (80, 70, 60)
    assert session.time_of_day == TimeOfDay.MORNING
    assert session.mood == Mood.CONTENT
    assert session.score == 0
    assert session.progress == (0, 15)


def test_enter_room_changes_only_room(session):
    before = session.state
    result = session.enter_room("kitchen")
    assert result.outcome == ActionOutcome.SUCCESS
    assert session.current_room == Room.KITCHEN
    assert session.state.character == before.character
    assert session.state.day == before.day


def test_enter_unknown_room_raises(session):
    with pytest.raises(ValueError):
        session.enter_room("attic")


def test_three_actions_score_thirty(session):
    for object_id in ("bed", "wardrobe", "desk"):
        session.activate(object_id)
    assert session.score == 30
    assert score(session.state) == 30
    assert session.progress == (3, 15)


def test_repeat_activation_is_idempotent(session):
    session.activate("bed")
    once = session.state
    result = session.activate("bed")
    assert result.outcome == ActionOutcome.NO_EFFECT
    assert session.state == once
    assert len(session.history) == 1


def test_rejected_activation_leaves_state(session):
    session.enter_room(Room.GYM)
    before = session.state
    history = session.history
    result = session.activate("bed")
    assert result.outcome == ActionOutcome.REJECTED
    assert session.state == before
    assert session.history == history


def test_reset_restores_initial_state(session):
    session.toggle_play()
    session.enter_room(Room.BATHROOM)
    session.activate("shower")
    session.advance_time()
    result = session.reset()
    assert result.action == CommandType.RESET
    assert session.state == initial_state()
    assert session.history == ()
    assert reset(session.state) == initial_state()


def test_paused_clock_does_not_advance(session):
    result = session.advance_time()
    assert result.outcome == ActionOutcome.NO_EFFECT
    assert session.tick(session.schedule.interval * 10) == []
    assert session.time_of_day == TimeOfDay.MORNING
    assert session.ticker.elapsed == 0.0


def test_tick_advances_when_playing(catalog):
    session = GameSession(catalog=catalog)
    session.toggle_play()
    interval = session.schedule.interval
    results = session.tick(interval * 4)
    assert [r.action for r in results] == [CommandType.ADVANCE_TIME] * 4
    assert session.day == 2
    assert session.time_of_day == TimeOfDay.MORNING


def test_speed_only_changes_frequency(catalog):
    slow = GameSession(catalog=catalog)
    fast = GameSession(catalog=catalog)
    fast.set_speed(4)
    for item in (slow, fast):
        item.toggle_play()
    seconds = slow.schedule.base_seconds
    assert len(slow.tick(seconds)) == 1
    assert len(fast.tick(seconds)) == 4
    assert fast.time_of_day == TimeOfDay.MORNING
    assert fast.day == 2
    assert slow.time_of_day == TimeOfDay.AFTERNOON


def test_cycle_speed_and_invalid_speed(session):
    assert session.cycle_speed().speed == 2
    assert session.cycle_speed().speed == 4
    assert session.cycle_speed().speed == 1
    with pytest.raises(ValueError):
        session.set_speed(3)
    assert session.schedule.speed == 1


def test_pause_drops_partial_tick(session):
    session.toggle_play()
    session.tick(session.schedule.interval / 2)
    session.toggle_play()
    session.toggle_play()
    assert session.tick(session.schedule.interval / 2) == []


def test_undo_steps_back(session):
    session.activate("bed")
    session.enter_room(Room.LIVING)
    assert session.undo().current_room == Room.BEDROOM
    assert session.undo() == initial_state()
    assert session.undo() is None


def test_history_is_bounded(catalog):
    session = GameSession(catalog=catalog, history_limit=2)
    for room in (Room.GYM, Room.KITCHEN, Room.LIVING):
        session.enter_room(room)
    assert len(session.history) == 2
    assert session.history[0].current_room == Room.GYM


def test_activation_event_reaches_listener(session):
    heard = []
    unsubscribe = session.bus.subscribe(heard.append)
    session.activate("bed")
    session.activate("bed")
    unsubscribe()
    session.activate("desk")
    assert [event.object_id for event in heard] == ["bed"]


def test_failing_listener_does_not_change_state(session):
    def broken(event):
        raise RuntimeError("speaker unplugged")

    session.bus.subscribe(broken)
    result = session.activate("bed")
    assert result.outcome == ActionOutcome.SUCCESS
    assert session.completed_actions == {"bed"}


def test_replay_matches_session(catalog):
    intents = [
        TogglePlay(),
        Activate("bed"),
        EnterRoom(Room.KITCHEN),
        Activate("table"),
        Activate("bed"),
        AdvanceTime(),
    ]
    snapshots = replay(intents, catalog=catalog)
    assert len(snapshots) == len(intents) + 1
    final = snapshots[-1]
    assert final.completed_actions == {"bed", "table"}
    assert final.time_of_day == TimeOfDay.AFTERNOON
    assert final.character.hunger == 100

    session = GameSession(catalog=catalog)
    for intent in intents:
        session.dispatch(intent)
    assert session.state == final


def test_toggle_play_is_pure(state):
    assert toggle_play(state).is_playing is True
    assert state.is_playing is False


def test_shared_bus_is_kept(catalog):
    bus = EventBus()
    session = GameSession(catalog=catalog, bus=bus)
    assert session.bus is bus


def test_listener_sees_committed_state(session):
    seen = []
    session.bus.subscribe(
        lambda event: seen.append((session.score, event.object_id in session.completed_actions))
    )
    session.activate("bed")
    assert seen == [(10, True)]


def test_listener_command_is_not_overwritten(session):
    session.bus.subscribe(lambda event: session.activate("desk") if event.object_id == "bed" else None)
    session.activate("bed")
    assert session.completed_actions == {"bed", "desk"}
    assert session.score == 20
