from daybreak.domain.enums import Room
from daybreak.interaction.results import ActionOutcome, CommandType
from daybreak.ui.commands import handle_command, object_lines, status_lines


def test_number_activates_object_in_room(session):
    reply = handle_command(session, "1")
    assert reply.results[0].action == CommandType.ACTIVATE
    assert session.completed_actions == {"bed"}
    assert "(done)" in object_lines(session)[0]


def test_out_of_range_number(session):
    reply = handle_command(session, "9")
    assert reply.results == []
    assert reply.messages == ["Choose an object between 1 and 3."]


def test_room_commands(session):
    handle_command(session, "go kitchen")
    assert session.current_room == Room.KITCHEN
    handle_command(session, "living room")
    assert session.current_room == Room.LIVING


def test_control_commands(session):
    assert handle_command(session, "p").results[0].state.is_playing is True
    assert handle_command(session, "t").results[0].outcome == ActionOutcome.SUCCESS
    assert handle_command(session, "s").messages == ["Clock speed 2x."]
    assert handle_command(session, "u").messages == ["Undone."]
    handle_command(session, "r")
    assert handle_command(session, "u").messages == ["Nothing to undo."]


def test_unknown_command_lists_help(session):
    reply = handle_command(session, "dance")
    assert reply.messages[0] == "Unknown command: dance"
    assert len(reply.messages) > 1


def test_status_lines(session):
    lines = status_lines(session)
    assert lines[0].startswith("Day 1  Morning  Paused")
    assert "Score 0" in lines[1]
    assert "Done 0/15" in lines[1]
    assert lines[3] == "Mood: content"
