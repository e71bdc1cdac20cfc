from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.timer import Timer
from textual.widgets import Input, RichLog, Static

from daybreak.catalog.rooms import Catalog
from daybreak.cycle.clock import TickSchedule
from daybreak.interaction.events import ActivationEvent
from daybreak.interaction.results import ActionOutcome, ActionResult, CommandType
from daybreak.session.controller import GameSession
from daybreak.ui.commands import HELP_LINES, handle_command, object_lines, status_lines


class RoutineApp(App):
    TITLE = "Daybreak"
    SUB_TITLE = ""
    BINDINGS = [
        ("f6", "focus_log", "Focus log"),
        ("f8", "focus_input", "Focus input"),
    ]
    CSS = """
    Screen {
        layout: vertical;
    }
    #header {
        height: auto;
        padding: 1 1;
    }
    #log {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #room {
        height: auto;
        padding: 1 1;
    }
    #command {
        height: 3;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        schedule: TickSchedule | None = None,
        cues: bool = True,
    ) -> None:
        super().__init__()
        self.session = GameSession(catalog=catalog, schedule=schedule)
        self.cues = cues
        self._timer: Timer | None = None
        self._unsubscribe = self.session.bus.subscribe(self._on_activation)

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("", id="header")
            yield RichLog(id="log", wrap=True)
            yield Static("", id="room")
            yield Input(placeholder="Enter command (1-3, go <room>, p, t, s, u, r or q)...", id="command")

    def on_mount(self) -> None:
        self._start_timer()
        self._refresh()
        self._write("A new day begins. Type 'p' to start the clock.")
        for line in HELP_LINES:
            self._write(line)
        self.query_one("#command", Input).focus()

    def on_unmount(self) -> None:
        self._stop_timer()
        self._unsubscribe()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        event.input.value = ""
        if not value:
            return
        if value.lower() == "q":
            self.exit()
            return
        speed = self.session.schedule.speed
        reply = handle_command(self.session, value)
        for result in reply.results:
            self._apply_action_result(result)
        for message in reply.messages:
            self._write(message)
        if self.session.schedule.speed != speed:
            self._start_timer()
        self._sync_timer()
        self._refresh()

    def action_focus_log(self) -> None:
        self.query_one("#log", RichLog).focus()

    def action_focus_input(self) -> None:
        self.query_one("#command", Input).focus()

    def _write(self, message: str) -> None:
        self.query_one("#log", RichLog).write(message)

    def _refresh(self) -> None:
        self.query_one("#header", Static).update("\n".join(status_lines(self.session)))
        self.query_one("#room", Static).update("\n".join(object_lines(self.session)))

    def _apply_action_result(self, result: ActionResult) -> None:
        if result.outcome == ActionOutcome.REJECTED:
            self._write(f"[{result.action}] Not possible: {result.summary}")
            return
        self._write(f"[{result.action}] {result.summary}")
        if result.action == CommandType.RESET:
            self._stop_timer()
            self._start_timer()

    def _on_activation(self, event: ActivationEvent) -> None:
        if self.cues:
            self.bell()

    def _on_tick(self) -> None:
        if not self.session.is_playing:
            return
        result = self.session.advance_time()
        self._apply_action_result(result)
        self._refresh()

    def _start_timer(self) -> None:
        self._stop_timer()
        self._timer = self.set_interval(
            self.session.schedule.interval,
            self._on_tick,
            pause=not self.session.is_playing,
        )

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _sync_timer(self) -> None:
        if self._timer is None:
            return
        if self.session.is_playing:
            self._timer.resume()
        else:
            self._timer.pause()
