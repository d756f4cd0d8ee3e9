"""Full-screen timer UI for focus mode."""

from __future__ import annotations

from datetime import timedelta

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from .engine import EngineSnapshot, RunState, SessionPhase

# Countdown length below which the "ending in" notice is shown
ENDING_SOON = timedelta(seconds=5)


def format_time_left(remaining: timedelta) -> str:
    """Format a countdown as '4s 020ms', '1m 05s 000ms' or '1h 02m 03s 000ms'."""
    total_ms = max(0, remaining // timedelta(milliseconds=1))
    milliseconds = total_ms % 1000
    total_seconds = total_ms // 1000
    seconds = total_seconds % 60
    minutes = (total_seconds // 60) % 60
    hours = total_seconds // 3600

    if hours == 0 and minutes == 0:
        return f"{seconds}s {milliseconds:03d}ms"
    if hours == 0:
        return f"{minutes}m {seconds:02d}s {milliseconds:03d}ms"
    return f"{hours}h {minutes:02d}m {seconds:02d}s {milliseconds:03d}ms"


class TimerDisplay:
    """Builds the timer screen from an engine snapshot."""

    def __init__(self, show_hints: bool = True):
        self.show_hints = show_hints

    def create_layout(self, snapshot: EngineSnapshot) -> Layout:
        """Create the full-screen layout for the given state."""
        layout = Layout()
        if self.show_hints:
            layout.split_column(
                Layout(name="body"),
                Layout(name="footer", size=1),
            )
            layout["footer"].update(
                Align.center(self._create_footer_text(snapshot.run_state))
            )
        else:
            layout.split_column(Layout(name="body"))

        if snapshot.run_state is RunState.SELECTING:
            body = self._create_selection_content(snapshot)
        else:
            body = self._create_timer_content(snapshot)
        layout["body"].update(Panel(body, title="Pomodoro", title_align="center"))

        return layout

    def _create_selection_content(self, snapshot: EngineSnapshot) -> Group:
        components = [Text("Select Pomodoro session", style="bold"), Text("")]

        for index, preset in enumerate(snapshot.presets):
            if index == snapshot.selected_index:
                components.append(Text(f"> {preset.label}", style="bright_magenta"))
            else:
                components.append(Text(f"  {preset.label}"))

        if snapshot.completed_sessions > 0:
            components.append(Text(""))
            components.append(
                Text(f"Session completed: {snapshot.completed_sessions}", style="green")
            )

        return Group(*components)

    def _create_timer_content(self, snapshot: EngineSnapshot) -> Group:
        time_left = format_time_left(snapshot.remaining)

        if snapshot.run_state is RunState.PAUSED:
            timer_text = Text(f"Paused the timer: {time_left}", style="bold yellow")
        else:
            timer_text = Text(f"🍅 {time_left}", style="bold red")

        phase_name = "Break" if snapshot.phase is SessionPhase.BREAK else "Session"
        components = [Text(phase_name, style="dim"), timer_text]

        if snapshot.remaining <= ENDING_SOON:
            components.append(Text(""))
            components.append(Text(f"{phase_name} ending in...", style="italic"))

        return Group(*components)

    def _create_footer_text(self, run_state: RunState) -> Text:
        """Create footer with keyboard hints."""
        if run_state is RunState.SELECTING:
            hints = "↑/k ↓/j select  •  enter start  •  q quit"
        elif run_state is RunState.PAUSED:
            hints = "p resume  •  esc reset  •  q quit"
        else:
            hints = "p pause  •  esc reset  •  q quit"

        return Text(hints, style="dim", justify="center")


class LiveView:
    """Renders snapshots onto a rich Live screen."""

    def __init__(
        self,
        console: Console | None = None,
        display: TimerDisplay | None = None,
        screen: bool = True,
    ):
        self.console = console or Console()
        self.display = display or TimerDisplay()
        self._live = Live(
            console=self.console,
            screen=screen,
            auto_refresh=False,
        )

    def __enter__(self) -> LiveView:
        self._live.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self._live.stop()

    def render(self, snapshot: EngineSnapshot) -> None:
        self._live.update(self.display.create_layout(snapshot), refresh=True)


def show_summary(completed_sessions: int, console: Console | None = None):
    """Print the session count once the timer exits."""
    console = console or Console()
    console.print(f"Completed sessions: {completed_sessions}")
