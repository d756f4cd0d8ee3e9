"""Main entry point for pomodoro-tui."""

import typer

from pomodoro_tui.commands.decorators import AppError, command_wrapper
from pomodoro_tui.config import get_config_manager
from pomodoro_tui.models.focus import (
    LiveView,
    SessionEngine,
    TerminalError,
    TimerDisplay,
    create_keyboard_handler,
    run_loop,
    show_summary,
)
from pomodoro_tui.utils.exit_codes import ERROR_TERMINAL
from pomodoro_tui.utils.logger import get_logger
from pomodoro_tui.utils.ui.console import get_console

app = typer.Typer(
    name="pomodoro",
    help="A terminal Pomodoro timer",
    add_completion=False,
)

console = get_console()


@app.command()
@command_wrapper
def pomodoro() -> None:
    """Pick a work/break preset and run Pomodoro sessions until you quit."""
    config = get_config_manager().config
    get_logger(config.logging.level)

    try:
        keyboard = create_keyboard_handler()
    except TerminalError as e:
        raise AppError(str(e), exit_code=ERROR_TERMINAL) from e

    engine = SessionEngine()
    view = LiveView(
        console=console,
        display=TimerDisplay(show_hints=config.ui.show_hints),
        screen=config.ui.screen,
    )

    try:
        with view:
            run_loop(engine, view, keyboard)
    except KeyboardInterrupt:
        # Ctrl+C raised as a signal instead of arriving as a key
        pass
    finally:
        keyboard.stop()

    show_summary(engine.completed_sessions, console)


if __name__ == "__main__":
    app()
