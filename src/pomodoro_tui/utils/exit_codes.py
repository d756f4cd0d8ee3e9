"""
Exit codes for pomodoro-tui.

Quitting the timer is always a success; only startup failures are errors.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Terminal could not be prepared for key input
ERROR_TERMINAL = 2


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_TERMINAL: "ERROR_TERMINAL",
    }
    return code_names.get(code, f"UNKNOWN({code})")

