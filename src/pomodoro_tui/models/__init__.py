"""Domain models for pomodoro-tui."""
