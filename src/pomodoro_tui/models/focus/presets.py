"""Fixed work/break duration presets."""

from dataclasses import dataclass
from datetime import timedelta


def _format_part(value: timedelta) -> str:
    seconds = int(value.total_seconds())
    if seconds and seconds % 60 == 0:
        return f"{seconds // 60}min"
    return f"{seconds}s"


@dataclass(frozen=True)
class DurationPreset:
    """An immutable work/break duration pair."""

    work_duration: timedelta
    break_duration: timedelta

    @property
    def label(self) -> str:
        """Short label such as '25min/5min' or '5s/3s'."""
        return f"{_format_part(self.work_duration)}/{_format_part(self.break_duration)}"

    def __str__(self) -> str:
        return self.label


DEFAULT_PRESETS: tuple[DurationPreset, ...] = (
    DurationPreset(timedelta(minutes=25), timedelta(minutes=5)),
    DurationPreset(timedelta(minutes=50), timedelta(minutes=10)),
    # Demo preset for trying out the full work -> break -> select cycle
    DurationPreset(timedelta(seconds=5), timedelta(seconds=3)),
)
