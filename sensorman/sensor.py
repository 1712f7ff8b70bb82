"""Live sensor chart model: three line series on a rolling time axis."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Optional

from .messages import SensorReading, parse_sensor

DEFAULT_WINDOW = timedelta(minutes=5)


def to_msecs(moment: datetime) -> int:
    """Milliseconds since the Unix epoch for ``moment``."""
    return int(round(moment.timestamp() * 1000))


@dataclass
class LineSeries:
    """A named, coloured series of (x, y) points."""

    name: str
    color: str
    points: list[tuple[int, float]] = field(default_factory=list)

    def append(self, x: int, y: float) -> None:
        """Add one point at the end of the series."""
        self.points.append((x, y))

    def clear(self) -> None:
        """Remove every point."""
        self.points.clear()


class SensorChart:
    """Illuminance, temperature and humidity plotted against the time of receipt."""

    Y_RANGE = (0, 100)
    TIME_FORMAT = "%H:%M:%S"

    def __init__(
        self,
        window: timedelta = DEFAULT_WINDOW,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.window = window
        self._clock = clock
        self.illuminance = LineSeries("illuminance", "red")
        self.temperature = LineSeries("temperature", "green")
        self.humidity = LineSeries("humidity", "blue")
        self.first: Optional[datetime] = None
        self.last: Optional[datetime] = None
        self.reset_range()

    @property
    def series(self) -> tuple[LineSeries, LineSeries, LineSeries]:
        """The three series, in drawing order."""
        return (self.illuminance, self.temperature, self.humidity)

    def reset_range(self) -> tuple[datetime, datetime]:
        """Start the time axis now and end it one window later on the same date."""
        now = self._clock()
        self.first = now
        self.last = datetime.combine(
            now.date(), (now + self.window).time(), tzinfo=now.tzinfo
        )
        return self.first, self.last

    def receive(self, message: str) -> SensorReading:
        """Plot a normalised sensor message at the current time."""
        reading = parse_sensor(message)
        now = self._clock()
        assert self.last is not None
        if now.time() >= self.last.time():
            self.last = datetime.combine(
                self.last.date(), now.time(), tzinfo=self.last.tzinfo
            )
        x = to_msecs(now)
        self.illuminance.append(x, reading.illuminance_value)
        self.temperature.append(x, reading.temperature_value)
        self.humidity.append(x, reading.humidity_value)
        return reading

    def clear(self) -> None:
        """Drop all points and restart the time axis."""
        for line in self.series:
            line.clear()
        self.reset_range()