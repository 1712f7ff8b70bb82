"""Routing and formatting of the text messages exchanged with the server."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class Route(Enum):
    """Where a received message is delivered."""

    LED = "led"
    DEVICE = "device"
    SENSOR = "sensor"
    OTHER = "other"


@dataclass(frozen=True)
class RoutedMessage:
    """A received message after normalisation, with its destination."""

    route: Route
    message: str
    fields: tuple[str, ...]
    led: Optional[int] = None


def _to_int(text: str, base: int = 10) -> Optional[int]:
    candidate = text.strip()
    if "_" in candidate or not candidate:
        return None
    try:
        value = int(candidate, base)
    except ValueError:
        return None
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def _to_float(text: str) -> Optional[float]:
    candidate = text.strip()
    if "_" in candidate or not candidate:
        return None
    try:
        return float(candidate)
    except ValueError:
        return None


def route_message(raw: str) -> RoutedMessage:
    """Normalise a received line and decide where it goes.

    The last character (the line terminator) is dropped, brackets become
    ``@`` and the third ``@``-separated field selects the route.
    """
    message = raw[:-1].replace("[", "@").replace("]", "@")
    fields = tuple(message.split("@"))
    if len(fields) < 3:
        raise ValueError(f"malformed message: {raw!r}")
    kind = fields[2]
    if kind.startswith("LED"):
        if len(fields) < 4:
            raise ValueError(f"LED message without a value: {raw!r}")
        return RoutedMessage(Route.LED, message, fields, _to_int(fields[3], 16))
    if kind.startswith(("LAMP", "PLUG", "GAS")):
        return RoutedMessage(Route.DEVICE, message, fields)
    if kind.startswith("SENSOR"):
        return RoutedMessage(Route.SENSOR, message, fields)
    return RoutedMessage(Route.OTHER, message, fields)


def format_outgoing(recipient: str, text: str) -> str:
    """Address ``text`` to ``recipient``, or to everyone when it is empty."""
    if not recipient:
        return "[ALLMSG]" + text
    return f"[{recipient}]{text}"


def key_message(key_no: int) -> str:
    """Build the message reporting a key press to the Linux peer."""
    return f"[KSH_LIN]KEY@{key_no}"


@dataclass(frozen=True)
class SensorReading:
    """The fields of a sensor message, as received."""

    name: str
    illuminance: str
    temperature: str
    humidity: str

    @property
    def illuminance_value(self) -> int:
        """Illuminance as an integer, 0 when it does not parse."""
        return _to_int(self.illuminance) or 0

    @property
    def temperature_value(self) -> float:
        """Temperature as a number, 0.0 when it does not parse."""
        return _to_float(self.temperature) or 0.0

    @property
    def humidity_value(self) -> float:
        """Humidity as a number, 0.0 when it does not parse."""
        return _to_float(self.humidity) or 0.0


def parse_sensor(message: str) -> SensorReading:
    """Split a normalised ``@NAME@SENSOR@illu@temp@humi`` message."""
    fields = message.split("@")
    if len(fields) < 6:
        raise ValueError(f"sensor message has too few fields: {message!r}")
    return SensorReading(fields[1], fields[3], fields[4], fields[5])