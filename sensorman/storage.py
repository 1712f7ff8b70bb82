"""SQLite storage of sensor readings, keyed by the time they arrived."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from typing import Callable, Optional, Union

from .messages import SensorReading, parse_sensor
from .sensor import to_msecs

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"
DEFAULT_DATABASE = "aiot.db"

_CREATE_TABLE = (
    "create table if not exists sensor_tb ("
    "name varchar(10),"
    "date DATETIME primary key,"
    "illu varchar(10),"
    "temp float(10),"
    "humi float(10))"
)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` in the stored ``yyyy/MM/dd hh:mm:ss`` form."""
    return moment.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> Optional[datetime]:
    """Parse a stored timestamp; None when it is not valid."""
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError:
        return None


def _as_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


@dataclass(frozen=True)
class SensorRecord:
    """One stored row, with every column as text."""

    name: str
    timestamp: str
    illuminance: str
    temperature: str
    humidity: str

    @property
    def moment(self) -> Optional[datetime]:
        """The time of the reading, or None if the stored text is invalid."""
        return parse_timestamp(self.timestamp)

    @property
    def x(self) -> int:
        """Milliseconds since the epoch, for plotting; 0 when the time is invalid."""
        moment = self.moment
        return to_msecs(moment) if moment is not None else 0

    def _reading(self) -> SensorReading:
        return SensorReading(self.name, self.illuminance, self.temperature, self.humidity)

    @property
    def illuminance_value(self) -> int:
        return self._reading().illuminance_value

    @property
    def temperature_value(self) -> float:
        return self._reading().temperature_value

    @property
    def humidity_value(self) -> float:
        return self._reading().humidity_value


class SensorDatabase:
    """The sensor table of a SQLite database file."""

    def __init__(
        self,
        path: Union[str, PathLike] = DEFAULT_DATABASE,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._clock = clock
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(_CREATE_TABLE)

    def insert(self, message: str) -> bool:
        """Store a normalised sensor message stamped with the current time.

        Returns False when a reading with the same timestamp is already stored.
        """
        reading = parse_sensor(message)
        stamp = format_timestamp(self._clock())
        try:
            with self._conn:
                self._conn.execute(
                    "insert into sensor_tb(name, date, illu, temp, humi) "
                    "values (?, ?, ?, ?, ?)",
                    (
                        reading.name,
                        stamp,
                        reading.illuminance,
                        reading.temperature,
                        reading.humidity,
                    ),
                )
        except sqlite3.IntegrityError:
            return False
        return True

    def query(self, start: datetime, end: datetime) -> list[SensorRecord]:
        """Return the readings from ``start`` to ``end`` inclusive, oldest first."""
        rows = self._conn.execute(
            "select name, date, illu, temp, humi from sensor_tb "
            "where ? <= date and date <= ? order by date",
            (format_timestamp(start), format_timestamp(end)),
        )
        return [SensorRecord(*(_as_text(value) for value in row)) for row in rows]

    def delete(self, start: datetime, end: datetime) -> int:
        """Delete the readings from ``start`` to ``end`` and return how many went."""
        with self._conn:
            cursor = self._conn.execute(
                "delete from sensor_tb where ? <= date and date <= ?",
                (format_timestamp(start), format_timestamp(end)),
            )
        return cursor.rowcount

    def time_range(self, start: datetime, end: datetime) -> tuple[datetime, datetime]:
        """The span of stored readings in the interval, or the interval itself."""
        records = self.query(start, end)
        first = records[0].moment if records else None
        last = records[-1].moment if records else None
        return (
            first if first is not None else start.replace(microsecond=0),
            last if last is not None else end.replace(microsecond=0),
        )

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> "SensorDatabase":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()