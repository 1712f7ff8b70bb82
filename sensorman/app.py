"""The application: receive server messages, chart and store sensor readings."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from typing import Optional, Sequence

from .client import DEFAULT_HOST, DEFAULT_LOG_ID, DEFAULT_PORT, SocketClient, SocketClientError
from .messages import Route, RoutedMessage, route_message
from .sensor import SensorChart
from .storage import DEFAULT_DATABASE, SensorDatabase


class SensorMan:
    """Dispatches received lines to the live chart and the database."""

    def __init__(
        self, client: SocketClient, chart: SensorChart, database: SensorDatabase
    ) -> None:
        self.client = client
        self.chart = chart
        self.database = database
        self.log: list[str] = []

    def handle(self, raw: str) -> RoutedMessage:
        """Log one received line and deliver it where it belongs."""
        stamp = datetime.now().strftime("%H:%M:%S")
        self.log.append(f"{stamp} {raw[:-1]}")
        routed = route_message(raw)
        if routed.route is Route.SENSOR:
            self.chart.receive(routed.message)
            self.database.insert(routed.message)
        return routed


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sensorman", description="Receive sensor readings and store them."
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    parser.add_argument("--id", dest="log_id", default=DEFAULT_LOG_ID, help="login id")
    parser.add_argument("--database", default=DEFAULT_DATABASE, help="SQLite file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Connect to the server and process messages until it closes."""
    args = _parser().parse_args(argv)
    client = SocketClient(args.host, args.port, args.log_id)
    with SensorDatabase(args.database) as database:
        app = SensorMan(client, SensorChart(), database)
        try:
            client.connect()
        except SocketClientError as exc:
            print(exc, file=sys.stderr)
            return 1
        try:
            with client:
                while (raw := client.receive()) is not None:
                    try:
                        app.handle(raw)
                    except ValueError as exc:
                        print(exc, file=sys.stderr)
                    print(app.log[-1])
        except SocketClientError as exc:
            print(exc, file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())