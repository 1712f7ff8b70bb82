import socket
import threading
from datetime import datetime

import pytest

from sensorman.app import SensorMan, main
from sensorman.client import SocketClient
from sensorman.messages import Route
from sensorman.sensor import SensorChart
from sensorman.storage import SensorDatabase

EARLY = datetime(2000, 1, 1)
LATE = datetime(2100, 1, 1)


@pytest.fixture
def app(tmp_path):
    database = SensorDatabase(tmp_path / "aiot.db")
    yield SensorMan(SocketClient(), SensorChart(), database)
    database.close()


def test_sensor_message_reaches_chart_and_database(app):
    routed = app.handle("[DEV1]SENSOR@50@23.5@40\n")
    assert routed.route is Route.SENSOR
    assert [y for _, y in app.chart.illuminance.points] == [50]
    records = app.database.query(EARLY, LATE)
    assert [(r.name, r.illuminance) for r in records] == [("DEV1", "50")]


def test_led_message_is_routed_with_value(app):
    routed = app.handle("[DEV1]LED@0xff\n")
    assert routed.route is Route.LED
    assert routed.led == int("ff", 16)
    assert app.chart.illuminance.points == []
    assert app.database.query(EARLY, LATE) == []


def test_every_line_is_logged_without_terminator(app):
    app.handle("[DEV1]LAMP@ON\n")
    assert len(app.log) == 1
    assert app.log[0].endswith(" [DEV1]LAMP@ON")


def test_malformed_line_is_logged_then_rejected(app):
    with pytest.raises(ValueError):
        app.handle("x\n")
    assert app.log[-1].endswith(" x")


def test_main_stores_received_readings(tmp_path):
    server = socket.create_server(("127.0.0.1", 0))
    port = server.getsockname()[1]
    received = []

    def serve():
        conn, _ = server.accept()
        with conn:
            received.append(conn.recv(1024))
            conn.sendall(b"[DEV1]SENSOR@50@23.5@40\n")
        server.close()

    thread = threading.Thread(target=serve)
    thread.start()
    path = tmp_path / "aiot.db"
    code = main(["--host", "127.0.0.1", "--port", str(port), "--database", str(path)])
    thread.join(5)
    assert code == 0
    assert received == [SocketClient().login_message()]
    with SensorDatabase(path) as database:
        assert [r.name for r in database.query(EARLY, LATE)] == ["DEV1"]


def test_main_reports_connection_failure(tmp_path):
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    code = main(
        ["--host", "127.0.0.1", "--port", str(port), "--database", str(tmp_path / "a.db")]
    )
    assert code == 1