# sensorman

`sensorman` is a client for a line-based home sensor server that speaks TCP.
It logs in to the server and reads the messages that come in. It sorts each
message by kind. Sensor readings (illuminance, temperature, humidity) are
added to an in-memory chart model and saved to a SQLite database.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
sensorman [--host HOST] [--port PORT] [--id LOGIN_ID] [--database FILE]
```

Defaults:

| Option | Default |
|---|---|
| `--host` | `192.168.0.5` |
| `--port` | `5000` |
| `--id` | `19` |
| `--database` | `aiot.db` |

What the command does:

1. Connects to the server.
2. Sends the login message `[ID:PASSWORD]`.
3. Reads messages until the server closes the connection.
4. Prints each received line, with the local time in front.
5. Charts and stores every sensor reading.

Exit status:

- A malformed message is reported on stderr, and the command keeps running.
- If the connection fails or breaks, the error goes to stderr and the exit status is 1.

## Message format

Every received line has the form `[SENDER]KIND@field@...`, followed by a
terminating character such as a newline.

`sensorman.messages.route_message(raw)` normalises the line:

- It drops the last character.
- It turns each `[` and `]` into `@`.
- It splits on `@`.

The third field then picks the `Route`:

| Third field starts with | `Route` |
|---|---|
| `LED` | `Route.LED`. The next field is read as a hex number and goes into `RoutedMessage.led`; it is `None` when the field is not a number. |
| `LAMP`, `PLUG` or `GAS` | `Route.DEVICE` |
| `SENSOR` | `Route.SENSOR` |
| anything else | `Route.OTHER` |

A line with too few fields raises `ValueError`.

Here is a sensor report as it arrives:

```
[SENSOR01]SENSOR@55@23.5@40.0
```

After normalisation it reads `@SENSOR01@SENSOR@55@23.5@40.0`.
`parse_sensor(message)` turns that into a `SensorReading` whose fields are `name`, `illuminance`, `temperature` and `humidity`. Each field keeps the text as it arrived.

The numeric properties are `illuminance_value`, `temperature_value` and `humidity_value`. Each one is 0 when its text does not parse.

Outgoing text:

```python
from sensorman.messages import format_outgoing, key_message

format_outgoing("", "hello")     # "[ALLMSG]hello"
format_outgoing("PEER", "hi")    # "[PEER]hi"
key_message(3)                   # "[KSH_LIN]KEY@3"
```

## Library use

### Network: `sensorman.client.SocketClient`

| Member | What it does |
|---|---|
| `connect(host=None)` | Opens the connection and sends `login_message()`. |
| `send(text)` | Sends one line and adds the newline itself. |
| `receive()` | Reads up to 1024 bytes as text. It returns `None` once the server has closed. |
| `close()` | Closes the connection. The client can also be used as a context manager. |

Every failure raises `SocketClientError`.

### Chart data: `sensorman.sensor.SensorChart`

The chart holds three `LineSeries`: `illuminance`, `temperature` and `humidity`.

| Member | What it does |
|---|---|
| `receive(message)` | Appends one point to each series. The x value is the current time in milliseconds since the epoch. |
| `reset_range()` | Starts the time axis (`first`, `last`) at the current time. The axis spans a window of five minutes by default. |
| `clear()` | Empties the series and resets the axis. |

### Storage: `sensorman.storage.SensorDatabase`

| Member | What it does |
|---|---|
| `SensorDatabase(path="aiot.db")` | Opens the database file and creates the `sensor_tb` table if it is missing. |
| `insert(message)` | Stores a reading under the current time. It returns `False` if a reading with the same timestamp already exists. |
| `query(start, end)` | Returns `SensorRecord`s, oldest first. |
| `delete(start, end)` | Removes the readings in the range and returns how many were removed. |
| `time_range(start, end)` | Gives the first and last stored times in the range. It falls back to `start` and `end` when there are none. |

Timestamps use the layout `yyyy/MM/dd hh:mm:ss`. Convert them with `format_timestamp` and `parse_timestamp`.

### Keyboard: `sensorman.keyboard.VirtualKeyboard`

The keyboard models an on-screen keyboard and keeps an edit buffer in `text`.

| Member | What it does |
|---|---|
| `press(label)` | Presses the key with that label. |
| `press_shift()` | Makes the next ordinary key press upper case. |
| `set_symbols(checked)` | Switches between the letter layer and the symbol layer. |
| `labels()` | Returns the current label of each key. |
| `backspace()` | Deletes the last character. |
| `clear()` | Empties the buffer. |
| `set_text(text)` | Replaces the buffer. |
| `enter()` | Passes the text to the callback, then empties the buffer. |

### Putting it together: `sensorman.app.SensorMan`

`SensorMan` combines a client, a chart and a database. Its `handle(raw)` method:

1. Adds a time-stamped copy of the line to `log`.
2. Routes the line.
3. Sends sensor readings to the chart and to the database.

## What it does not do

- **No graphical interface.** The chart, the keyboard and the search are models in memory; nothing is drawn on screen.
- **Nothing is done with LED and device messages.** LED, lamp, plug and gas messages are classified, and then no action is taken on them.
- **The command only receives.** It does not send messages to other peers. It does not search or delete stored readings. Those are available only through the library.