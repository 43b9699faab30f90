# ardrivo

Arduino-style runtime building blocks for Python: the text, stream, file and
MQTT pieces a sketch relies on, usable from ordinary Python code and tests.

## What it provides

- `ardrivo.wstring.String` – a mutable string with the Arduino `String`
  interface. Integers can be rendered in binary, decimal or hexadecimal
  (`BIN`, `DEC`, `HEX`; negative numbers as their two's-complement bit
  pattern), floats with six decimals. Methods include `index_of`,
  `substring`, `remove`, `replace`, `trim`, `to_int`, `to_double`,
  `to_float`, `to_lower_case`, `to_upper_case`, `compare_to`, `equals` and
  `equals_ignore_case`; `+`, `==`, `<` and indexing work as on `str`.
- `ardrivo.arduino` – `LOW` / `HIGH`, `INPUT` / `OUTPUT`, `map_range`, `sq`,
  the character classifiers (`is_alpha`, `is_digit`, `is_space`,
  `is_whitespace`, …), `random` / `random_seed`, the bit helpers (`bit`,
  `bit_read`, `bit_set`, `bit_clear`, `bit_write`, `low_byte`, `high_byte`)
  and timing (`delay`, `delay_microseconds`, `micros`, `millis`, counted from
  when the module was loaded).
- `ardrivo.printing.Print` – an abstract byte sink. Subclasses implement
  `write_byte`; `write`, `print` and `println` (which ends lines with
  `"\r\n"`) are built on it, along with `get_write_error`,
  `set_write_error` and `clear_write_error`.
- `ardrivo.stream.Stream` – the reading side: `find`, `find_until`,
  `read_bytes`, `read_bytes_until`, `read_string`, `read_string_until`,
  `parse_int` and `parse_float` (single precision), with `LookaheadMode`
  (`SKIP_ALL`, `SKIP_NONE`, `SKIP_WHITESPACE`) controlling what is skipped
  before a number. `BytesStream` is an in-memory stream: `feed` adds data to
  read, written bytes collect in its `output` attribute.
- `ardrivo.client` – `IPAddress` (an empty placeholder), the abstract
  `Client` and `WiFiClient`, a client with no network behind it: `connect`
  always returns 0, reads return -1 and written bytes are discarded. A
  ready-made instance is available as `ardrivo.client.WiFi`.
- `ardrivo.sd` – `SDClass` and `File`, an SD card whose contents live in a
  directory on the host. `File` opens with `FileMode.READ` and/or
  `FileMode.WRITE`, works as a context manager, and walks directories with
  `open_next_file` and `rewind_directory` (entries in name order). Using a
  closed file, or a file operation on a directory, raises `SDError`.
- `ardrivo.mqtt.MQTTClient` – an MQTT client built on paho-mqtt with
  `connect`, `publish`, `subscribe`, `unsubscribe`, `loop`, `connected`,
  `disconnect`, last-will support (`set_will`, `clear_will`) and message
  callbacks (`on_message` receives two `String`s; `on_message_advanced`
  receives the client, the topic, the payload bytes and their length, and
  takes precedence when both are set).

## Installing

```
pip install ardrivo
```

## Examples

```python
from ardrivo.wstring import String, HEX
from ardrivo.stream import BytesStream

print(str(String(255, HEX)))         # FF
stream = BytesStream(b"  42,rest")
print(stream.parse_int())            # 42
```

```python
from ardrivo.sd import SDClass, FileMode

sd = SDClass("storage")
sd.begin()
sd.mkdir("/bar")
with sd.open("/bar/baz", FileMode.WRITE) as f:
    f.write(b"quxx")
```

## What it does not do

There is no simulated board here: no pins (no `pin_mode`, `digital_read`,
`analog_write` and the like), no hardware serial port, no camera, and no
command-line program to compile or run a sketch. `WiFiClient` never reaches a
network; only `MQTTClient` talks to a real broker.

## Running the tests

```
pip install "ardrivo[test]"
pytest
```