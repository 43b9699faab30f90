import pytest

from ardrivo.printing import Print
from ardrivo.wstring import HEX, String


class Recorder(Print):
    def __init__(self, capacity=None):
        self.output = bytearray()
        self.capacity = capacity

    def write_byte(self, value):
        if self.capacity is not None and len(self.output) >= self.capacity:
            return 0
        self.output.append(value)
        return 1


def test_print_str_writes_encoded_text():
    rec = Recorder()
    assert Print.print(rec, "hello") == 5
    assert bytes(rec.output) == b"hello"


def test_println_without_value_writes_crlf():
    rec = Recorder()
    assert Print.println(rec) == 2
    assert bytes(rec.output) == b"\r\n"


def test_println_value_appends_crlf():
    rec = Recorder()
    count = Print.println(rec, "abc")
    assert count == len("abc") + 2
    assert bytes(rec.output) == b"abc\r\n"


def test_print_int_in_hex_matches_string_rendering():
    rec = Recorder()
    count = rec.print(255, HEX)
    expected = str(String(255, HEX)).encode()
    assert count == len(expected)
    assert bytes(rec.output) == expected


def test_print_int_default_decimal():
    rec = Recorder()
    rec.print(-42)
    assert bytes(rec.output) == str(String(-42)).encode()


def test_print_float_matches_string_rendering():
    rec = Recorder()
    rec.print(1.5, 4)
    assert bytes(rec.output) == str(String(1.5)).encode()


def test_print_string_object():
    rec = Recorder()
    assert rec.print(String("xyz")) == 3
    assert bytes(rec.output) == b"xyz"


def test_write_stops_at_first_failure():
    rec = Recorder(capacity=3)
    assert Print.write(rec, b"hello") == 3
    assert bytes(rec.output) == b"hel"


def test_write_none_writes_nothing():
    rec = Recorder()
    assert Print.write(rec, None) == 0
    assert rec.output == bytearray()


def test_write_rejects_unknown_type():
    with pytest.raises(TypeError):
        Print.write(Recorder(), object())


def test_print_rejects_unknown_type():
    with pytest.raises(TypeError):
        Print.print(Recorder(), object())


def test_write_error_round_trip():
    rec = Recorder()
    assert Print.get_write_error(rec) == 0
    Print.set_write_error(rec)
    assert Print.get_write_error(rec) == 1
    Print.set_write_error(rec, 7)
    assert Print.get_write_error(rec) == 7
    Print.clear_write_error(rec)
    assert Print.get_write_error(rec) == 0


def test_available_for_write_defaults_to_zero():
    assert Print.available_for_write(Recorder()) == 0


def test_print_is_abstract():
    with pytest.raises(TypeError):
        Print()