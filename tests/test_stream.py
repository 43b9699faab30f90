import pytest

from ardrivo.stream import DEFAULT_TIMEOUT, BytesStream, LookaheadMode, Stream


def test_parse_int_skips_leading_garbage():
    s = BytesStream("abc123x")
    assert s.parse_int() == 123
    assert s.read() == ord("x")


def test_parse_int_negative():
    assert BytesStream("-42").parse_int() == -42


def test_parse_int_consecutive_numbers():
    s = BytesStream("12 34")
    assert s.parse_int() == 12
    assert s.parse_int() == 34
    assert s.parse_int() == 0


def test_parse_int_skip_none_stops_at_space():
    s = BytesStream(" 5")
    assert s.parse_int(LookaheadMode.SKIP_NONE) == 0
    assert s.available() == 2


def test_parse_int_skip_whitespace():
    assert BytesStream("  7").parse_int(LookaheadMode.SKIP_WHITESPACE) == 7
    s = BytesStream("x7")
    assert s.parse_int(LookaheadMode.SKIP_WHITESPACE) == 0
    assert s.peek() == ord("x")


def test_parse_int_with_ignored_char():
    assert BytesStream("1,000").parse_int(LookaheadMode.SKIP_ALL, ",") == 1000


def test_parse_float_values():
    assert BytesStream("3.25").parse_float() == pytest.approx(3.25, rel=1e-6)
    assert BytesStream("x-2.5y").parse_float() == pytest.approx(-2.5, rel=1e-6)


def test_parse_float_without_digits_is_zero():
    s = BytesStream("abc")
    assert s.parse_float() == 0.0
    assert s.available() == 0


def test_parse_float_stops_at_second_dot():
    s = BytesStream("1.5.2")
    assert s.parse_float() == pytest.approx(1.5, rel=1e-6)
    assert s.peek() == ord(".")


def test_find_consumes_through_target():
    s = BytesStream("abcdef")
    assert s.find("c") is True
    assert s.read_string() == "def"


def test_find_missing_drains_stream():
    s = BytesStream("abc")
    assert s.find("z") is False
    assert s.available() == 0


def test_find_until_stops_at_terminal():
    s = BytesStream("ab\ncz")
    assert s.find_until("z", "\n") is False
    assert s.read_string() == "cz"


def test_find_rejects_multi_char_target():
    with pytest.raises(ValueError):
        BytesStream("abc").find("ab")


def test_read_bytes_limits_length():
    s = BytesStream("hello")
    assert s.read_bytes(3) == b"hel"
    assert s.read_string() == "lo"


def test_read_bytes_until_consumes_terminator():
    s = BytesStream("ab,cd")
    assert s.read_bytes_until(",", 10) == b"ab"
    assert s.read_bytes(10) == b"cd"


def test_read_string_until():
    s = BytesStream("key;value")
    assert s.read_string_until(";") == "key"
    assert s.read_string() == "value"


def test_timeout_default_and_set():
    s = BytesStream()
    assert s.timeout == DEFAULT_TIMEOUT
    s.set_timeout(50)
    assert s.timeout == 50


def test_peek_does_not_consume_and_empty_reads():
    s = BytesStream(b"A")
    assert s.peek() == ord("A")
    assert s.available() == 1
    assert s.read() == ord("A")
    assert s.read() == -1
    assert s.peek() == -1


def test_feed_and_write_byte():
    s = BytesStream()
    s.feed("hi")
    assert s.read_string() == "hi"
    assert s.print("ok") == 2
    assert bytes(s.output) == b"ok"


def test_peek_next_digit_skips_to_digit():
    s = BytesStream("ab9")
    assert s.peek_next_digit(LookaheadMode.SKIP_ALL, False) == ord("9")
    assert s.available() == 1


def test_stream_is_abstract():
    with pytest.raises(TypeError):
        Stream()