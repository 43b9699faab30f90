"""Core Arduino helpers: math, character classes, random numbers, bits and time."""

from __future__ import annotations

import random as _random
import time

LOW = 0
HIGH = 1

INPUT = 0
OUTPUT = 1
INPUT_PULLUP = INPUT

_RAND_MAX = (1 << 31) - 1
_rng = _random.Random()
_start_ns = time.monotonic_ns()


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map ``x`` from one range to another with truncating integer division."""
    return _trunc_div((x - in_min) * (out_max - out_min), in_max - in_min) + out_min


def sq(x):
    return x * x


def _code(c) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character, got {type(c).__name__}")


def _in_ascii(c, predicate) -> bool:
    code = _code(c)
    return 0 <= code < 128 and predicate(code)


def is_ascii(c) -> bool:
    return 0 <= _code(c) < 128


def is_upper_case(c) -> bool:
    return _in_ascii(c, lambda n: 65 <= n <= 90)


def is_lower_case(c) -> bool:
    return _in_ascii(c, lambda n: 97 <= n <= 122)


def is_alpha(c) -> bool:
    return is_upper_case(c) or is_lower_case(c)


def is_digit(c) -> bool:
    return _in_ascii(c, lambda n: 48 <= n <= 57)


def is_alpha_numeric(c) -> bool:
    return is_alpha(c) or is_digit(c)


def is_hexadecimal_digit(c) -> bool:
    return is_digit(c) or _in_ascii(c, lambda n: 65 <= n <= 70 or 97 <= n <= 102)


def is_control(c) -> bool:
    return _in_ascii(c, lambda n: n < 32 or n == 127)


def is_graph(c) -> bool:
    return _in_ascii(c, lambda n: 33 <= n <= 126)


def is_printable(c) -> bool:
    return _in_ascii(c, lambda n: 32 <= n <= 126)


def is_punct(c) -> bool:
    return is_graph(c) and not is_alpha_numeric(c)


def is_space(c) -> bool:
    return _in_ascii(c, lambda n: n == 32 or 9 <= n <= 13)


def is_whitespace(c) -> bool:
    return _code(c) in (32, 9)


def random(low: int, high: int | None = None) -> int:
    """A pseudo-random number in ``[low, high)``, or ``[0, low)`` with one argument."""
    if high is None:
        low, high = 0, low
    span = high - low
    if span == 0:
        raise ZeroDivisionError("empty random range")
    return _rng.randint(0, _RAND_MAX) % abs(span) + low


def random_seed(seed: int) -> None:
    _rng.seed(seed)


def bit(n: int) -> int:
    return 1 << n


def bit_read(x: int, n: int) -> int:
    return (x >> n) & 1


def bit_set(x: int, n: int) -> int:
    return x | bit(n)


def bit_clear(x: int, n: int) -> int:
    return x & ~bit(n)


def bit_write(x: int, n: int, b) -> int:
    return bit_set(x, n) if b else bit_clear(x, n)


def low_byte(x: int) -> int:
    return x & 0xFF


def high_byte(x: int) -> int:
    return low_byte(x >> 8)


def delay(ms: float) -> None:
    time.sleep(ms / 1000)


def delay_microseconds(us: float) -> None:
    time.sleep(us / 1_000_000)


def micros() -> int:
    """Microseconds elapsed since the module was loaded."""
    return (time.monotonic_ns() - _start_ns) // 1000


def millis() -> int:
    """Milliseconds elapsed since the module was loaded."""
    return (time.monotonic_ns() - _start_ns) // 1_000_000