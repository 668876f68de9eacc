"""Conversion of stored text into fixed width primitive values.

Values are kept as text and only converted when read. Each primitive follows
the usual textual rules for its type:

- Integers are an optional sign followed by ASCII digits, with no whitespace
  or digit separators. Unsigned types do not accept `-`. A result outside the
  range of the type's width is an overflow, not a wrap.
- `isize` and `usize` use the pointer width of the running interpreter.
- Floats are decimal with optional fraction and exponent, or one of `inf`,
  `infinity` and `nan` in any case. `f32` values are rounded to single
  precision and overflow to infinity.
- Booleans are exactly `true` or `false`.

A conversion that fails keeps the reason as a `ParseError` inside a
`TypedValue` rather than raising, so callers can tell a missing key
(`None`) from a value that does not parse.
"""

from collections.abc import Callable
from dataclasses import dataclass
import math
import re
import struct
from typing import Any, Generic, TypeVar, cast

from .exceptions import ParseError

__all__ = [
    "TypedValue",
    "Primitive",
    "PRIMITIVES",
    "POINTER_BITS",
    "convert",
]

T = TypeVar("T")

POINTER_BITS = struct.calcsize("P") * 8

EMPTY_INTEGER = "cannot parse integer from empty string"
INVALID_DIGIT = "invalid digit found in string"
POS_OVERFLOW = "number too large to fit in target type"
NEG_OVERFLOW = "number too small to fit in target type"
INVALID_FLOAT = "invalid float literal"
INVALID_BOOL = "provided string was not `true` or `false`"

FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class TypedValue(Generic[T]):
    """A present value converted to a requested type, or why it could not be."""

    value: T | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        """Return True if the conversion succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the converted value or raise the ParseError."""
        if self.error is not None:
            raise self.error
        return cast(T, self.value)


def _integer_parser(bits: int, signed: bool) -> Callable[[str], int]:
    low = -(1 << (bits - 1)) if signed else 0
    high = (1 << (bits - 1)) - 1 if signed else (1 << bits) - 1

    def parse(text: str) -> int:
        if not text:
            raise ValueError(EMPTY_INTEGER)
        sign, digits = text[0], text[1:]
        if sign not in ("+", "-"):
            sign, digits = "", text
        if sign == "-" and not signed:
            raise ValueError(INVALID_DIGIT)
        if not digits.isascii() or not digits.isdigit():
            raise ValueError(INVALID_DIGIT)
        digits = digits.lstrip("0") or "0"
        if len(digits) > 20:
            raise ValueError(NEG_OVERFLOW if sign == "-" else POS_OVERFLOW)
        value = int(sign + digits)
        if value > high:
            raise ValueError(POS_OVERFLOW)
        if value < low:
            raise ValueError(NEG_OVERFLOW)
        return value

    return parse


def _parse_double(text: str) -> float:
    if FLOAT_PATTERN.fullmatch(text) is None:
        raise ValueError(INVALID_FLOAT)
    return float(text)


def _parse_single(text: str) -> float:
    value = _parse_double(text)
    try:
        return cast(float, struct.unpack("f", struct.pack("f", value))[0])
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(INVALID_BOOL)


@dataclass(frozen=True)
class Primitive:
    """A named primitive type and its conversion from text."""

    name: str
    parse: Callable[[str], Any]


PRIMITIVES: dict[str, Primitive] = {
    primitive.name: primitive
    for primitive in (
        Primitive("i8", _integer_parser(8, True)),
        Primitive("u8", _integer_parser(8, False)),
        Primitive("i16", _integer_parser(16, True)),
        Primitive("u16", _integer_parser(16, False)),
        Primitive("i32", _integer_parser(32, True)),
        Primitive("u32", _integer_parser(32, False)),
        Primitive("i64", _integer_parser(64, True)),
        Primitive("u64", _integer_parser(64, False)),
        Primitive("isize", _integer_parser(POINTER_BITS, True)),
        Primitive("usize", _integer_parser(POINTER_BITS, False)),
        Primitive("f32", _parse_single),
        Primitive("f64", _parse_double),
        Primitive("bool", _parse_bool),
    )
}


def convert(key: str, text: str, type_name: str) -> TypedValue[Any]:
    """Convert the text stored under key to the named primitive type."""
    primitive = PRIMITIVES[type_name]
    try:
        return TypedValue(value=primitive.parse(text))
    except ValueError as err:
        return TypedValue(error=ParseError(key, type_name, str(err)))
