from __future__ import annotations

import math
import re
from typing import Final

import numpy as np

from env_errors import ParseRangeError, ParseSyntaxError

_INT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_FLOAT_SPECIAL_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)

TRUE_LITERALS: Final[frozenset[str]] = frozenset({"1", "t", "true", "yes", "y", "on"})
FALSE_LITERALS: Final[frozenset[str]] = frozenset({"0", "f", "false", "no", "n", "off"})


def _parse_bounded_int(func: str, raw: str, info: np.iinfo) -> int:
    # int() alone would accept whitespace and underscores
    if not _INT_RE.fullmatch(raw):
        raise ParseSyntaxError(func, raw)
    sign = -1 if raw[0] == "-" else 1
    digits = raw.lstrip("+-").lstrip("0") or "0"
    # bounds int() input below the interpreter's digit limit
    if len(digits) > len(str(info.max)):
        raise ParseRangeError(func, raw)
    value = sign * int(digits)
    if value < info.min or value > info.max:
        raise ParseRangeError(func, raw)
    return value


def parse_int(raw: str) -> int:
    """Parse a base-10 integer that fits the platform's native int width."""
    return _parse_bounded_int("parse_int", raw, np.iinfo(np.intp))


def parse_int64(raw: str) -> np.int64:
    return np.int64(_parse_bounded_int("parse_int64", raw, np.iinfo(np.int64)))


def parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False
    raise ParseSyntaxError("parse_bool", raw)


def _parse_float(func: str, raw: str) -> float:
    """Parse a decimal floating-point literal.

    Hex-float literals such as ``0x1p-2`` are not part of the grammar.

    ``inf``/``infinity``/``nan`` are accepted in any case with an optional
    sign. A finite literal whose magnitude overflows a double raises
    ``ParseRangeError`` instead of silently becoming infinity.
    """
    if _FLOAT_SPECIAL_RE.fullmatch(raw):
        return float(raw)
    if not _FLOAT_RE.fullmatch(raw):
        raise ParseSyntaxError(func, raw)
    value = float(raw)
    if math.isinf(value):
        raise ParseRangeError(func, raw)
    return value


def parse_float(raw: str) -> float:
    return _parse_float("parse_float", raw)


def parse_float64(raw: str) -> np.float64:
    return np.float64(_parse_float("parse_float64", raw))
