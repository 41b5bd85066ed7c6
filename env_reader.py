from __future__ import annotations

import logging
import os
from typing import Any, Callable, Optional, TypeVar

import numpy as np

from env_errors import ConversionError, EnvReadError, NumError, UnsupportedTypeError
from env_parsers import parse_bool, parse_float, parse_float64, parse_int, parse_int64

T = TypeVar("T")

# Keyed by exact type: bool must not fall through to int, nor np.float64 to float.
_CONVERTERS: dict[type, tuple[str, Callable[[str], Any]]] = {
    int: ("int", parse_int),
    np.int64: ("int64", parse_int64),
    bool: ("bool", parse_bool),
    float: ("float", parse_float),
    np.float64: ("float64", parse_float64),
}


def _lookup(name: str) -> Optional[str]:
    raw = os.environ.get(name)
    if not raw:
        return None
    return raw


def _convert(
    raw: str,
    default: T,
    type_name: str,
    parser: Callable[[str], Any],
) -> tuple[T, Optional[EnvReadError]]:
    try:
        return parser(raw), None
    except NumError as exc:
        return default, ConversionError(raw, type_name, exc)


def read_env(name: str, default: T) -> tuple[T, Optional[EnvReadError]]:
    """Read ``name`` from the environment as the type of ``default``.

    Supported defaults are ``int``, ``numpy.int64``, ``str``, ``bool``,
    ``float`` and ``numpy.float64``. An unset or empty variable yields
    ``(default, None)``. Otherwise the raw value is parsed and either the
    parsed value or ``default`` is returned together with the error that
    explains why the default was used. Never raises.
    """
    raw = _lookup(name)
    if raw is None:
        return default, None
    value_type = type(default)
    if value_type is str:
        return raw, None  # type: ignore[return-value]
    converter = _CONVERTERS.get(value_type)
    if converter is None:
        return default, UnsupportedTypeError(value_type)
    type_name, parser = converter
    return _convert(raw, default, type_name, parser)


def read_int_env(name: str, default: int) -> tuple[int, Optional[EnvReadError]]:
    raw = _lookup(name)
    if raw is None:
        return default, None
    return _convert(raw, default, "int", parse_int)


def read_int64_env(name: str, default: np.int64) -> tuple[np.int64, Optional[EnvReadError]]:
    raw = _lookup(name)
    if raw is None:
        return default, None
    return _convert(raw, default, "int64", parse_int64)


def read_str_env(name: str, default: str) -> tuple[str, Optional[EnvReadError]]:
    raw = _lookup(name)
    if raw is None:
        return default, None
    return raw, None


def read_bool_env(name: str, default: bool) -> tuple[bool, Optional[EnvReadError]]:
    raw = _lookup(name)
    if raw is None:
        return default, None
    return _convert(raw, default, "bool", parse_bool)


def read_float_env(name: str, default: float) -> tuple[float, Optional[EnvReadError]]:
    """Double-precision reader for plain ``float`` defaults; errors name the type ``float``."""
    raw = _lookup(name)
    if raw is None:
        return default, None
    return _convert(raw, default, "float", parse_float)


def read_float64_env(name: str, default: np.float64) -> tuple[np.float64, Optional[EnvReadError]]:
    raw = _lookup(name)
    if raw is None:
        return default, None
    return _convert(raw, default, "float64", parse_float64)


def read_env_or_warn(name: str, default: T, logger: Optional[logging.Logger] = None) -> T:
    """Like ``read_env`` but returns only the value, logging any error as a warning."""
    value, error = read_env(name, default)
    if error is not None:
        (logger or logging.getLogger(__name__)).warning(
            "env_read_fallback name=%s default=%r error=%s", name, default, error
        )
    return value


def require_env(name: str, default: T) -> T:
    """Like ``read_env`` but raises the reported error instead of returning it."""
    value, error = read_env(name, default)
    if error is not None:
        raise error
    return value
