from __future__ import annotations

import json


def quote(raw: str) -> str:
    return json.dumps(raw, ensure_ascii=False)


class NumError(ValueError):
    """A literal that one of the env parsers could not accept."""

    reason = "invalid value"

    def __init__(self, func: str, raw: str) -> None:
        self.func = func
        self.raw = raw
        super().__init__(f"{func}: parsing {quote(raw)}: {self.reason}")


class ParseSyntaxError(NumError):
    reason = "invalid syntax"


class ParseRangeError(NumError):
    reason = "value out of range"


class EnvReadError(Exception):
    """Base class for errors reported by the environment reader."""


class ConversionError(EnvReadError, ValueError):
    def __init__(self, raw: str, type_name: str, cause: Exception) -> None:
        self.raw = raw
        self.type_name = type_name
        self.cause = cause
        super().__init__(f"failed to convert {quote(raw)} to {type_name}: {cause}")
        self.__cause__ = cause

    def is_syntax_error(self) -> bool:
        return isinstance(self.cause, ParseSyntaxError)

    def is_range_error(self) -> bool:
        return isinstance(self.cause, ParseRangeError)


class UnsupportedTypeError(EnvReadError, TypeError):
    def __init__(self, value_type: type) -> None:
        self.value_type = value_type
        super().__init__(
            f"unsupported type for environment variable conversion: {value_type.__qualname__}"
        )
