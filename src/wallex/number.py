"""String-backed decimal that accepts either a JSON string or a JSON number."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


def _to_float(s: str) -> float | None:
    """Parse ``s`` the way the exchange writes numbers; None when it can't."""
    # float() tolerates padding, digit separators and non-ASCII digits, the wire format does not
    if not s or not s.isascii() or s != s.strip() or "_" in s:
        return None
    try:
        if "0x" in s.lower():
            # hex floats need a binary exponent
            f = float.fromhex(s) if "p" in s.lower() else None
        else:
            f = float(s)
    except (ValueError, OverflowError):
        return None
    if f is None or not math.isfinite(f):
        return None
    return f


class Number(str):
    """A price, quantity or percentage as sent by the exchange.

    The API is inconsistent about quoting numbers, so the value is kept as
    text: quoted numbers pass through untouched, bare JSON numbers are
    rendered with six decimals, and anything else becomes the empty
    (absent) value. Non-finite values are absent too. Parsing never raises.
    """

    __slots__ = ()

    @classmethod
    def parse(cls, value: Any) -> Number:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value) if _to_float(value) is not None else cls()
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                f = float(value)
            except (OverflowError, ValueError):
                return cls()
            return cls(f"{f:.6f}") if math.isfinite(f) else cls()
        return cls()

    def is_absent(self) -> bool:
        return self == ""

    def as_float(self) -> float:
        f = _to_float(str(self))
        return 0.0 if f is None else f

    def as_decimal(self) -> Decimal:
        try:
            return Decimal(str(self))
        except InvalidOperation:
            f = _to_float(str(self))
            return Decimal(0) if f is None else Decimal(f)

    def __float__(self) -> float:
        return self.as_float()

    def __repr__(self) -> str:
        return f"Number({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
