"""Discord Snowflake type - an opaque 64-bit, time-ordered identifier."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import total_ordering
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

# Discord epoch: 2015-01-01T00:00:00Z in milliseconds
_DISCORD_EPOCH_MS = 1420070400000
_MAX_VALUE = (1 << 64) - 1


@total_ordering
class Snowflake:
    """Immutable, hashable Discord snowflake ID.

    The platform sends identifiers as decimal strings (they overflow a JSON
    double), so ``str()`` is the wire form and ``int()`` the numeric one.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if not 0 <= value <= _MAX_VALUE:
            raise ValueError(f"Snowflake out of range: {value}")
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def to_date(self) -> datetime:
        """Extract the creation timestamp from this snowflake."""
        ms = (self._value >> 22) + _DISCORD_EPOCH_MS
        return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)

    @classmethod
    def from_date(cls, dt: datetime) -> Snowflake:
        """Create the smallest snowflake for a datetime."""
        ms = int(dt.timestamp() * 1000) - _DISCORD_EPOCH_MS
        return cls(max(ms, 0) << 22)

    @classmethod
    def from_json(cls, value: Any) -> Snowflake | None:
        """Read a snowflake from a JSON value (decimal string or integer).

        Returns None for anything else, including booleans and ISO dates.
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return cls(value) if 0 <= value <= _MAX_VALUE else None
        if isinstance(value, str) and value.isascii() and value.isdigit():
            number = int(value)
            return cls(number) if number <= _MAX_VALUE else None
        return None

    @classmethod
    def try_parse(cls, value: str | None) -> Snowflake | None:
        """Try to parse a string as a snowflake (number or ISO date)."""
        if not value or not value.strip():
            return None

        result = cls.from_json(value.strip())
        if result is not None:
            return result

        try:
            dt = datetime.fromisoformat(value)
        except ValueError:
            return None
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls.from_date(dt)

    @classmethod
    def parse(cls, value: str) -> Snowflake:
        """Parse a string as a snowflake, raising on failure."""
        result = cls.try_parse(value)
        if result is None:
            raise ValueError(f"Invalid snowflake: {value!r}")
        return result

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Snowflake):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Snowflake):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Snowflake({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._pydantic_validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: str(v), info_arg=False
            ),
        )

    @classmethod
    def _pydantic_validate(cls, value: Any) -> Snowflake:
        if isinstance(value, Snowflake):
            return value
        result = cls.from_json(value)
        if result is None:
            raise ValueError(f"Cannot convert {value!r} to Snowflake")
        return result

    ZERO: Snowflake


Snowflake.ZERO = Snowflake(0)
