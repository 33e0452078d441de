"""Fixed-size content hash used by Discord for icons, banners and splashes."""

from __future__ import annotations

import re
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

_ANIMATED_PREFIX = "a_"
_HASH_RE = re.compile(r"^[0-9a-fA-F]{32}$")


class IconHash:
    """Immutable 128-bit asset hash.

    The wire form is 32 hex digits, prefixed with ``a_`` when the asset is an
    animated GIF. The zero hash stands for "no asset".
    """

    __slots__ = ("_value", "_animated")

    def __init__(self, value: int = 0, animated: bool = False) -> None:
        if not 0 <= value < (1 << 128):
            raise ValueError(f"Icon hash out of range: {value}")
        self._value = value
        self._animated = animated and value != 0

    @property
    def value(self) -> int:
        return self._value

    @property
    def is_animated(self) -> bool:
        return self._animated

    @classmethod
    def parse(cls, value: str) -> IconHash:
        """Parse the wire form, raising on failure."""
        animated = value.startswith(_ANIMATED_PREFIX)
        digits = value[len(_ANIMATED_PREFIX):] if animated else value
        if not _HASH_RE.match(digits):
            raise ValueError(f"Invalid icon hash: {value!r}")
        return cls(int(digits, 16), animated)

    @classmethod
    def try_parse(cls, value: Any) -> IconHash:
        """Parse the wire form, returning ``IconHash.ZERO`` when it is unusable."""
        if not isinstance(value, str):
            return cls.ZERO
        try:
            return cls.parse(value)
        except ValueError:
            return cls.ZERO

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IconHash):
            return self._value == other._value and self._animated == other._animated
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._value, self._animated))

    def __repr__(self) -> str:
        return f"IconHash({str(self)!r})"

    def __str__(self) -> str:
        if not self._value:
            return ""
        prefix = _ANIMATED_PREFIX if self._animated else ""
        return f"{prefix}{self._value:032x}"

    def __bool__(self) -> bool:
        return self._value != 0

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._pydantic_validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: str(v) or None, info_arg=False
            ),
        )

    @classmethod
    def _pydantic_validate(cls, value: Any) -> IconHash:
        if isinstance(value, IconHash):
            return value
        if value is None:
            return cls.ZERO
        if not isinstance(value, str):
            raise ValueError(f"Cannot convert {type(value)} to IconHash")
        return cls.parse(value)

    ZERO: IconHash


IconHash.ZERO = IconHash()
