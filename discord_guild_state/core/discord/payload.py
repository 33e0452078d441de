"""Type-safe field extraction from gateway/REST JSON payloads.

Every reader returns the field's zero value when the key is missing, null,
or holds the wrong JSON type. Callers that must tell "missing" apart from
"null" check ``key in data`` first.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, TypeVar

from discord_guild_state.core.discord.iconhash import IconHash
from discord_guild_state.core.discord.snowflake import Snowflake

logger = logging.getLogger(__name__)

_FlagT = TypeVar("_FlagT", bound=int)


def get_snowflake(data: dict[str, Any], key: str) -> Snowflake:
    return Snowflake.from_json(data.get(key)) or Snowflake.ZERO


def get_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def get_bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else False


def get_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def get_optional_str(data: dict[str, Any], key: str) -> str | None:
    """Read a nullable string; empty strings collapse to None."""
    value = data.get(key)
    return value if isinstance(value, str) and value else None


def get_timestamp(data: dict[str, Any], key: str) -> datetime | None:
    """Read an ISO-8601 timestamp, assuming UTC when no offset is given."""
    value = data.get(key)
    if not isinstance(value, str) or not value:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Ignoring malformed timestamp in %r: %r", key, value)
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def get_icon_hash(data: dict[str, Any], key: str) -> IconHash:
    value = data.get(key)
    result = IconHash.try_parse(value)
    if value and not result:
        logger.debug("Ignoring malformed hash in %r: %r", key, value)
    return result


def get_snowflake_list(data: dict[str, Any], key: str) -> list[Snowflake]:
    """Read a list of ids sent either bare or as objects with an ``id`` key.

    Entries without a usable id are skipped.
    """
    value = data.get(key)
    if not isinstance(value, list):
        return []

    ids: list[Snowflake] = []
    for item in value:
        raw = item.get("id") if isinstance(item, dict) else item
        sid = Snowflake.from_json(raw)
        if sid:
            ids.append(sid)
    return ids


def format_snowflake(value: Snowflake) -> str | None:
    """Wire form of an optional id: decimal string, or None when unset."""
    return str(value) if value else None


def format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def set_flag(flags: _FlagT, bit: int, on: bool) -> _FlagT:
    """Return *flags* with *bit* set or cleared, keeping every other bit.

    Works on plain ints so that bits unknown to the flag enum survive.
    """
    raw = int(flags) | int(bit) if on else int(flags) & ~int(bit)
    return type(flags)(raw)
