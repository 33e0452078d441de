"""Guild member model."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, PrivateAttr

from discord_guild_state.core.discord import payload
from discord_guild_state.core.discord.models.flags import GuildMemberFlags
from discord_guild_state.core.discord.snowflake import Snowflake

if TYPE_CHECKING:
    from discord_guild_state.core.discord.models.guild import Guild
    from discord_guild_state.core.discord.models.user import User

logger = logging.getLogger(__name__)

_BOOL_FLAGS = (
    ("deaf", GuildMemberFlags.DEAF),
    ("mute", GuildMemberFlags.MUTE),
    ("pending", GuildMemberFlags.PENDING),
)


class GuildMember(BaseModel):
    """Membership of one user in one guild.

    The (guild_id, user_id) pair is bound by the first merge that supplies
    it and cannot be reassigned afterwards. ``roles`` holds role ids only;
    the roles themselves live in the guild's role store.
    """

    model_config = {"arbitrary_types_allowed": True}

    guild_id: Snowflake = Field(default=Snowflake.ZERO, frozen=True)
    user_id: Snowflake = Field(default=Snowflake.ZERO, frozen=True)
    roles: list[Snowflake] = []
    joined_at: datetime | None = None
    premium_since: datetime | None = None
    flags: GuildMemberFlags = GuildMemberFlags.NONE

    _nickname: str | None = PrivateAttr(default=None)
    _nickname_cleared: bool = PrivateAttr(default=False)

    # -- identity -----------------------------------------------------------

    def _bind(self, name: str, value: Snowflake) -> None:
        if value and not getattr(self, name):
            # frozen field; only the zero placeholder may be replaced
            object.__setattr__(self, name, value)

    # -- nickname -----------------------------------------------------------

    def get_nickname(self) -> str:
        return self._nickname or ""

    def set_nickname(self, nickname: str) -> None:
        """Set the nickname; an empty string removes it."""
        if nickname:
            self._nickname = nickname
            self._nickname_cleared = False
        else:
            self._nickname_cleared = self._nickname is not None or self._nickname_cleared
            self._nickname = None

    def display_name(self, user: User) -> str:
        return self._nickname or user.display_name

    # -- flags --------------------------------------------------------------

    def is_deaf(self) -> bool:
        return bool(self.flags & GuildMemberFlags.DEAF)

    def is_muted(self) -> bool:
        return bool(self.flags & GuildMemberFlags.MUTE)

    def is_pending(self) -> bool:
        return bool(self.flags & GuildMemberFlags.PENDING)

    # -- (de)serialization --------------------------------------------------

    def fill_from_json(
        self,
        data: dict[str, Any],
        guild: Guild | None = None,
        user: User | None = None,
    ) -> GuildMember:
        """Merge a (possibly partial) member payload into this member.

        Keys absent from *data* leave the current values untouched. When
        *guild* or *user* is not given, the payload's ``guild_id`` and
        ``user.id`` are used to bind the identity instead.
        """
        if not isinstance(data, dict):
            logger.debug("Ignoring non-object member payload: %r", type(data))
            return self

        if guild is not None:
            self._bind("guild_id", guild.id)
        elif "guild_id" in data:
            self._bind("guild_id", payload.get_snowflake(data, "guild_id"))

        if user is not None:
            self._bind("user_id", user.id)
        elif isinstance(data.get("user"), dict):
            self._bind("user_id", payload.get_snowflake(data["user"], "id"))

        if "nick" in data:
            self._nickname = payload.get_optional_str(data, "nick")
            self._nickname_cleared = False
        if "roles" in data:
            self.roles = payload.get_snowflake_list(data, "roles")
        if "joined_at" in data:
            self.joined_at = payload.get_timestamp(data, "joined_at")
        if "premium_since" in data:
            self.premium_since = payload.get_timestamp(data, "premium_since")

        for key, bit in _BOOL_FLAGS:
            if key in data:
                self.flags = payload.set_flag(self.flags, bit, payload.get_bool(data, key))

        return self

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}

        if self._nickname is not None:
            result["nick"] = self._nickname
        elif self._nickname_cleared:
            result["nick"] = None

        result["roles"] = [str(r) for r in self.roles]
        if self.joined_at is not None:
            result["joined_at"] = payload.format_timestamp(self.joined_at)
        if self.premium_since is not None:
            result["premium_since"] = payload.format_timestamp(self.premium_since)
        result["deaf"] = self.is_deaf()
        result["mute"] = self.is_muted()
        result["pending"] = self.is_pending()
        return result

    def build_json(self) -> str:
        """Serialize to a JSON request body; does not modify the member."""
        return json.dumps(self.to_dict(), ensure_ascii=False)
