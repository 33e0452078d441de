"""User model."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from discord_guild_state.core.discord import payload
from discord_guild_state.core.discord.iconhash import IconHash
from discord_guild_state.core.discord.models.cdn import ImageCdn
from discord_guild_state.core.discord.snowflake import Snowflake


class User(BaseModel):
    """Read-only user identity, as embedded in member payloads."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    id: Snowflake
    is_bot: bool = False
    discriminator: int | None = None
    name: str
    display_name: str
    avatar: IconHash = IconHash.ZERO

    @property
    def full_name(self) -> str:
        if self.discriminator is not None:
            return f"{self.name}#{self.discriminator:04d}"
        return self.name

    @property
    def avatar_url(self) -> str:
        if self.avatar:
            return ImageCdn.get_user_avatar_url(self.id, self.avatar)
        index = self.discriminator % 5 if self.discriminator else (self.id.value >> 22) % 6
        return ImageCdn.get_fallback_user_avatar_url(index)

    @model_validator(mode="before")
    @classmethod
    def _from_api(cls, data: dict) -> dict:  # type: ignore[override]
        if "display_name" in data and isinstance(data.get("id"), Snowflake):
            return data

        uid = Snowflake.parse(str(data["id"]))
        is_bot = data.get("bot") is True

        disc_raw = data.get("discriminator")
        discriminator = None
        if isinstance(disc_raw, str) and disc_raw.isascii() and disc_raw.isdigit():
            discriminator = int(disc_raw) or None

        name = payload.get_str(data, "username")
        display_name = payload.get_str(data, "global_name") or name

        return {
            "id": uid,
            "is_bot": is_bot,
            "discriminator": discriminator,
            "name": name,
            "display_name": display_name,
            "avatar": IconHash.try_parse(data.get("avatar")),
        }
