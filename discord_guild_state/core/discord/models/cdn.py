"""Discord CDN URL helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from discord_guild_state.core.discord.iconhash import IconHash
    from discord_guild_state.core.discord.snowflake import Snowflake

_BASE_URL = "https://cdn.discordapp.com"


def _ext(asset_hash: IconHash) -> str:
    return "gif" if asset_hash.is_animated else "png"


class ImageCdn:
    """Static helper for building Discord CDN image URLs."""

    @staticmethod
    def get_guild_icon_url(guild_id: Snowflake, icon_hash: IconHash, size: int = 512) -> str:
        return f"{_BASE_URL}/icons/{guild_id}/{icon_hash}.{_ext(icon_hash)}?size={size}"

    @staticmethod
    def get_guild_splash_url(guild_id: Snowflake, splash_hash: IconHash, size: int = 512) -> str:
        return f"{_BASE_URL}/splashes/{guild_id}/{splash_hash}.png?size={size}"

    @staticmethod
    def get_guild_discovery_splash_url(
        guild_id: Snowflake, splash_hash: IconHash, size: int = 512
    ) -> str:
        return f"{_BASE_URL}/discovery-splashes/{guild_id}/{splash_hash}.png?size={size}"

    @staticmethod
    def get_guild_banner_url(guild_id: Snowflake, banner_hash: IconHash, size: int = 512) -> str:
        return f"{_BASE_URL}/banners/{guild_id}/{banner_hash}.{_ext(banner_hash)}?size={size}"

    @staticmethod
    def get_user_avatar_url(user_id: Snowflake, avatar_hash: IconHash, size: int = 512) -> str:
        return f"{_BASE_URL}/avatars/{user_id}/{avatar_hash}.{_ext(avatar_hash)}?size={size}"

    @staticmethod
    def get_fallback_user_avatar_url(index: int = 0) -> str:
        return f"{_BASE_URL}/embed/avatars/{index}.png"
