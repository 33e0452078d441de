"""Discord data models."""

from discord_guild_state.core.discord.models.cdn import ImageCdn
from discord_guild_state.core.discord.models.flags import (
    GUILD_FEATURES,
    GuildFlags,
    GuildMemberFlags,
)
from discord_guild_state.core.discord.models.guild import Guild
from discord_guild_state.core.discord.models.member import GuildMember
from discord_guild_state.core.discord.models.region import Region
from discord_guild_state.core.discord.models.user import User
from discord_guild_state.core.discord.models.widget import GuildWidget

__all__ = [
    "GUILD_FEATURES",
    "Guild",
    "GuildFlags",
    "GuildMember",
    "GuildMemberFlags",
    "GuildWidget",
    "ImageCdn",
    "Region",
    "User",
]
