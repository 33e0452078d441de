"""Guild (server) model."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr

from discord_guild_state.core.discord import payload
from discord_guild_state.core.discord.iconhash import IconHash
from discord_guild_state.core.discord.models.cdn import ImageCdn
from discord_guild_state.core.discord.models.flags import (
    FEATURE_MASK,
    GUILD_FEATURES,
    SUPPRESS_JOIN_NOTIFICATIONS,
    SUPPRESS_PREMIUM_SUBSCRIPTIONS,
    GuildFlags,
)
from discord_guild_state.core.discord.models.member import GuildMember
from discord_guild_state.core.discord.models.region import Region
from discord_guild_state.core.discord.models.user import User
from discord_guild_state.core.discord.snowflake import Snowflake

logger = logging.getLogger(__name__)

# Payload keys mapped straight onto fields, by reader.
_SNOWFLAKE_FIELDS = (
    "owner_id",
    "afk_channel_id",
    "widget_channel_id",
    "application_id",
    "system_channel_id",
    "rules_channel_id",
    "public_updates_channel_id",
)
_INT_FIELDS = (
    "afk_timeout",
    "verification_level",
    "default_message_notifications",
    "explicit_content_filter",
    "mfa_level",
    "premium_tier",
    "premium_subscription_count",
    "max_video_channel_users",
)
_HASH_FIELDS = ("icon", "splash", "discovery_splash", "banner")
_BOOL_FLAGS = (
    ("large", GuildFlags.LARGE),
    ("unavailable", GuildFlags.UNAVAILABLE),
    ("widget_enabled", GuildFlags.WIDGET_ENABLED),
)
_SYSTEM_CHANNEL_FLAGS = (
    (SUPPRESS_JOIN_NOTIFICATIONS, GuildFlags.NO_JOIN_NOTIFICATIONS),
    (SUPPRESS_PREMIUM_SUBSCRIPTIONS, GuildFlags.NO_BOOST_NOTIFICATIONS),
)


class Guild(BaseModel):
    """A guild as mirrored from gateway and REST payloads.

    Instances start out empty and are brought up to date with
    :meth:`fill_from_json`, once per payload. Roles, channels and emojis are
    kept as id lists; only members are owned by the guild, keyed by user id.

    Boolean facets live in the ``flags`` bitmask. Bits this version does not
    know about are carried along untouched.
    """

    model_config = {"arbitrary_types_allowed": True}

    id: Snowflake = Field(default=Snowflake.ZERO, frozen=True)
    name: str = ""
    icon: IconHash = IconHash.ZERO
    splash: IconHash = IconHash.ZERO
    discovery_splash: IconHash = IconHash.ZERO
    banner: IconHash = IconHash.ZERO
    owner_id: Snowflake = Snowflake.ZERO
    region: Region = Region.BRAZIL
    afk_channel_id: Snowflake = Snowflake.ZERO
    afk_timeout: int = 0
    widget_channel_id: Snowflake = Snowflake.ZERO
    verification_level: int = 0
    default_message_notifications: int = 0
    explicit_content_filter: int = 0
    mfa_level: int = 0
    application_id: Snowflake = Snowflake.ZERO
    system_channel_id: Snowflake = Snowflake.ZERO
    rules_channel_id: Snowflake = Snowflake.ZERO
    public_updates_channel_id: Snowflake = Snowflake.ZERO
    member_count: int = 0
    premium_tier: int = 0
    premium_subscription_count: int = 0
    max_video_channel_users: int = 0
    flags: GuildFlags = GuildFlags.NONE
    # Raw wire value; the two suppression bits are mirrored into ``flags``.
    system_channel_flags: int = 0

    roles: list[Snowflake] = []
    channels: list[Snowflake] = []
    emojis: list[Snowflake] = []
    members: dict[Snowflake, GuildMember] = {}

    _description: str | None = PrivateAttr(default=None)
    _vanity_url_code: str | None = PrivateAttr(default=None)
    # Optional strings removed locally; serialized as explicit nulls.
    _cleared: set[str] = PrivateAttr(default_factory=set)

    # -- optional strings ---------------------------------------------------

    def _set_optional(self, key: str, value: str) -> None:
        attr = f"_{key}"
        if value:
            setattr(self, attr, value)
            self._cleared.discard(key)
        else:
            if getattr(self, attr) is not None:
                self._cleared.add(key)
            setattr(self, attr, None)

    def get_description(self) -> str:
        return self._description or ""

    def set_description(self, description: str) -> None:
        """Set the community description; an empty string removes it."""
        self._set_optional("description", description)

    def get_vanity_url(self) -> str:
        return self._vanity_url_code or ""

    def set_vanity_url(self, code: str) -> None:
        """Set the vanity invite code; an empty string removes it."""
        self._set_optional("vanity_url_code", code)

    # -- flags --------------------------------------------------------------

    def _has(self, bit: GuildFlags) -> bool:
        return bool(int(self.flags) & int(bit))

    def is_large(self) -> bool:
        """More than the large threshold of members (250 by default)."""
        return self._has(GuildFlags.LARGE)

    def is_unavailable(self) -> bool:
        """Unavailable due to an outage; other fields may be stale."""
        return self._has(GuildFlags.UNAVAILABLE)

    def widget_enabled(self) -> bool:
        return self._has(GuildFlags.WIDGET_ENABLED)

    def has_invite_splash(self) -> bool:
        return self._has(GuildFlags.INVITE_SPLASH)

    def has_vip_regions(self) -> bool:
        return self._has(GuildFlags.VIP_REGIONS)

    def has_vanity_url(self) -> bool:
        """Allowed a vanity URL (the code itself is :meth:`get_vanity_url`)."""
        return self._has(GuildFlags.VANITY_URL)

    def is_verified(self) -> bool:
        return self._has(GuildFlags.VERIFIED)

    def is_partnered(self) -> bool:
        return self._has(GuildFlags.PARTNERED)

    def is_community(self) -> bool:
        return self._has(GuildFlags.COMMUNITY)

    def has_commerce(self) -> bool:
        return self._has(GuildFlags.COMMERCE)

    def has_news(self) -> bool:
        return self._has(GuildFlags.NEWS)

    def is_discoverable(self) -> bool:
        return self._has(GuildFlags.DISCOVERABLE)

    def is_featureable(self) -> bool:
        return self._has(GuildFlags.FEATURABLE)

    def has_animated_icon(self) -> bool:
        """Allowed to upload an animated icon."""
        return self._has(GuildFlags.ANIMATED_ICON)

    def has_banner(self) -> bool:
        return self._has(GuildFlags.BANNER)

    def is_welcome_screen_enabled(self) -> bool:
        return self._has(GuildFlags.WELCOME_SCREEN_ENABLED)

    def has_member_verification_gate(self) -> bool:
        return self._has(GuildFlags.MEMBER_VERIFICATION_GATE)

    def is_preview_enabled(self) -> bool:
        return self._has(GuildFlags.PREVIEW_ENABLED)

    def has_join_notifications_suppressed(self) -> bool:
        return self._has(GuildFlags.NO_JOIN_NOTIFICATIONS)

    def has_boost_notifications_suppressed(self) -> bool:
        return self._has(GuildFlags.NO_BOOST_NOTIFICATIONS)

    def has_animated_icon_hash(self) -> bool:
        """The current icon is an animated GIF."""
        return self._has(GuildFlags.HAS_ANIMATED_ICON)

    @property
    def features(self) -> list[str]:
        return [name for name, bit in GUILD_FEATURES.items() if self._has(bit)]

    # -- derived ------------------------------------------------------------

    @property
    def created_at(self) -> datetime:
        return self.id.to_date()

    @property
    def icon_url(self) -> str | None:
        return ImageCdn.get_guild_icon_url(self.id, self.icon) if self.icon else None

    @property
    def splash_url(self) -> str | None:
        return ImageCdn.get_guild_splash_url(self.id, self.splash) if self.splash else None

    @property
    def discovery_splash_url(self) -> str | None:
        if not self.discovery_splash:
            return None
        return ImageCdn.get_guild_discovery_splash_url(self.id, self.discovery_splash)

    @property
    def banner_url(self) -> str | None:
        return ImageCdn.get_guild_banner_url(self.id, self.banner) if self.banner else None

    # -- (de)serialization --------------------------------------------------

    def fill_from_json(self, data: dict[str, Any]) -> Guild:
        """Merge a (possibly partial) guild payload into this guild.

        Only keys present in *data* are applied. Id lists and ``features``
        are complete snapshots and replace what was there; ``members`` are
        merged into the existing member map. A ``region`` that is null or not
        recognized leaves the current region in place. Returns ``self`` so
        successive payloads can be chained.
        """
        if not isinstance(data, dict):
            logger.debug("Ignoring non-object guild payload: %r", type(data))
            return self

        if "id" in data and not self.id:
            # frozen field; bound once by the first payload carrying an id
            object.__setattr__(self, "id", payload.get_snowflake(data, "id"))
            for member in self.members.values():
                member.fill_from_json({}, self)

        if "name" in data:
            self.name = payload.get_str(data, "name")

        for key in _SNOWFLAKE_FIELDS:
            if key in data:
                setattr(self, key, payload.get_snowflake(data, key))
        for key in _INT_FIELDS:
            if key in data:
                setattr(self, key, payload.get_int(data, key))
        for key in _HASH_FIELDS:
            if key in data:
                setattr(self, key, payload.get_icon_hash(data, key))

        if "icon" in data:
            self.flags = payload.set_flag(
                self.flags, GuildFlags.HAS_ANIMATED_ICON, self.icon.is_animated
            )

        if "region" in data:
            region = Region.try_parse(data["region"])
            if region is not None:
                self.region = region
            elif data["region"] is not None:
                logger.debug("Ignoring unknown region %r", data["region"])

        if "approximate_member_count" in data:
            self.member_count = payload.get_int(data, "approximate_member_count")
        elif "member_count" in data:
            self.member_count = payload.get_int(data, "member_count")

        for key, bit in _BOOL_FLAGS:
            if key in data:
                self.flags = payload.set_flag(self.flags, bit, payload.get_bool(data, key))

        if "system_channel_flags" in data:
            self.system_channel_flags = payload.get_int(data, "system_channel_flags")
            for wire_bit, bit in _SYSTEM_CHANNEL_FLAGS:
                self.flags = payload.set_flag(
                    self.flags, bit, bool(self.system_channel_flags & wire_bit)
                )

        if "features" in data:
            self._fill_features(data["features"])

        if "description" in data:
            self._description = payload.get_optional_str(data, "description")
            self._cleared.discard("description")
        if "vanity_url_code" in data:
            self._vanity_url_code = payload.get_optional_str(data, "vanity_url_code")
            self._cleared.discard("vanity_url_code")

        if "roles" in data:
            self.roles = payload.get_snowflake_list(data, "roles")
        if "channels" in data:
            self.channels = payload.get_snowflake_list(data, "channels")
        if "emojis" in data:
            self.emojis = payload.get_snowflake_list(data, "emojis")
        if isinstance(data.get("members"), list):
            for member_data in data["members"]:
                self._fill_member(member_data)

        return self

    def _fill_features(self, features: Any) -> None:
        flags = int(self.flags) & ~FEATURE_MASK
        if isinstance(features, list):
            for feature in features:
                bit = GUILD_FEATURES.get(feature) if isinstance(feature, str) else None
                if bit is None:
                    logger.debug("Ignoring unrecognized guild feature %r", feature)
                    continue
                flags |= int(bit)
        self.flags = GuildFlags(flags)

    def _fill_member(self, data: Any) -> None:
        user_data = data.get("user") if isinstance(data, dict) else None
        if not isinstance(user_data, dict) or not payload.get_snowflake(user_data, "id"):
            logger.debug("Skipping member payload without a user id")
            return

        user = User.model_validate(user_data)
        member = self.members.get(user.id)
        if member is None:
            member = GuildMember()
            self.members[user.id] = member
        member.fill_from_json(data, self, user)

    def to_dict(self, with_id: bool = False) -> dict[str, Any]:
        """Project the guild onto its wire representation.

        Unset ids and hashes are left out. A description or vanity code that
        was removed with its setter is sent as ``null`` so the platform clears
        it; one that was never set is left out.
        """
        result: dict[str, Any] = {}
        if with_id and self.id:
            result["id"] = str(self.id)

        result["name"] = self.name
        for key in _HASH_FIELDS:
            value: IconHash = getattr(self, key)
            if value:
                result[key] = str(value)

        result["region"] = self.region.value
        for key in _SNOWFLAKE_FIELDS:
            value_id = payload.format_snowflake(getattr(self, key))
            if value_id is not None:
                result[key] = value_id
        for key in _INT_FIELDS:
            result[key] = getattr(self, key)
        result["approximate_member_count"] = self.member_count

        for key, bit in _BOOL_FLAGS:
            result[key] = self._has(bit)
        system_channel_flags = self.system_channel_flags
        for wire_bit, bit in _SYSTEM_CHANNEL_FLAGS:
            system_channel_flags = payload.set_flag(
                system_channel_flags, wire_bit, self._has(bit)
            )
        result["system_channel_flags"] = system_channel_flags
        result["features"] = self.features

        for key in ("description", "vanity_url_code"):
            text = getattr(self, f"_{key}")
            if text is not None:
                result[key] = text
            elif key in self._cleared:
                result[key] = None

        result["roles"] = [{"id": str(r)} for r in self.roles]
        result["channels"] = [{"id": str(c)} for c in self.channels]
        result["emojis"] = [{"id": str(e)} for e in self.emojis]
        return result

    def build_json(self, with_id: bool = False) -> str:
        """Serialize to a JSON request body; does not modify the guild."""
        return json.dumps(self.to_dict(with_id), ensure_ascii=False)
