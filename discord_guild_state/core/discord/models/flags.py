"""Bit-packed flag sets for guilds and guild members.

Bit positions are part of the stored state contract; new flags may only be
appended.
"""

from __future__ import annotations

from enum import IntFlag


class GuildFlags(IntFlag):
    NONE = 0
    LARGE = 1 << 0
    UNAVAILABLE = 1 << 1
    WIDGET_ENABLED = 1 << 2
    INVITE_SPLASH = 1 << 3
    VIP_REGIONS = 1 << 4
    VANITY_URL = 1 << 5
    VERIFIED = 1 << 6
    PARTNERED = 1 << 7
    COMMUNITY = 1 << 8
    COMMERCE = 1 << 9
    NEWS = 1 << 10
    DISCOVERABLE = 1 << 11
    FEATURABLE = 1 << 12
    ANIMATED_ICON = 1 << 13
    BANNER = 1 << 14
    WELCOME_SCREEN_ENABLED = 1 << 15
    MEMBER_VERIFICATION_GATE = 1 << 16
    PREVIEW_ENABLED = 1 << 17
    NO_JOIN_NOTIFICATIONS = 1 << 18
    NO_BOOST_NOTIFICATIONS = 1 << 19
    HAS_ANIMATED_ICON = 1 << 20


class GuildMemberFlags(IntFlag):
    NONE = 0
    DEAF = 1 << 0
    MUTE = 1 << 1
    PENDING = 1 << 2


# Entries of the guild "features" array, in bit order.
GUILD_FEATURES: dict[str, GuildFlags] = {
    "INVITE_SPLASH": GuildFlags.INVITE_SPLASH,
    "VIP_REGIONS": GuildFlags.VIP_REGIONS,
    "VANITY_URL": GuildFlags.VANITY_URL,
    "VERIFIED": GuildFlags.VERIFIED,
    "PARTNERED": GuildFlags.PARTNERED,
    "COMMUNITY": GuildFlags.COMMUNITY,
    "COMMERCE": GuildFlags.COMMERCE,
    "NEWS": GuildFlags.NEWS,
    "DISCOVERABLE": GuildFlags.DISCOVERABLE,
    "FEATURABLE": GuildFlags.FEATURABLE,
    "ANIMATED_ICON": GuildFlags.ANIMATED_ICON,
    "BANNER": GuildFlags.BANNER,
    "WELCOME_SCREEN_ENABLED": GuildFlags.WELCOME_SCREEN_ENABLED,
    "MEMBER_VERIFICATION_GATE_ENABLED": GuildFlags.MEMBER_VERIFICATION_GATE,
    "PREVIEW_ENABLED": GuildFlags.PREVIEW_ENABLED,
}

FEATURE_MASK = sum(int(bit) for bit in GUILD_FEATURES.values())

# Bits of the guild "system_channel_flags" integer.
SUPPRESS_JOIN_NOTIFICATIONS = 1 << 0
SUPPRESS_PREMIUM_SUBSCRIPTIONS = 1 << 1
