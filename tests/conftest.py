"""Shared payload fixtures."""

from __future__ import annotations

import copy

import pytest

from discord_guild_state.core.discord.models.guild import Guild
from discord_guild_state.core.discord.models.user import User

ICON = "1269e74af4df7417b13759eae50c83dc"
ANIMATED_ICON = "a_" + ICON
BANNER = "0123456789abcdef0123456789abcdef"
SPLASH = "fedcba9876543210fedcba9876543210"


# ---------------------------------------------------------------------------
# Raw payloads
# ---------------------------------------------------------------------------

_MEMBER_PAYLOAD = {
    "user": {
        "id": "80351110224678912",
        "username": "nelly",
        "global_name": "Nelly",
        "discriminator": "0",
        "avatar": None,
    },
    "nick": "NOT API SUPPORT",
    "roles": ["41771983423143936"],
    "joined_at": "2015-04-26T06:26:56.936000+00:00",
    "premium_since": None,
    "deaf": False,
    "mute": False,
    "pending": False,
}

_GUILD_PAYLOAD = {
    "id": "197038439483310086",
    "name": "Discord Testers",
    "icon": ICON,
    "splash": SPLASH,
    "discovery_splash": None,
    "owner_id": "73193882359173120",
    "region": "us-west",
    "afk_channel_id": None,
    "afk_timeout": 300,
    "widget_enabled": True,
    "widget_channel_id": "197038439483310086",
    "verification_level": 3,
    "default_message_notifications": 1,
    "explicit_content_filter": 2,
    "roles": [
        {"id": "197038439483310086", "name": "@everyone"},
        {"id": "41771983423143936", "name": "Moderator"},
    ],
    "emojis": [{"id": "41771983429993937", "name": "LUL"}],
    "features": ["VERIFIED", "VANITY_URL", "COMMUNITY", "NOT_A_REAL_FEATURE"],
    "mfa_level": 1,
    "application_id": None,
    "system_channel_id": "197038439483310087",
    "system_channel_flags": 1,
    "rules_channel_id": "441688182833020939",
    "vanity_url_code": "discord-testers",
    "description": "The official place to report Discord Bugs!",
    "banner": BANNER,
    "premium_tier": 3,
    "premium_subscription_count": 33,
    "public_updates_channel_id": "281283303326089216",
    "max_video_channel_users": 25,
    "approximate_member_count": 60000,
    "large": True,
    "unavailable": False,
    "channels": [{"id": "197038439483310087", "type": 0}, {"id": "281283303326089216"}],
    "members": [_MEMBER_PAYLOAD],
}


@pytest.fixture
def member_payload() -> dict:
    return copy.deepcopy(_MEMBER_PAYLOAD)


@pytest.fixture
def guild_payload() -> dict:
    return copy.deepcopy(_GUILD_PAYLOAD)


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def guild(guild_payload) -> Guild:
    return Guild().fill_from_json(guild_payload)


@pytest.fixture
def user(member_payload) -> User:
    return User.model_validate(member_payload["user"])
