"""Guild widget settings model."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from discord_guild_state.core.discord import payload
from discord_guild_state.core.discord.snowflake import Snowflake


class GuildWidget(BaseModel):
    model_config = {"arbitrary_types_allowed": True}

    enabled: bool = False
    channel_id: Snowflake = Snowflake.ZERO

    def fill_from_json(self, data: dict[str, Any]) -> GuildWidget:
        if not isinstance(data, dict):
            return self
        if "enabled" in data:
            self.enabled = payload.get_bool(data, "enabled")
        if "channel_id" in data:
            self.channel_id = payload.get_snowflake(data, "channel_id")
        return self

    def to_dict(self) -> dict[str, Any]:
        # A null channel_id unsets the widget's invite channel.
        return {
            "enabled": self.enabled,
            "channel_id": payload.format_snowflake(self.channel_id),
        }

    def build_json(self) -> str:
        return json.dumps(self.to_dict())
