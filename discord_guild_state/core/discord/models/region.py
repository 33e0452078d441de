"""Voice region enum."""

from __future__ import annotations

from enum import Enum


class Region(Enum):
    """Guild voice region; values are the platform's region ids."""

    BRAZIL = "brazil"
    CENTRAL_EUROPE = "eu-central"
    HONG_KONG = "hongkong"
    INDIA = "india"
    JAPAN = "japan"
    RUSSIA = "russia"
    SINGAPORE = "singapore"
    SOUTH_AFRICA = "southafrica"
    SYDNEY = "sydney"
    US_CENTRAL = "us-central"
    US_EAST = "us-east"
    US_SOUTH = "us-south"
    US_WEST = "us-west"
    WESTERN_EUROPE = "eu-west"

    @classmethod
    def try_parse(cls, value: object) -> Region | None:
        if not isinstance(value, str):
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").title()
