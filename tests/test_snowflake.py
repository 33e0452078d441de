"""Tests for the Snowflake type."""

from datetime import datetime, timezone

import pytest
from pydantic import BaseModel, ValidationError

from discord_guild_state.core.discord.snowflake import Snowflake


class _Holder(BaseModel):
    id: Snowflake


class TestSnowflakeBasics:
    def test_value(self):
        s = Snowflake(123456789)
        assert s.value == 123456789

    def test_str(self):
        assert str(Snowflake(42)) == "42"

    def test_int(self):
        assert int(Snowflake(42)) == 42

    def test_repr(self):
        assert repr(Snowflake(42)) == "Snowflake(42)"

    def test_bool_nonzero(self):
        assert bool(Snowflake(1)) is True

    def test_bool_zero(self):
        assert bool(Snowflake(0)) is False

    def test_hash(self):
        a = Snowflake(100)
        b = Snowflake(100)
        assert hash(a) == hash(b)
        assert {a, b} == {a}

    def test_equality(self):
        assert Snowflake(100) == Snowflake(100)
        assert Snowflake(100) != Snowflake(200)
        assert Snowflake(100) != 100

    def test_ordering(self):
        assert Snowflake(1) < Snowflake(2)
        assert Snowflake(2) > Snowflake(1)
        assert Snowflake(1) <= Snowflake(1)
        assert Snowflake(1) >= Snowflake(1)

    def test_zero_sentinel(self):
        assert Snowflake.ZERO == Snowflake(0)
        assert Snowflake.ZERO.value == 0

    def test_max_64_bit(self):
        assert Snowflake(2**64 - 1).value == 2**64 - 1

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            Snowflake(2**64)
        with pytest.raises(ValueError, match="out of range"):
            Snowflake(-1)


class TestSnowflakeTimestamp:
    def test_to_date(self):
        # 175928847299117063 was created at 2016-04-30T11:18:25.796Z
        s = Snowflake(175928847299117063)
        dt = s.to_date()
        assert dt.year == 2016
        assert dt.month == 4
        assert dt.day == 30
        assert dt.tzinfo == timezone.utc

    def test_from_date_roundtrip(self):
        dt = datetime(2020, 1, 1, tzinfo=timezone.utc)
        recovered = Snowflake.from_date(dt).to_date()
        assert abs((recovered - dt).total_seconds()) < 1

    def test_from_date_before_epoch_clamps(self):
        assert Snowflake.from_date(datetime(2000, 1, 1, tzinfo=timezone.utc)) == Snowflake.ZERO


class TestSnowflakeFromJson:
    def test_string(self):
        assert Snowflake.from_json("197038439483310086") == Snowflake(197038439483310086)

    def test_int(self):
        assert Snowflake.from_json(42) == Snowflake(42)

    def test_none(self):
        assert Snowflake.from_json(None) is None

    def test_bool_rejected(self):
        assert Snowflake.from_json(True) is None

    def test_non_digit_string(self):
        assert Snowflake.from_json("12a") is None
        assert Snowflake.from_json("-5") is None
        assert Snowflake.from_json("") is None

    def test_iso_date_rejected(self):
        assert Snowflake.from_json("2020-01-01T00:00:00+00:00") is None

    def test_float_rejected(self):
        assert Snowflake.from_json(1.5) is None

    def test_too_large(self):
        assert Snowflake.from_json(str(2**64)) is None
        assert Snowflake.from_json(2**64) is None


class TestSnowflakeParsing:
    def test_parse_int_string(self):
        s = Snowflake.parse("175928847299117063")
        assert s.value == 175928847299117063

    def test_parse_with_whitespace(self):
        assert Snowflake.parse(" 42 ") == Snowflake(42)

    def test_parse_iso_date(self):
        s = Snowflake.parse("2020-01-01T00:00:00+00:00")
        assert s.to_date().year == 2020

    def test_parse_invalid_raises(self):
        with pytest.raises(ValueError, match="Invalid snowflake"):
            Snowflake.parse("not-a-snowflake")

    def test_try_parse_none(self):
        assert Snowflake.try_parse(None) is None

    def test_try_parse_empty(self):
        assert Snowflake.try_parse("") is None
        assert Snowflake.try_parse("  ") is None

    def test_try_parse_invalid(self):
        assert Snowflake.try_parse("xyz") is None


class TestSnowflakePydantic:
    def test_from_snowflake(self):
        assert _Holder(id=Snowflake(42)).id == Snowflake(42)

    def test_from_int(self):
        assert _Holder(id=42).id == Snowflake(42)

    def test_from_string(self):
        assert _Holder(id="12345").id == Snowflake(12345)

    def test_invalid_raises(self):
        with pytest.raises(ValidationError):
            _Holder(id="abc")

    def test_serializes_as_string(self):
        assert _Holder(id=Snowflake(42)).model_dump() == {"id": "42"}
