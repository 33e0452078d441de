"""CLI application - inspect and rebuild guild state from payload files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from discord_guild_state.core.discord.models.guild import Guild
    from discord_guild_state.core.discord.snowflake import Snowflake

console = Console()

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class SnowflakeParamType(click.ParamType):
    """Click parameter type for Discord snowflake IDs."""

    name = "snowflake"

    def convert(self, value: str, param: click.Parameter | None, ctx: click.Context | None) -> Snowflake:
        from discord_guild_state.core.discord.snowflake import Snowflake

        if isinstance(value, Snowflake):
            return value
        result = Snowflake.try_parse(value)
        if result is None:
            self.fail(f"Invalid snowflake: {value!r}", param, ctx)
        return result


SNOWFLAKE = SnowflakeParamType()

payload_argument = click.argument(
    "payloads",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


def load_payload(path: Path) -> dict[str, Any]:
    """Read one payload document; a gateway envelope is unwrapped to its ``d``."""
    from discord_guild_state.core.exceptions import PayloadError

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PayloadError(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    if isinstance(data, dict) and "op" in data and isinstance(data.get("d"), dict):
        data = data["d"]
    if not isinstance(data, dict):
        raise PayloadError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data


def _merge_guild(paths: tuple[Path, ...]) -> Guild:
    from discord_guild_state.core.discord.models.guild import Guild
    from discord_guild_state.core.exceptions import GuildStateError

    guild = Guild()
    try:
        for path in paths:
            guild.fill_from_json(load_payload(path))
    except GuildStateError as exc:
        raise click.ClickException(str(exc)) from exc
    return guild


@click.group()
@click.version_option(package_name="discord-guild-state")
@click.option(
    "--log-level",
    envvar="GUILD_STATE_LOG_LEVEL",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level.",
)
def cli(log_level: str) -> None:
    """Discord guild state - merge and rebuild guild payloads."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@payload_argument
def inspect(payloads: tuple[Path, ...]) -> None:
    """Merge guild payloads in order and show the result."""
    guild = _merge_guild(payloads)

    console.print(f"{guild.id} | {guild.name}")
    console.print(f"Region: {guild.region.display_name}")
    console.print(f"Owner: {guild.owner_id}")
    console.print(f"Members: {guild.member_count} ({len(guild.members)} known)")
    console.print(
        f"Roles: {len(guild.roles)} | Channels: {len(guild.channels)}"
        f" | Emojis: {len(guild.emojis)}"
    )
    if guild.get_description():
        console.print(f"Description: {guild.get_description()}")
    if guild.get_vanity_url():
        console.print(f"Vanity URL: {guild.get_vanity_url()}")
    console.print("Features: " + (", ".join(guild.features) or "none"))

    if guild.members:
        table = Table("User", "Nickname", "Roles", "Joined")
        for user_id, member in sorted(guild.members.items()):
            table.add_row(
                str(user_id),
                member.get_nickname(),
                str(len(member.roles)),
                member.joined_at.isoformat() if member.joined_at else "",
            )
        console.print(table)


@cli.command()
@payload_argument
@click.option("--with-id", is_flag=True, default=False, help="Include the guild id.")
def build(payloads: tuple[Path, ...], with_id: bool) -> None:
    """Merge guild payloads in order and print the request JSON."""
    guild = _merge_guild(payloads)
    click.echo(guild.build_json(with_id))


@cli.command()
@payload_argument
@click.option("--guild-id", type=SNOWFLAKE, default=None, help="Guild to bind the member to.")
@click.option("--user-id", type=SNOWFLAKE, default=None, help="User to bind the member to.")
def member(
    payloads: tuple[Path, ...],
    guild_id: Snowflake | None,
    user_id: Snowflake | None,
) -> None:
    """Merge guild member payloads in order and print the member JSON."""
    from discord_guild_state.core.discord.models.member import GuildMember
    from discord_guild_state.core.exceptions import GuildStateError

    result = GuildMember()
    try:
        for path in payloads:
            data = load_payload(path)
            if guild_id is not None:
                data.setdefault("guild_id", str(guild_id))
            if user_id is not None:
                data.setdefault("user", {"id": str(user_id)})
            result.fill_from_json(data)
    except GuildStateError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(result.build_json())
