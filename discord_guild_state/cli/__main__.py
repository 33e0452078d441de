"""Entry point for ``python -m discord_guild_state.cli``."""

from __future__ import annotations


def main() -> None:
    from discord_guild_state.cli.app import cli

    cli(prog_name="guild-state")


if __name__ == "__main__":
    main()
