"""CLI commands package."""

from cli.commands.bulletin import bulletin_command
from cli.commands.digest import digest_command

__all__ = ["bulletin_command", "digest_command"]
