"""Commands layer - CLI facade over workflows."""

from certctl.commands.inspect import inspect
from certctl.commands.setup import setup

__all__ = [
    "setup",
    "inspect",
]
