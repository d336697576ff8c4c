"""Parsing of ``-L NAME=LEVEL`` logger-level options.

Values may be repeated on the command line or packed into one string
separated by commas or whitespace (the form used by environment variables).
"""

import logging
import re

import click

#: Libraries quieted unless the user overrides them.
DEFAULT_LIB_LEVELS: dict[str, int] = {
    "sqlalchemy": logging.WARNING,
    "alembic": logging.WARNING,
}

_SEPARATORS = re.compile(r"[,\s]+")


def split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a raw option value into non-empty ``NAME=LEVEL`` items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def level_from_name(name: str) -> int:
    """Convert a level name such as ``info`` to its numeric value.

    Raises:
        click.BadParameter: If the name is not a standard logging level.
    """
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {name}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name->level mapping.

    The result starts from `DEFAULT_LIB_LEVELS`; later items win.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = level_from_name(level_name)
    return levels
