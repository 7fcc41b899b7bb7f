"""
Palette preview command.

Prints the CSS custom properties generated for a theme seed:

    $ chat-uikit-palette "#1E90FF"
    --cui-color-primary: hsla(210, 100%, 60%, 1);
    ...
"""

import argparse

from chat_uikit_bridge.core.config import settings
from chat_uikit_bridge.core.logging import get_logger, setup_logging
from chat_uikit_bridge.core.theme import generate_palette

logger = get_logger("cli")


def parse_seed(value: str | None) -> str | int | float | None:
    """Turn a command-line seed into a hue number when it looks like one."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def cli(argv: list[str] | None = None) -> None:
    """CLI entry point for previewing a palette.

    Can be invoked via: chat-uikit-palette [SEED]
    """
    parser = argparse.ArgumentParser(
        prog="chat-uikit-palette",
        description="Print the theme palette generated for a seed color.",
    )
    parser.add_argument("seed", nargs="?", help="Hex color (#RRGGBB / #RGB) or hue (0-360)")
    parser.add_argument("--prefix", default=settings.css_variable_prefix)
    args = parser.parse_args(argv)

    setup_logging(
        level=settings.log_level,
        json_output=settings.log_json,
        log_file=settings.log_file,
    )

    palette = generate_palette(parse_seed(args.seed))
    logger.debug("Generated palette", hue=palette.hue)

    for name, value in palette.css_variables(args.prefix).items():
        print(f"{name}: {value};")


if __name__ == "__main__":
    cli()
