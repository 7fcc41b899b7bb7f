"""
Theme palette generation from a single seed color.

A seed is either a hex color (``#RRGGBB`` / ``#RGB``) or a numeric hue in
``[0, 360]``. Only the hue of the seed matters: every palette is derived
at a fixed saturation and lightness, so ``"#1E90FF"`` and its hue (210)
produce the same palette. Invalid seeds fall back to the default hue.

Generated palettes are written into a ``ThemeState`` that UI code reads.
"""

import colorsys
import math
import re
from dataclasses import dataclass
from typing import Any

from chat_uikit_bridge.core.config import settings
from chat_uikit_bridge.core.logging import get_logger

logger = get_logger("theme")

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")

# Lightness steps of each tonal scale
TONE_LEVELS: tuple[int, ...] = (0, 5, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 98, 100)

ERROR_HUE = 350
NEUTRAL_SATURATION = 8
NEUTRAL_SPECIAL_SATURATION = 36


@dataclass(frozen=True)
class HSLA:
    """A color in hue/saturation/lightness/alpha form.

    Attributes:
        hue: Hue in degrees.
        saturation: Saturation in percent.
        lightness: Lightness in percent.
        alpha: Opacity between 0 and 1.
    """

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1

    def to_css(self) -> str:
        """Return the CSS ``hsla()`` notation."""
        return (
            f"hsla({self.hue:g}, {self.saturation:g}%, "
            f"{self.lightness:g}%, {self.alpha:g})"
        )

    def to_hex(self) -> str:
        """Return the opaque ``#RRGGBB`` equivalent (alpha is dropped)."""
        red, green, blue = colorsys.hls_to_rgb(
            (self.hue % 360) / 360, self.lightness / 100, self.saturation / 100
        )
        return "#{:02X}{:02X}{:02X}".format(
            round(red * 255), round(green * 255), round(blue * 255)
        )


@dataclass(frozen=True)
class Palette:
    """Ordered set of theme colors keyed by role.

    Attributes:
        hue: Hue the palette was derived from.
        colors: ``(role, color)`` pairs in a fixed order.
    """

    hue: float
    colors: tuple[tuple[str, HSLA], ...]

    def __getitem__(self, role: str) -> HSLA:
        for name, color in self.colors:
            if name == role:
                return color
        raise KeyError(role)

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def roles(self) -> list[str]:
        return [name for name, _ in self.colors]

    def as_dict(self) -> dict[str, str]:
        """Return ``{role: css color}`` in palette order."""
        return {name: color.to_css() for name, color in self.colors}

    def css_variables(self, prefix: str | None = None) -> dict[str, str]:
        """Return CSS custom properties, e.g. ``--cui-color-primary``.

        Args:
            prefix: Variable prefix. Defaults to settings.css_variable_prefix.
        """
        prefix = prefix or settings.css_variable_prefix
        return {f"{prefix}-{name}": color.to_css() for name, color in self.colors}


def is_hex_color(value: Any) -> bool:
    """Check whether a value is a ``#RRGGBB`` or ``#RGB`` string."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.match(value) is not None


def is_hue_value(value: Any) -> bool:
    """Check whether a value is a number within ``[0, 360]``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and 0 <= value <= 360


def hex_to_hsla(value: str) -> HSLA | None:
    """Convert a hex color to HSLA with whole-number components.

    Args:
        value: Hex color in ``#RRGGBB`` or ``#RGB`` form.

    Returns:
        The HSLA color, or None if ``value`` is not a hex color.

    Example:
        >>> hex_to_hsla("#1E90FF")
        HSLA(hue=210, saturation=100, lightness=56, alpha=1)
    """
    if not is_hex_color(value):
        return None

    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    red, green, blue = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))

    hue, lightness, saturation = colorsys.rgb_to_hls(red, green, blue)
    return HSLA(
        hue=round(hue * 360) % 360,
        saturation=round(saturation * 100),
        lightness=round(lightness * 100),
        alpha=1,
    )


def hue_of(value: str) -> int | None:
    """Return the whole-degree hue of a hex color, or None if invalid."""
    color = hex_to_hsla(value)
    return color.hue if color else None


def derive_palette(
    hue: float,
    saturation: float | None = None,
    lightness: float | None = None,
) -> Palette:
    """Derive the full palette for a hue.

    Produces four semantic roles (``primary``, ``primary-light``,
    ``primary-dark``, ``on-primary``) followed by tonal scales for the
    ``primary``, ``error``, ``neutral`` and ``neutral-special`` families,
    one color per entry of ``TONE_LEVELS``.

    Args:
        hue: Base hue in degrees.
        saturation: Primary saturation. Defaults to settings.theme_saturation.
        lightness: Primary lightness. Defaults to settings.theme_lightness.

    Returns:
        Palette with the same roles, in the same order, for every hue.
    """
    saturation = saturation if saturation is not None else settings.theme_saturation
    lightness = lightness if lightness is not None else settings.theme_lightness

    colors: list[tuple[str, HSLA]] = [
        ("primary", HSLA(hue, saturation, lightness)),
        ("primary-light", HSLA(hue, saturation, min(lightness + 20, 100))),
        ("primary-dark", HSLA(hue, saturation, max(lightness - 20, 0))),
        ("on-primary", HSLA(hue, NEUTRAL_SATURATION, 98)),
    ]

    families = (
        ("primary", hue, saturation),
        ("error", ERROR_HUE, saturation),
        ("neutral", hue, NEUTRAL_SATURATION),
        ("neutral-special", hue, NEUTRAL_SPECIAL_SATURATION),
    )
    for family, family_hue, family_saturation in families:
        for level in TONE_LEVELS:
            colors.append((f"{family}-{level}", HSLA(family_hue, family_saturation, level)))

    return Palette(hue=hue, colors=tuple(colors))


def generate_palette(seed: Any = None, default_hue: float | None = None) -> Palette:
    """Generate a palette from a theme seed.

    Checks, in order: a hex color (its hue is used), a numeric hue in
    range, and otherwise the default hue. Never raises for bad seeds.

    Args:
        seed: Hex color string, hue number, or anything else.
        default_hue: Fallback hue. Defaults to settings.theme_default_hue.

    Returns:
        The derived palette.
    """
    if is_hex_color(seed):
        return derive_palette(hex_to_hsla(seed).hue)
    if is_hue_value(seed):
        return derive_palette(seed)

    fallback = default_hue if default_hue is not None else settings.theme_default_hue
    if seed is not None:
        logger.debug("Invalid theme seed, using default hue", seed=repr(seed), hue=fallback)
    return derive_palette(fallback)


class ThemeState:
    """Latest generated palette, shared with UI consumers.

    Starts empty. Each write replaces the previous palette entirely;
    no history is kept.
    """

    def __init__(self) -> None:
        self.palette: Palette | None = None
        self.seed: Any = None

    def replace(self, palette: Palette, seed: Any = None) -> None:
        """Store a new palette snapshot."""
        self.palette = palette
        self.seed = seed


class ThemePaletteGenerator:
    """Generates palettes and publishes them to a theme state.

    Example:
        >>> generator = ThemePaletteGenerator(ThemeState())
        >>> palette = generator.generate("#1E90FF")
        >>> generator.state.palette is palette
        True
    """

    def __init__(self, state: ThemeState | None = None) -> None:
        """Initialize the generator.

        Args:
            state: Theme state to write to. Defaults to the process-wide state.
        """
        self.state = state or get_theme_state()

    def generate(self, seed: Any = None) -> Palette:
        """Generate a palette for ``seed`` and write it to the theme state.

        Args:
            seed: Hex color, hue number, or None.

        Returns:
            The palette that was stored.
        """
        palette = generate_palette(seed)
        self.state.replace(palette, seed)
        logger.debug("Theme palette updated", hue=palette.hue, roles=len(palette))
        return palette


# Singleton instance
_theme_state: ThemeState | None = None


def get_theme_state() -> ThemeState:
    """Get or create the process-wide theme state."""
    global _theme_state
    if _theme_state is None:
        _theme_state = ThemeState()
    return _theme_state


def reset_theme_state() -> None:
    """Drop the process-wide theme state.

    Useful for testing.
    """
    global _theme_state
    _theme_state = None
