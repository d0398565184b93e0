#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
from typing import Tuple

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"

DEFAULT_COLOR = "green"

# Glyph subsets per intensity tier (low, medium, high)
GLYPH_TIERS = (".,-", "~:;=", "!*#$@")

# (dark, medium, highlight) RGB per color
_PALETTE_RGB = {
    "green": ((0, 100, 0), (0, 180, 0), (100, 255, 100)),
    "red": ((100, 0, 0), (180, 0, 0), (255, 100, 100)),
    "blue": ((0, 0, 100), (0, 0, 180), (100, 100, 255)),
    "cyan": ((0, 100, 100), (0, 180, 180), (100, 255, 255)),
    "magenta": ((100, 0, 100), (180, 0, 180), (255, 100, 255)),
    "yellow": ((100, 100, 0), (180, 180, 0), (255, 255, 100)),
    "white": ((100, 100, 100), (180, 180, 180), (255, 255, 255)),
}

# German spellings accepted alongside the English names
_ALIASES = {
    "gruen": "green",
    "rot": "red",
    "blau": "blue",
    "gelb": "yellow",
    "weiss": "white",
}

AVAILABLE_COLORS = tuple(_PALETTE_RGB)

Palette = Tuple[str, str, str]


def rgb_to_ansi(rgb) -> str:
    """Return the 24-bit foreground escape sequence for an (r, g, b) tuple."""
    r, g, b = rgb
    return f"\x1b[38;2;{r};{g};{b}m"


def canonical_color_name(name):
    """
    Map an accepted color name (English or German) to its English key.
    Returns None for unknown names.  Matching is case-sensitive.
    """
    if name in _PALETTE_RGB:
        return name
    return _ALIASES.get(name)


def resolve_palette(name: str) -> Palette:
    """
    Resolve a color name to three escalating-intensity ANSI codes.

    Unknown names log a warning and fall back to green.
    """
    key = canonical_color_name(name)
    if key is None:
        logger.warning("Unknown color '%s'. Using default '%s'. Available: %s",
                       name, DEFAULT_COLOR, ", ".join(AVAILABLE_COLORS))
        key = DEFAULT_COLOR
    return tuple(rgb_to_ansi(rgb) for rgb in _PALETTE_RGB[key])


def tier_for_glyph(ch: str) -> int:
    """Return the intensity tier (0-2) of a glyph, or -1 for undecorated."""
    if len(ch) != 1:
        return -1
    for tier, glyphs in enumerate(GLYPH_TIERS):
        if ch in glyphs:
            return tier
    return -1


def colorize(ch: str, palette: Palette) -> str:
    """Wrap a glyph in its tier color; blanks and unknown glyphs pass through."""
    tier = tier_for_glyph(ch)
    if tier < 0:
        return ch
    return palette[tier] + ch + RESET
