#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Optional

from .color import DEFAULT_COLOR, Palette, resolve_palette

logger = logging.getLogger(__name__)

# Microseconds between frames at speed factor 1.0 (about 30 FPS)
BASE_INTERVAL_US = 33333

DEFAULT_SPEED = 1.0


def parse_speed_factor(text: Optional[str]) -> float:
    """
    Parse a user supplied speed factor.
    Anything that is not a finite positive number falls back to 1.0 with
    a warning.
    """
    if text is None:
        return DEFAULT_SPEED
    try:
        value = float(text)
    except (TypeError, ValueError):
        value = None
    if value is None or not math.isfinite(value) or value <= 0:
        logger.warning("Invalid speed factor '%s'. Must be a positive number. "
                       "Using default %.1f.", text, DEFAULT_SPEED)
        return DEFAULT_SPEED
    return value


@dataclass
class RenderConfig:
    """Configuration for the animation loop."""
    color_name: str = DEFAULT_COLOR
    speed_factor: float = DEFAULT_SPEED
    base_interval_us: int = BASE_INTERVAL_US
    use_color: bool = True

    # Resolved once from color_name
    palette: Optional[Palette] = field(init=False, repr=False, default=None)

    def __post_init__(self):
        if not self.speed_factor > 0:
            raise ValueError(f"speed_factor must be positive, got {self.speed_factor!r}")
        self.palette = resolve_palette(self.color_name)

    @property
    def frame_interval(self) -> float:
        """Seconds to sleep after each frame."""
        return self.base_interval_us / self.speed_factor / 1_000_000

    @classmethod
    def detect_terminal(cls, **kwargs) -> 'RenderConfig':
        """
        Return a config with color disabled on terminals that cannot show it.
        Checks the TERM environment variable only.
        """
        term = os.environ.get('TERM', '').lower()
        kwargs.setdefault('use_color', term not in ('dumb', 'unknown'))
        return cls(**kwargs)

    @classmethod
    def from_args(cls, args) -> 'RenderConfig':
        """Build a config from parsed command-line arguments."""
        return cls.detect_terminal(
            color_name=args.color,
            speed_factor=parse_speed_factor(args.speed),
        )
