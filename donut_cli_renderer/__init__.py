#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .canvas import Canvas
from .color import resolve_palette, colorize
from .config import RenderConfig
from .renderer import Renderer, Sample, glyph_for_luminance
from .rotation import Rotation
from .driver import FrameDriver, State, paint_frame
from .terminal import (RawModeHandle, InputPoller, TerminalSetupError,
                       InputReadError, enable, disable, raw_mode)
