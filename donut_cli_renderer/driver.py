#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/driver.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import enum
import logging
import sys
import time

from .color import colorize
from .config import RenderConfig
from .renderer import Renderer
from .rotation import Rotation
from .terminal import InputReadError

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"

ESC = 27
QUIT_KEYS = (ord('q'), ord('Q'), ESC)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1


class State(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


def paint_frame(canvas, palette=None) -> str:
    """
    Serialise a canvas to terminal output: cursor home, then one line break
    per row followed by the row's glyphs.  Column 0 of every row is taken by
    the line break.  With no palette glyphs are written undecorated.
    """
    parts = [CURSOR_HOME]
    for row in canvas.rows():
        parts.append('\n')
        if palette:
            parts.extend(colorize(ch, palette) for ch in row[1:])
        else:
            parts.append(row[1:])
    # Trailing break after the last row
    parts.append('\n')
    return ''.join(parts)


class FrameDriver:
    """
    Runs the animation loop: poll input, render, paint, advance, sleep.

    The loop has two states, RUNNING and STOPPED; once stopped it cannot be
    restarted.  ``poller`` needs a ``poll_key()`` method returning an int or
    None.  ``out`` and ``sleep`` default to stdout and time.sleep.
    """

    def __init__(self, config: RenderConfig, poller, renderer=None,
                 out=None, sleep=None):
        self.config = config
        self.poller = poller
        self.renderer = renderer if renderer is not None else Renderer()
        self.out = out if out is not None else sys.stdout
        self.sleep = sleep if sleep is not None else time.sleep
        self.rotation = Rotation()
        self.state = State.RUNNING
        self.exit_code = EXIT_OK

    def stop(self, exit_code=EXIT_OK):
        self.state = State.STOPPED
        self.exit_code = exit_code

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self):
        """Poll one key.  Returns False when the loop has been stopped."""
        try:
            key = self.poller.poll_key()
        except InputReadError as exc:
            logger.error("%s", exc)
            self.stop(EXIT_INPUT_ERROR)
            return False

        if key in QUIT_KEYS:
            self.stop()
            return False
        return True

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def step(self):
        """Run one iteration of the loop."""
        if self.state is State.STOPPED:
            return
        if not self.handle_input():
            return

        rot = self.rotation
        canvas = self.renderer.render(rot.a, rot.b)

        palette = self.config.palette if self.config.use_color else None
        self.out.write(paint_frame(canvas, palette))
        self.out.flush()

        rot.advance()
        self.sleep(self.config.frame_interval)

    def run(self) -> int:
        self.out.write(CLEAR_SCREEN)
        self.out.flush()
        while self.state is State.RUNNING:
            self.step()
        return self.exit_code
