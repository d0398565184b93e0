#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

WIDTH = 80
HEIGHT = 22
SIZE = WIDTH * HEIGHT

BLANK = ' '


class Canvas:
    """
    One frame worth of character cells plus the matching depth buffer.

    Both buffers are flat, row-major lists addressed by ``x + WIDTH * y``.
    Depth values are inverse distances, so a larger value is closer to the
    viewer and wins the cell.
    """
    __slots__ = ['w', 'h', 'chars', 'z_buffer']

    def __init__(self, w=WIDTH, h=HEIGHT):
        self.w, self.h = w, h
        self.chars = [BLANK] * (w * h)
        self.z_buffer = [0.0] * (w * h)

    def plot(self, x: int, y: int, depth: float, glyph: str) -> bool:
        """
        Depth-tested write of ``glyph`` at column ``x``, row ``y``.

        Row 0 and column 0 are never written.  Returns True when the cell
        was overwritten.
        """
        if not (0 < x < self.w and 0 < y < self.h):
            return False
        o = x + self.w * y
        if o < 0 or o >= len(self.chars):
            return False
        if depth > self.z_buffer[o]:
            self.z_buffer[o] = depth
            self.chars[o] = glyph
            return True
        return False

    def rows(self):
        """Yield each row of the frame buffer as a string."""
        w = self.w
        for y in range(self.h):
            yield ''.join(self.chars[y * w:(y + 1) * w])
