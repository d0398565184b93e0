#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
from typing import NamedTuple

from .canvas import Canvas, WIDTH, HEIGHT

# Glyphs ordered from dimmest to brightest
LUMINANCE_RAMP = ".,-~:;=!*#$@"

# Sampling limits and steps (radians)
ANGLE_LIMIT = 6.28
CIRCLE_STEP = 0.07   # j: angle around the tube cross-section
SWEEP_STEP = 0.02    # i: angle the cross-section is swept around the axis

TUBE_RADIUS = 1.0
RING_RADIUS = 2.0
VIEWER_DISTANCE = 5.0

# Screen mapping
CENTER_X = 40
CENTER_Y = 12
SCALE_X = 30
SCALE_Y = 15
LUMINANCE_SCALE = 8


class Sample(NamedTuple):
    """A single projected surface point."""
    x: int
    y: int
    depth: float      # 1 / z, larger is nearer
    luminance: int


def glyph_for_luminance(n: int) -> str:
    """Map a luminance score to a ramp glyph, clamped to the ramp ends."""
    if n <= 0:
        return LUMINANCE_RAMP[0]
    if n >= len(LUMINANCE_RAMP):
        return LUMINANCE_RAMP[-1]
    return LUMINANCE_RAMP[n]


def _angle_table(step):
    """Return [(sin, cos), ...] for 0, step, 2*step, ... below ANGLE_LIMIT."""
    table = []
    k = 0
    while k * step < ANGLE_LIMIT:
        a = k * step
        table.append((math.sin(a), math.cos(a)))
        k += 1
    return table


class Renderer:
    """
    Torus renderer.

    render(a, b) samples the torus surface for rotation angles ``a`` (spin
    of the tube about the x axis) and ``b`` (tilt of the whole torus about
    the z axis) and returns a freshly built Canvas.  Nothing is carried
    over between calls, so the result depends on (a, b) only.
    """

    def __init__(self, width=WIDTH, height=HEIGHT):
        self.width = width
        self.height = height
        # Trig of the sampling grid never changes; only A and B do.
        self.circle = _angle_table(CIRCLE_STEP)
        self.sweep = _angle_table(SWEEP_STEP)

    @property
    def sample_count(self) -> int:
        return len(self.circle) * len(self.sweep)

    def _circle_terms(self, a: float, b: float):
        """
        Yield the terms that depend only on the cross-section angle j.
        samples() and render() both consume these so they agree bit for bit.
        """
        e, g = math.sin(a), math.cos(a)
        n, m = math.sin(b), math.cos(b)
        for f, d in self.circle:
            h = d * TUBE_RADIUS + RING_RADIUS
            fe = f * e
            fg = f * g
            yield (h * e, fg + VIEWER_DISTANCE, h * g, fe, fg,
                   d * g, d * e, d * n, h * m, h * n, m, n)

    def samples(self, a: float, b: float):
        """Yield a Sample for every grid point, including off-screen ones."""
        sweep = self.sweep
        for he, fg5, hg, fe, fg, dg, de, dn, hm, hn, m, n in self._circle_terms(a, b):
            for c, l in sweep:
                depth = 1.0 / (c * he + fg5)
                t = c * hg - fe
                x = int(CENTER_X + SCALE_X * depth * (l * hm - t * n))
                y = int(CENTER_Y + SCALE_Y * depth * (l * hn + t * m))
                # Surface normal dotted with the light direction
                lum = int(LUMINANCE_SCALE * ((fe - c * dg) * m - c * de - fg - l * dn))
                yield Sample(x, y, depth, lum)

    def render(self, a: float, b: float) -> Canvas:
        """
        Render one frame and return the populated canvas.

        Same arithmetic as samples() followed by Canvas.plot(), with the
        depth test and ramp lookup inlined since this runs every frame.
        """
        canv = Canvas(self.width, self.height)
        w, h_max = canv.w, canv.h
        size = len(canv.chars)
        z_buf = canv.z_buffer
        chars = canv.chars
        sweep = self.sweep
        ramp = LUMINANCE_RAMP
        top = len(ramp) - 1
        dim, bright = ramp[0], ramp[top]
        cx, cy, sx, sy, ls = CENTER_X, CENTER_Y, SCALE_X, SCALE_Y, LUMINANCE_SCALE

        for he, fg5, hg, fe, fg, dg, de, dn, hm, hn, m, n in self._circle_terms(a, b):
            for c, l in sweep:
                depth = 1.0 / (c * he + fg5)
                t = c * hg - fe
                x = int(cx + sx * depth * (l * hm - t * n))
                if not 0 < x < w:
                    continue
                y = int(cy + sy * depth * (l * hn + t * m))
                if not 0 < y < h_max:
                    continue
                o = x + w * y
                if o < 0 or o >= size or depth <= z_buf[o]:
                    continue
                z_buf[o] = depth
                lum = int(ls * ((fe - c * dg) * m - c * de - fg - l * dn))
                if lum <= 0:
                    chars[o] = dim
                elif lum >= top:
                    chars[o] = bright
                else:
                    chars[o] = ramp[lum]
        return canv
