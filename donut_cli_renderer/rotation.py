#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/rotation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

# Per-frame angle increments (radians)
STEP_A = 0.04
STEP_B = 0.02


class Rotation:
    """
    Accumulated rotation angles of the torus.

    ``a`` spins the tube about the x axis, ``b`` tilts the whole torus about
    the z axis.  Both only ever grow, one fixed step per rendered frame.
    """
    __slots__ = ('a', 'b')

    def __init__(self):
        self.a = 0.0
        self.b = 0.0

    def advance(self):
        self.a += STEP_A
        self.b += STEP_B

    def __repr__(self):
        return f"Rotation(a={self.a:.2f}, b={self.b:.2f})"
