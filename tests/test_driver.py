from __future__ import annotations

import io
import logging

import pytest

from donut_cli_renderer.canvas import Canvas
from donut_cli_renderer.color import RESET, resolve_palette
from donut_cli_renderer.config import RenderConfig
from donut_cli_renderer.driver import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    EXIT_INPUT_ERROR,
    FrameDriver,
    State,
    paint_frame,
)
from donut_cli_renderer.rotation import STEP_A, STEP_B
from donut_cli_renderer.terminal import InputReadError


class _ScriptedPoller:
    """Returns queued keys in order, then None forever."""

    def __init__(self, *keys):
        self.keys = list(keys)
        self.polls = 0

    def poll_key(self):
        self.polls += 1
        if not self.keys:
            return None
        key = self.keys.pop(0)
        if isinstance(key, Exception):
            raise key
        return key


class _CountingRenderer:
    """Stands in for Renderer; records the angles it was asked for."""

    def __init__(self):
        self.calls = []

    def render(self, a, b):
        self.calls.append((a, b))
        return Canvas()


def _driver(*keys, speed=1.0, renderer=None, use_color=True):
    sleeps = []
    driver = FrameDriver(
        RenderConfig(speed_factor=speed, use_color=use_color),
        _ScriptedPoller(*keys),
        renderer=renderer if renderer is not None else _CountingRenderer(),
        out=io.StringIO(),
        sleep=sleeps.append,
    )
    return driver, sleeps


@pytest.mark.parametrize("key", [ord('q'), ord('Q'), 27])
def test_quit_keys_stop_before_rendering(key):
    driver, sleeps = _driver(key)
    assert driver.run() == 0
    assert driver.state is State.STOPPED
    assert driver.renderer.calls == []
    assert sleeps == []
    assert driver.out.getvalue() == CLEAR_SCREEN


def test_other_keys_are_ignored():
    driver, sleeps = _driver(ord('x'), None, ord(' '), ord('q'))
    assert driver.run() == 0
    assert len(driver.renderer.calls) == 3
    assert len(sleeps) == 3


def test_quit_is_seen_within_one_iteration():
    driver, _ = _driver(None, ord('q'))
    driver.step()
    assert driver.state is State.RUNNING
    driver.step()
    assert driver.state is State.STOPPED
    assert driver.poller.polls == 2


def test_rotation_advances_by_fixed_steps():
    driver, _ = _driver(None, None, None, ord('q'))
    driver.run()
    calls = driver.renderer.calls
    assert calls[0] == (0.0, 0.0)
    assert calls[1] == pytest.approx((STEP_A, STEP_B))
    assert calls[2] == pytest.approx((2 * STEP_A, 2 * STEP_B))
    assert len(calls) == 3
    assert driver.rotation.a == pytest.approx(0.12)
    assert driver.rotation.b == pytest.approx(0.06)


def test_speed_factor_changes_sleep_not_angles():
    slow, slow_sleeps = _driver(None, None, ord('q'), speed=1.0)
    fast, fast_sleeps = _driver(None, None, ord('q'), speed=2.0)
    slow.run()
    fast.run()

    assert slow.renderer.calls == fast.renderer.calls
    assert slow.rotation.a == fast.rotation.a
    assert fast_sleeps == [s / 2 for s in slow_sleeps]
    assert slow_sleeps[0] == pytest.approx(0.033333)


def test_input_failure_stops_with_error(caplog):
    driver, sleeps = _driver(None, InputReadError("read stdin failed: boom"))
    with caplog.at_level(logging.ERROR):
        code = driver.run()
    assert code == EXIT_INPUT_ERROR
    assert code != 0
    assert driver.state is State.STOPPED
    assert len(driver.renderer.calls) == 1
    assert "read stdin failed" in caplog.text


def test_stopped_driver_does_not_resume():
    driver, _ = _driver(ord('q'))
    driver.run()
    driver.poller.keys = [None]
    driver.step()
    assert driver.state is State.STOPPED
    assert driver.renderer.calls == []


def test_frame_output_goes_to_stream():
    canv = Canvas()
    canv.plot(5, 3, 0.4, '@')

    class _Fixed:
        def render(self, a, b):
            return canv

    driver, _ = _driver(None, ord('q'), renderer=_Fixed())
    driver.run()
    out = driver.out.getvalue()
    assert out.startswith(CLEAR_SCREEN + CURSOR_HOME)
    assert resolve_palette("green")[2] + '@' + RESET in out


def test_blank_frame_layout():
    text = paint_frame(Canvas(), resolve_palette("red"))
    assert text == CURSOR_HOME + ('\n' + ' ' * 79) * 22 + '\n'
    assert '\x1b[38' not in text


def test_painted_glyphs_use_tier_colors():
    palette = resolve_palette("cyan")
    canv = Canvas()
    canv.plot(1, 1, 0.3, '.')
    canv.plot(2, 1, 0.3, '=')
    canv.plot(3, 1, 0.3, '#')
    text = paint_frame(canv, palette)

    row = text.split('\n')[2]
    assert row.startswith(palette[0] + '.' + RESET
                          + palette[1] + '=' + RESET
                          + palette[2] + '#' + RESET)
    assert text.count(RESET) == 3
    assert text.count('\n') == 23


def test_monochrome_frame_has_no_escapes():
    canv = Canvas()
    canv.plot(10, 10, 0.3, '$')
    text = paint_frame(canv)
    assert '\x1b[0m' not in text
    assert text.split('\n')[11][9] == '$'


def test_driver_respects_use_color():
    canv = Canvas()
    canv.plot(10, 10, 0.3, '$')

    class _Fixed:
        def render(self, a, b):
            return canv

    driver, _ = _driver(None, ord('q'), renderer=_Fixed(), use_color=False)
    driver.run()
    assert RESET not in driver.out.getvalue()
