#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/terminal.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import atexit
import errno
import logging
import os
import sys
import termios
from contextlib import contextmanager
from typing import Optional

logger = logging.getLogger(__name__)

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"

# read() reports these when a non-blocking descriptor simply has nothing yet
_NO_DATA_ERRNOS = (errno.EAGAIN, errno.EWOULDBLOCK)


class TerminalSetupError(Exception):
    """Terminal attributes could not be queried or changed."""


class InputReadError(Exception):
    """Reading from the input descriptor failed for a reason other than 'no data'."""


class RawModeHandle:
    """
    Owns the terminal attributes captured before raw mode was switched on.
    Passed back to disable(); restoring twice is a no-op.
    """
    __slots__ = ('fd', 'saved_attrs', 'out', 'active')

    def __init__(self, fd: int, saved_attrs, out):
        self.fd = fd
        self.saved_attrs = saved_attrs
        self.out = out
        self.active = True


def enable(fd: Optional[int] = None, out=None) -> RawModeHandle:
    """
    Put the terminal on ``fd`` into unbuffered, no-echo, non-blocking input
    mode and hide the cursor.

    Raises TerminalSetupError if the attributes cannot be read or written.
    """
    if fd is None:
        fd = sys.stdin.fileno()
    if out is None:
        out = sys.stdout

    try:
        saved = termios.tcgetattr(fd)
    except (termios.error, OSError) as exc:
        raise TerminalSetupError(f"tcgetattr failed: {exc}") from exc

    raw = list(saved)
    raw[6] = list(saved[6])
    # Echo, line buffering and signal keys (Ctrl+C etc.) off
    raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
    # Software flow control (Ctrl+S, Ctrl+Q) off
    raw[0] &= ~termios.IXON
    # read() returns immediately, with or without data
    raw[6][termios.VMIN] = 0
    raw[6][termios.VTIME] = 0

    try:
        termios.tcsetattr(fd, termios.TCSAFLUSH, raw)
    except (termios.error, OSError) as exc:
        raise TerminalSetupError(f"tcsetattr failed: {exc}") from exc

    out.write(HIDE_CURSOR)
    out.flush()
    return RawModeHandle(fd, saved, out)


def disable(handle: RawModeHandle):
    """
    Restore the attributes captured by enable() and show the cursor.
    A failed restore is logged, not raised; the cursor is shown either way.
    """
    if not handle.active:
        return
    handle.active = False
    try:
        termios.tcsetattr(handle.fd, termios.TCSAFLUSH, handle.saved_attrs)
    except (termios.error, OSError) as exc:
        logger.error("tcsetattr failed while restoring the terminal: %s", exc)
    finally:
        handle.out.write(SHOW_CURSOR)
        handle.out.flush()


@contextmanager
def raw_mode(fd: Optional[int] = None, out=None):
    """
    Scoped raw mode.  The terminal is restored when the block exits, and an
    atexit hook covers paths that never reach the end of the block.
    """
    handle = enable(fd, out)
    atexit.register(disable, handle)
    try:
        yield handle
    finally:
        disable(handle)
        atexit.unregister(disable)


class InputPoller:
    """Zero-timeout, single byte reads from an input descriptor."""

    def __init__(self, fd: Optional[int] = None):
        self.fd = sys.stdin.fileno() if fd is None else fd

    def poll_key(self) -> Optional[int]:
        """
        Return the next input byte, or None when nothing is waiting.
        Raises InputReadError for any other read failure.
        """
        try:
            data = os.read(self.fd, 1)
        except OSError as exc:
            if exc.errno in _NO_DATA_ERRNOS:
                return None
            raise InputReadError(f"read stdin failed: {exc}") from exc
        if not data:
            return None
        return data[0]
