"""Raw terminal access for interactive prompts.

cbreak-mode keyboard input with escape-sequence decoding, plus the few
output operations the prompt needs. Unix uses termios and select; Windows
falls back to msvcrt polling.
"""

import codecs
import logging
import os
import shutil
import sys
import time
from contextlib import contextmanager

from gitclean.prompts.render import DEFAULT_TERMINAL_WIDTH

_IS_WINDOWS = os.name == 'nt'

if _IS_WINDOWS:
    import msvcrt
else:
    import select
    import termios

logger = logging.getLogger(__name__)

# Wait this long after a bare ESC for the rest of an escape sequence
ESCAPE_TIMEOUT = 0.025


class Key:
    """Named constants for special keys. Printable keys are plain str."""
    UP = 'key_up'
    DOWN = 'key_down'
    LEFT = 'key_left'
    RIGHT = 'key_right'
    HOME = 'key_home'
    END = 'key_end'
    BACKSPACE = 'key_backspace'
    DELETE = 'key_delete'
    ENTER = 'key_enter'
    ESCAPE = 'key_escape'
    INTERRUPT = 'key_interrupt'


# Multiple entries per key to cover xterm, rxvt, tmux and application mode
ESCAPE_SEQUENCES = {
    '\x1b[A': Key.UP,
    '\x1bOA': Key.UP,
    '\x1b[B': Key.DOWN,
    '\x1bOB': Key.DOWN,
    '\x1b[C': Key.RIGHT,
    '\x1bOC': Key.RIGHT,
    '\x1b[D': Key.LEFT,
    '\x1bOD': Key.LEFT,
    '\x1b[H': Key.HOME,
    '\x1bOH': Key.HOME,
    '\x1b[1~': Key.HOME,
    '\x1b[7~': Key.HOME,
    '\x1b[F': Key.END,
    '\x1bOF': Key.END,
    '\x1b[4~': Key.END,
    '\x1b[8~': Key.END,
    '\x1b[3~': Key.DELETE,
}

CONTROL_KEYS = {
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
    '\x03': Key.INTERRUPT,
    '\x01': Key.HOME,  # Ctrl-A
    '\x05': Key.END,   # Ctrl-E
}

# msvcrt reports special keys as a '\x00' or '\xe0' prefix plus a scan code
WINDOWS_SCAN_CODES = {
    'H': Key.UP,
    'P': Key.DOWN,
    'K': Key.LEFT,
    'M': Key.RIGHT,
    'G': Key.HOME,
    'O': Key.END,
    'S': Key.DELETE,
}

_LONGEST_SEQUENCE = max(len(seq) for seq in ESCAPE_SEQUENCES)


def _is_sequence_prefix(fragment: str) -> bool:
    return any(seq.startswith(fragment) for seq in ESCAPE_SEQUENCES)


def parse_keys(data: str) -> list[str]:
    """Split a chunk of terminal input into keys.

    Known escape sequences become Key constants, a lone or unrecognised
    ESC becomes Key.ESCAPE, control characters map through CONTROL_KEYS and
    other control characters are dropped.
    """
    keys = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == '\x1b':
            for length in range(_LONGEST_SEQUENCE, 1, -1):
                seq = data[i:i + length]
                if seq in ESCAPE_SEQUENCES:
                    keys.append(ESCAPE_SEQUENCES[seq])
                    i += length
                    break
            else:
                keys.append(Key.ESCAPE)
                i += 1
            continue
        if ch in CONTROL_KEYS:
            keys.append(CONTROL_KEYS[ch])
            # Treat CRLF as a single Enter
            if ch == '\r' and data[i + 1:i + 2] == '\n':
                i += 1
        elif ch.isprintable():
            keys.append(ch)
        i += 1
    return keys


class RawTerminal:
    """The process's controlling terminal in cbreak mode.

    Use raw_mode() as a context manager; the previous settings are restored
    on every exit path, including exceptions.
    """

    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._pending: list[str] = []
        self._decoder = codecs.getincrementaldecoder('utf-8')('replace')
        self._old_settings = None

    @property
    def is_interactive(self) -> bool:
        return self._stdin.isatty() and self._stdout.isatty()

    @contextmanager
    def raw_mode(self):
        self._enter_raw()
        try:
            yield self
        finally:
            self._restore()

    def _enter_raw(self) -> None:
        if _IS_WINDOWS or not self._stdin.isatty():
            return
        fd = self._stdin.fileno()
        self._old_settings = termios.tcgetattr(fd)
        new = termios.tcgetattr(fd)
        # LFLAG: no canonical mode, no echo, no signals; Ctrl-C arrives as \x03
        new[3] &= ~(termios.ICANON | termios.ECHO | termios.IEXTEN | termios.ISIG)
        # IFLAG: deliver CR untranslated, no flow control
        new[1] &= ~(termios.IXON | termios.IXOFF | termios.ICRNL | termios.INLCR | termios.IGNCR)
        new[6][termios.VMIN] = 1
        new[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSANOW, new)
        logger.debug("Terminal switched to cbreak mode")

    def _restore(self) -> None:
        if self._old_settings is None:
            return
        try:
            termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, self._old_settings)
            logger.debug("Terminal settings restored")
        finally:
            self._old_settings = None
            self._pending.clear()

    def width(self) -> int:
        columns = shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns
        return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def read_key(self, timeout: float | None = None) -> str | None:
        """Next key, or None if timeout seconds pass without input."""
        if self._pending:
            return self._pending.pop(0)
        if _IS_WINDOWS:
            return self._read_key_windows(timeout)
        return self._read_key_unix(timeout)

    def _wait_readable(self, timeout: float | None) -> bool:
        ready, _, _ = select.select([self._stdin], [], [], timeout)
        return bool(ready)

    def _read_key_unix(self, timeout: float | None) -> str | None:
        fd = self._stdin.fileno()
        deadline = None if timeout is None else time.monotonic() + timeout
        while not self._pending:
            remaining = None if deadline is None else max(deadline - time.monotonic(), 0)
            if not self._wait_readable(remaining):
                return None
            data = self._decoder.decode(os.read(fd, 1024))
            # A partial escape sequence at the end of the read: give the
            # rest of it a moment to arrive before deciding it was bare ESC
            while self._ends_with_partial_sequence(data) and self._wait_readable(ESCAPE_TIMEOUT):
                data += self._decoder.decode(os.read(fd, 1024))
            self._pending.extend(parse_keys(data))
        return self._pending.pop(0)

    @staticmethod
    def _ends_with_partial_sequence(data: str) -> bool:
        idx = data.rfind('\x1b')
        if idx < 0:
            return False
        tail = data[idx:]
        return tail not in ESCAPE_SEQUENCES and _is_sequence_prefix(tail)

    def _read_key_windows(self, timeout: float | None) -> str | None:
        deadline = None if timeout is None else time.monotonic() + timeout
        while not msvcrt.kbhit():
            if deadline is not None and time.monotonic() >= deadline:
                return None
            time.sleep(0.01)
        ch = msvcrt.getwch()
        if ch in ('\x00', '\xe0'):
            return WINDOWS_SCAN_CODES.get(msvcrt.getwch())
        if ch == '\x1b':
            return Key.ESCAPE
        keys = parse_keys(ch)
        return keys[0] if keys else None
