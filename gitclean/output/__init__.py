"""Terminal Output Formatting Package"""

import os
import re
import shutil
import sys
import textwrap
import threading


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    UNDERLINE = '\033[4m'
    REVERSE = '\033[7m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'
    GRAY = '\033[90m'
    BRIGHT_RED = '\033[91m'


# Closed set of named styles; anything else resolves to NEUTRAL_STYLE
STYLES = {
    'red': (Colors.RED,),
    'green': (Colors.GREEN,),
    'yellow': (Colors.YELLOW,),
    'blue': (Colors.BLUE,),
    'magenta': (Colors.MAGENTA,),
    'cyan': (Colors.CYAN,),
    'white': (Colors.WHITE,),
    'gray': (Colors.GRAY,),
    'bright_red': (Colors.BRIGHT_RED,),
    'dim': (Colors.DIM,),
    'bold': (Colors.BOLD,),
    'misspelled': (Colors.RED, Colors.UNDERLINE),
    'selected': (Colors.REVERSE,),
}
NEUTRAL_STYLE: tuple[str, ...] = ()

ANSI_RE = re.compile(r'\033\[[0-9;?]*[A-Za-z]')


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
ARROW = '→' if UNICODE_ENABLED else '->'
BULLET = '•' if UNICODE_ENABLED else '*'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED or not codes:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def style_codes(name: str | None) -> tuple[str, ...]:
    """Resolve a style name through the lookup table, neutral when unknown."""
    if not name:
        return NEUTRAL_STYLE
    return STYLES.get(name.lower(), NEUTRAL_STYLE)


def paint(text: str, name: str | None) -> str:
    """Apply a named style from STYLES."""
    return _colorize(text, *style_codes(name))


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning('⚠')} {warning(message)}" if UNICODE_ENABLED else f"[!] {message}")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences (colors and cursor movement)."""
    return ANSI_RE.sub('', text)


def _visible_len(line: str) -> int:
    return len(strip_ansi(line))


def print_box(text: str, title: str | None = None, color: str | None = None) -> None:
    """Print text inside a rounded box, wrapping long lines to the terminal."""
    term_width = shutil.get_terminal_size((80, 24)).columns
    # Box chrome takes 4 chars: "│ " + " │"
    max_width = max(int(term_width * 0.8), 60) - 4

    wrapped_lines = []
    for line in text.split('\n'):
        if _visible_len(line) > max_width:
            indent = '  ' if line.startswith('- ') else ''
            wrapped_lines.extend(textwrap.wrap(line, width=max_width, subsequent_indent=indent))
        else:
            wrapped_lines.append(line)

    content_width = max((_visible_len(line) for line in wrapped_lines), default=0)
    if title:
        content_width = max(content_width, len(title) + 2)

    if UNICODE_ENABLED:
        h, side, corners = '─', '│', ('╭', '╮', '╰', '╯')
    else:
        h, side, corners = '-', '|', ('+', '+', '+', '+')

    frame = (lambda s: paint(s, color)) if color else dim
    if title:
        label = f" {title} "
        left = (content_width + 2 - len(label)) // 2
        right = content_width + 2 - len(label) - left
        top = f"{corners[0]}{h * left}{label}{h * right}{corners[1]}"
    else:
        top = f"{corners[0]}{h * (content_width + 2)}{corners[1]}"
    bottom = f"{corners[2]}{h * (content_width + 2)}{corners[3]}"

    print(frame(top))
    for line in wrapped_lines:
        padding = ' ' * (content_width - _visible_len(line))
        print(f"{frame(side)} {line}{padding} {frame(side)}")
    print(frame(bottom))


class Spinner:
    """Animated spinner for long operations. Use as context manager."""
    FRAMES_UNICODE = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
    FRAMES_ASCII = ['-', '\\', '|', '/']

    def __init__(self, label: str = ""):
        self._label = label
        self._thread = None
        self._stop_event = threading.Event()
        self._frames = self.FRAMES_UNICODE if UNICODE_ENABLED else self.FRAMES_ASCII

    def _spin(self):
        idx = 0
        while not self._stop_event.is_set():
            frame = self._frames[idx % len(self._frames)]
            print(f'\r\033[K{frame} {self._label}', end='', flush=True)
            idx += 1
            self._stop_event.wait(0.08)

    def __enter__(self):
        if sys.stdout.isatty():
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *args):
        self._stop_event.set()
        if self._thread:
            self._thread.join()
        if sys.stdout.isatty():
            print('\r\033[K', end='', flush=True)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED", "STYLES", "NEUTRAL_STYLE",
    "CHECK", "CROSS", "ARROW", "BULLET",
    "style_codes", "paint", "strip_ansi", "ANSI_RE",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning", "print_box",
    "Spinner",
]
