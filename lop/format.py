"""
Formatting helpers: expiry dates and minimal ANSI color.

Color is only emitted when the target stream's underlying file descriptor is
a real TTY, so nothing leaks into pipes or files. --no-color turns it off for
the whole run.
"""

import os
import sys

_color_enabled = True


def set_color(enabled: bool) -> None:
    global _color_enabled
    _color_enabled = enabled


# ── Dates ─────────────────────────────────────────────────────────────────────

def format_expiry(dt):
    """Aware datetime → '01 Jan 2024 13:05' in local time."""
    return dt.astimezone().strftime('%d %b %Y %H:%M')


# ── ANSI color ─────────────────────────────────────────────────────────────────
#
# os.isatty(fd) on the underlying file descriptor rather than stream.isatty()
# so wrapped streams still report the real terminal.

def _ansi_on(stream=None) -> bool:
    if not _color_enabled:
        return False
    target = stream if stream is not None else sys.stdout
    try:
        return os.isatty(target.fileno())
    except Exception:
        return getattr(target, 'isatty', lambda: False)()


def _c(code: str, text: str, stream=None) -> str:
    if _ansi_on(stream):
        return f'\033[{code}m{text}\033[0m'
    return text


# ── Color palette ─────────────────────────────────────────────────────────────

def green(text, stream=None):  return _c('1;32', text, stream)   # bold green
def red(text, stream=None):    return _c('1;31', text, stream)   # bold red
def blue(text, stream=None):   return _c('1;34', text, stream)   # bold blue
def italic(text, stream=None): return _c('3;34', text, stream)   # blue italic
def dim(text, stream=None):    return _c('2',    text, stream)   # faint/dim
def plain_red(text, stream=None): return _c('31', text, stream)
