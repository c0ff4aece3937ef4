"""
Terminal collaborators: clipboard, yes/no confirmation and QR rendering.

Commands receive these as plain callables so tests can swap in fakes:

  read_clipboard() -> str
  confirm(prompt) -> bool
  render_qr(text) -> None      raises on failure
"""

import sys

import pyperclip
import qrcode

from lop.errors import IoError


def read_clipboard():
    """Return the system clipboard's text. Raises IoError if unavailable."""
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        raise IoError(f'Could not read the clipboard: {e}') from e
    if not text:
        raise IoError('The clipboard is empty.')
    return text


def confirm(prompt):
    """Ask a yes/no question on the terminal. Anything but y/yes declines."""
    try:
        answer = input(f'  {prompt} (y/n) [n]: ').strip().lower()
    except EOFError:
        print()
        return False
    return answer in ('y', 'yes')


def render_qr(text, out=None):
    """Print ``text`` as a QR code made of block characters."""
    qr = qrcode.QRCode(border=1)
    qr.add_data(text)
    qr.make(fit=True)
    qr.print_ascii(out=out or sys.stdout, invert=True)
