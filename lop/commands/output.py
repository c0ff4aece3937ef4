"""
Rendering of a ServiceResult.

  -Q         QR code first, then the decorated URL
  -q         bare URL only (unless -Q is also given)
  default    bold URL, plus an "Expires" line when the server set one
"""

from lop import terminal
from lop.format import format_expiry, green, plain_red, red


def print_result(result, quiet=False, qr=False, term=terminal):
    if qr:
        try:
            term.render_qr(result.url)
        except Exception:
            print(red('Failed to render QR code'))

    if quiet and not qr:
        print(result.url)
        return

    print(green(result.url))
    if result.expires is not None:
        print(f'  {plain_red("Expires")} {plain_red(format_expiry(result.expires))}')
