"""
lop shorten — turn a long URL into a short one.

  lop shorten https://example.com/some/long/path
  lop -e 7 shorten https://example.com      expire after a week
"""

from lop import terminal
from lop.api.helpers import status

from .output import print_result


def cmd_shorten(args, srv, options, term=terminal):
    status('shortening', enabled=not args.quiet)
    result = srv.shorten(options, args.url)
    print_result(result, quiet=args.quiet, qr=args.qr, term=term)
