"""
lop — shorten links, paste code and upload files from the command line.

  lop shorten https://example.com/long    short link   →  https://vh7.uk/abc1
  lop paste                               paste the clipboard
  lop paste -f script.py                  paste a file
  lop upload notes.txt                    upload a file
"""

import argparse
import logging
import sys
from datetime import datetime, timedelta, timezone

from lop import api, config
from lop.api.helpers import err
from lop.commands import cmd_paste, cmd_shorten, cmd_upload
from lop.errors import LopError
from lop.format import red, set_color

logger = logging.getLogger(__name__)

COMMANDS = {
    'shorten': cmd_shorten,
    'paste':   cmd_paste,
    'upload':  cmd_upload,
}


def _positive_days(value):
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'not a number of days: {value!r}')
    if days < 1:
        raise argparse.ArgumentTypeError('expiry must be at least 1 day')
    try:
        datetime.now(timezone.utc) + timedelta(days=days)
    except OverflowError:
        raise argparse.ArgumentTypeError(f'expiry of {days} days is too far in the future')
    return days


def _add_global_flags(p, suppress=False):
    """
    Flags accepted both before and after the subcommand.

    Subparser copies default to SUPPRESS so they only overwrite the top-level
    value when actually given.
    """
    def default(value):
        return argparse.SUPPRESS if suppress else value

    p.add_argument('-q', '--quiet', action='store_true', default=default(False),
                   help='Only show the final output')
    p.add_argument('-Q', '--qr', action='store_true', default=default(False),
                   help='Show the output as a QR code')
    p.add_argument('-e', '--expire', dest='expire_days', type=_positive_days,
                   metavar='DAYS', default=default(None),
                   help=f'Expire after the given number of days '
                        f'(default: {config.DEFAULT_EXPIRY_DAYS})')
    p.add_argument('-E', '--no-expire', action='store_true', default=default(False),
                   help='Do not expire')
    p.add_argument('--api-url', default=default(config.DEFAULT_API_URL), metavar='URL',
                   help=f'API base URL (default: {config.DEFAULT_API_URL})')
    p.add_argument('--no-color', action='store_true', default=default(False),
                   help='Disable colored output')
    p.add_argument('-v', '--verbose', action='store_true', default=default(False),
                   help='Log HTTP requests to stderr')


def build_parser():
    from lop import __version__

    parser = argparse.ArgumentParser(
        prog='lop',
        description='Shorten links, paste code and upload files.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
expiry:
  Everything expires after 29 days unless told otherwise.
  -e 7        expire after a week
  -E          never expire

examples:
  lop shorten https://example.com/a/very/long/path
  lop -q paste -c 'print("hi")'     bare URL only, handy in scripts
  lop -Q upload notes.txt           show a QR code for your phone
""",
    )
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    _add_global_flags(parser)

    sub = parser.add_subparsers(dest='command')

    p_shorten = sub.add_parser('shorten', help='Shorten long URLs')
    p_shorten.add_argument('url', help='The URL to shorten')
    _add_global_flags(p_shorten, suppress=True)

    p_paste = sub.add_parser('paste', help='Upload code')
    p_paste.add_argument('-f', '--filename', default=None,
                         help='The path to a file to create a paste from')
    p_paste.add_argument('-c', '--code', default=None,
                         help='A string to create a paste from')
    p_paste.add_argument('-y', dest='force', action='store_true',
                         help='Skip confirmation before pasting from clipboard or file')
    _add_global_flags(p_paste, suppress=True)

    p_upload = sub.add_parser('upload', help='Upload file')
    p_upload.add_argument('filename', help='The file to upload')
    _add_global_flags(p_upload, suppress=True)

    return parser


def _setup_logging(verbose):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger('lop').setLevel(level)


def _handle_error(e):
    logger.debug('command failed', exc_info=e)
    err(f'{red("Something has gone wrong:", stream=sys.stderr)} {e}')


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    _setup_logging(args.verbose)
    set_color(not args.no_color)

    try:
        options = config.options_from_args(args)
        with api.get_service(config.DEFAULT_SERVICE, api_url=args.api_url) as srv:
            COMMANDS[args.command](args, srv, options)
    except LopError as e:
        _handle_error(e)
        return 1
    except KeyboardInterrupt:
        print('\n  Aborted.', file=sys.stderr)
        return 130
    return 0


if __name__ == '__main__':
    sys.exit(main())
