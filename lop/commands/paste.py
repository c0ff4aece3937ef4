"""
lop paste — host a block of text.

  lop paste                    paste the clipboard (asks first)
  lop paste -f script.py       paste a file (asks first)
  lop paste -c 'print(1)'      paste a literal string (never asks)
  lop paste -y                 skip the confirmation
"""

from lop import terminal
from lop.api.helpers import status
from lop.errors import IoError
from lop.format import blue, italic

from .output import print_result


def resolve_content(args, term=terminal):
    """
    Return (content, needs_confirmation).

    A file wins over --code, which wins over the clipboard. Passing --code
    means the user typed the text themselves, so it is never confirmed, even
    when a file is given too.
    """
    if args.filename:
        content = read_text_file(args.filename)
    elif args.code is not None:
        content = args.code
    else:
        content = term.read_clipboard()
    return content, not args.force and args.code is None


def read_text_file(path):
    try:
        with open(path, encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise IoError(f'{path} is not valid UTF-8 text.') from e
    except OSError as e:
        raise IoError(f'Could not read {path}: {e.strerror or e}') from e


def cmd_paste(args, srv, options, term=terminal):
    content, needs_confirmation = resolve_content(args, term)

    if needs_confirmation:
        print(blue('You are about to send the following:'))
        print(italic(content))
        if not term.confirm('Do you want to continue?'):
            return

    status('pasting', enabled=not args.quiet)
    result = srv.paste(options, content, '')
    print_result(result, quiet=args.quiet, qr=args.qr, term=term)
