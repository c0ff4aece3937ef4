"""
lop upload — upload a file as-is.

  lop upload notes.txt
  lop -E upload build.log        never expire
"""

from lop import config, terminal
from lop.api.helpers import status
from lop.errors import IoError

from .output import print_result


def read_file_bytes(path):
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise IoError(f'Could not read {path}: {e.strerror or e}') from e


def cmd_upload(args, srv, options, term=terminal):
    data = read_file_bytes(args.filename)
    status('uploading', enabled=not args.quiet)
    result = srv.upload(options, data, args.filename, config.UPLOAD_MIME_TYPE)
    print_result(result, quiet=args.quiet, qr=args.qr, term=term)
