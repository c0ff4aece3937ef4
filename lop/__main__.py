import sys

from lop.lop import main

if __name__ == '__main__':
    sys.exit(main())
