"""Allow ``python -m chesscodec``."""

import sys

from chesscodec.cli import main

if __name__ == "__main__":
    sys.exit(main())
