"""Entry point for running gctx via: python3 -m gctx <command>"""

import sys

from .app.cli import main


if __name__ == "__main__":
    sys.exit(main())
