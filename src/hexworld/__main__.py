"""Allow ``python -m hexworld``."""

import sys

from .terrain.cli import main

if __name__ == "__main__":
    sys.exit(main())
