"""Allow ``python -m remixer``."""

import sys

from remixer.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
