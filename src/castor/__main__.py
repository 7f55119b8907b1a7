"""Allow ``python -m castor``."""

import sys

from castor.cli import main

if __name__ == "__main__":
    sys.exit(main())
