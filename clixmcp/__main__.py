"""Allow running as ``python -m clixmcp``."""

import sys

from clixmcp.cli import main

if __name__ == "__main__":
    sys.exit(main())
