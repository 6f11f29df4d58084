"""Entry point for running ccparse directly.

Usage:
    python -m ccparse MESSAGE_FILE
"""

import sys

from ccparse.cli import main

if __name__ == "__main__":
    sys.exit(main())
