"""Entry point for running alcomonitor as a module.

Usage:
    python -m alcomonitor
"""

import sys

from alcomonitor.app import main

if __name__ == "__main__":
    sys.exit(main())
