"""
Entry point for running framelog as a Python module.

    python -m framelog demo
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
