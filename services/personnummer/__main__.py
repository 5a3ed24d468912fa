"""
Entry point for running the personnummer CLI as a module.

Usage:
    python -m services.personnummer validate 811218-9876
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
