"""
Module execution entry point.

Allows running with: python -m sslserver_cli
"""

import sys
from sslserver_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
