"""
Package entry point.

Allows running: python -m gmaps_services geocode --address "Stephansdom, Wien"
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
