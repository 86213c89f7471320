#!/usr/bin/env python3
"""torrentapi search CLI entry point."""

import sys

from torrentapi.cli import main

if __name__ == "__main__":
    sys.exit(main())
