#!/usr/bin/env python3
"""Console entry point for the CMS."""

import sys

from cms.console import main

if __name__ == "__main__":
    sys.exit(main())
