#!/usr/bin/env python3
"""
Caltrain Status - Command Line Application
Reads a saved Caltrain real-time status page without installing the package.
"""

import sys
from pathlib import Path

# Add the src directory to the Python path
src_path = str(Path(__file__).parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from caltrain.cli import main

if __name__ == "__main__":
    sys.exit(main())
