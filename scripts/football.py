#!/usr/bin/env python3
"""
football-cli Runner

USE: Runs the football command from a source checkout without installing
HOW IT WORKS: Puts the project root on sys.path and calls the click entry point

Examples:
    python scripts/football.py standings --comp bl
    python scripts/football.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from football_cli.cli import main

if __name__ == '__main__':
    main()
