"""
Weekly layout entry point.
Lays out a JSON export of events and prints (or saves) the result.
"""

import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from weekplanner.cli import main

if __name__ == "__main__":
    sys.exit(main())
