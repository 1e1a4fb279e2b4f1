#!/usr/bin/env python3
"""
Bank Accounts Demo Entry Point

Runs the savings / current account console scenario.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from bank_accounts.demo import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except ValueError as e:
        print(f"Error running demo: {e}")
        sys.exit(1)
