"""Pytest configuration for test environment setup.

- Ensures the project root is available on ``sys.path`` for imports.
"""

import sys
from pathlib import Path

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)
