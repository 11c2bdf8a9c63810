"""
Root conftest - shared pytest configuration.
Ensures the bloglist package is importable when running pytest from the
project root, and keeps bcrypt cheap for tests.
"""
import os
import sys
from pathlib import Path

# Ensure project root is in path for 'from bloglist...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# Minimum bcrypt cost; must be set before Settings is first built
os.environ.setdefault("BCRYPT_ROUNDS", "4")
