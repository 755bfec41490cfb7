"""Pytest configuration to ensure the package under src/ is importable.
This keeps test imports like `from mlhub...` working without installing.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root (for `tests.*`) and `src/` (for `mlhub`) to sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
for p in (PROJECT_ROOT, PROJECT_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

# Import shared fixtures so they're available to all tests
# This allows using fixtures from `tests/fixtures/conftest.py` project-wide
from tests.fixtures.conftest import *  # noqa: F401,F403,E402
