"""Pytest configuration.

The parser lives in the flat `src.*` namespace (`src.rfc822`, `src.config`). Putting the repository
root on `sys.path` lets `pytest` import it without `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
