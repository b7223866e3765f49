from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from projectsmith.resolver import StaticResolver  # noqa: E402


@pytest.fixture()
def resolver() -> StaticResolver:
    """Resolver for an empty host where no name is taken."""

    return StaticResolver()
