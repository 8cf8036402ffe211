from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def make_request():
    """Build a ``GenerationRequest`` that defaults to ``basic.js``."""

    from suitegen.config import GenerationRequest

    def factory(**overrides):
        overrides.setdefault("filename", "basic.js")
        return GenerationRequest(**overrides)

    return factory
