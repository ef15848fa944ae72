"""Pytest configuration and fixtures."""

import io
import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from transdict import config as cfg
from transdict.schema import DictCollection, Dictionary
from transdict.shell import Shell


@pytest.fixture(autouse=True)
def fallback_config(monkeypatch):
    """Ignore any config.json lying around; use the hardcoded defaults."""
    monkeypatch.setattr(cfg, "_config", {"defaults": dict(cfg.FALLBACK_DEFAULTS)})


@pytest.fixture
def sample_dictionary_content():
    """Sample dictionary file content."""
    return """cat кот кошка
dog пёс

house   дом
lonely
"""


@pytest.fixture
def dicts():
    """Empty collection."""
    return DictCollection()


@pytest.fixture
def animals():
    """Small English -> Russian dictionary."""
    return Dictionary({
        "cat": {"кот", "кошка"},
        "dog": {"пёс", "собака"},
    })


@pytest.fixture
def run(dicts):
    """Run command lines against `dicts` and return printed lines."""

    def _run(*lines: str) -> list[str]:
        out = io.StringIO()
        Shell(dicts, out=out).run(lines)
        return out.getvalue().splitlines()

    return _run
