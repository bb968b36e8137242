"""Shared fixtures and path setup for the test suite."""

import sys
from pathlib import Path

import pytest

# Mirror the sys.path setup used by the pipeline scripts
_APP = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_APP / "src"))
sys.path.insert(0, str(_APP / "scripts"))


# ---------------------------------------------------------------------------
# Sample metadata payload, shaped like the REST API response
# ---------------------------------------------------------------------------

@pytest.fixture
def toc_payload():
    return {
        "toc": {
            "title": "Contents",
            "entries": [
                {"level": 1, "section": 1, "number": "1", "anchor": "History", "html": "History"},
                {"level": 2, "section": 2, "number": "1.1", "anchor": "Origins", "html": "<i>Origins</i>"},
                {"level": 2, "section": 3, "number": "1.2", "anchor": "Growth", "html": "Growth"},
                {"level": 1, "section": 4, "number": "2", "anchor": "See_also", "html": "See also"},
            ],
        },
        "revision": "1234567",
        "tid": "abc-def",
    }
