"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create temporary directory for tests."""
    test_dir = tmp_path / "bingwall_test"
    test_dir.mkdir(parents=True, exist_ok=True)
    yield test_dir


@pytest.fixture
def sample_record() -> dict:
    """Single image record as returned by HPImageArchive.aspx."""
    return {
        "startdate": "20150101",
        "fullstartdate": "201501011200",
        "enddate": "20150102",
        "url": "/th?id=X_640x480.jpg",
        "copyright": "c",
        "copyrightlink": "http://x",
    }


@pytest.fixture
def sample_response(sample_record: dict) -> dict:
    """Decoded archive response with two images."""
    second = dict(
        sample_record,
        startdate="20141231",
        fullstartdate="201412310800",
        enddate="20150101",
        url="/az/hprichbg/rb/Lighthouse_EN-US123_1920x1080.jpg",
        title="Lighthouse",
    )
    return {"images": [sample_record, second], "tooltips": {}}
