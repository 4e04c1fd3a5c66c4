import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import responsive_slots
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from responsive_slots.catalog import MappingDimensionsLookup, StaticCatalogProvider
from responsive_slots.core.models import VariantCandidate


STYLE_URL = "/styles/{style}/{image}"
ORIGINAL_URL = "/files/{image}"


def _candidate(width, height, name=None, firm=True):
    """Helper to create a catalog candidate named after its dimensions."""
    return VariantCandidate(name or f"s{width}x{height}", width, height, firm=firm)


# Common test fixtures
@pytest.fixture
def wide_catalog():
    """~16:9 catalog with 160, 320 and 900 wide variants."""
    return [
        _candidate(160, 90),
        _candidate(320, 180),
        _candidate(900, 506),
    ]


@pytest.fixture
def make_provider():
    """Factory for a StaticCatalogProvider with optional natural dimensions."""
    def _make(candidates, dimensions=None):
        lookup = MappingDimensionsLookup(dimensions) if dimensions is not None else None
        return StaticCatalogProvider(
            candidates,
            style_url_template=STYLE_URL,
            original_url_template=ORIGINAL_URL,
            dimensions=lookup,
        )
    return _make


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a 1600x900 test image on disk."""
    img = Image.new("RGB", (1600, 900), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
