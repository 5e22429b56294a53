"""
Crop catalog and pH compatibility tests.
Run from project root: python -m pytest tests/test_catalog.py -v
"""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from krishimitra.catalog import (
    CropVariety,
    all_varieties,
    catalog_frame,
    categories_of,
    lookup_category,
    lookup_variety,
    varieties_of,
)
from krishimitra.compatibility import check_compatibility
from krishimitra.config import CROP_VARIETY_TABLE
from krishimitra.errors import InvalidInputError, NotFoundError


def test_categories_in_declaration_order():
    assert [c.id for c in categories_of()] == ["rice", "wheat", "maize", "jute", "potato", "banana"]


def test_category_constants():
    rice = lookup_category("rice")
    assert (rice.base_nitrogen, rice.base_phosphorus, rice.base_potassium) == (80, 40, 40)
    assert rice.moisture_threshold == 70
    assert lookup_category("wheat").moisture_threshold == 45
    assert lookup_category("maize").moisture_threshold == 50
    assert lookup_category("jute").moisture_threshold == 60
    assert lookup_category("potato").moisture_threshold == 55


def test_lookup_variety_has_explicit_category():
    v = lookup_variety("rice_miniket")
    assert v.category == "rice"
    assert v.name == "Miniket"
    assert v.min_ph <= v.max_ph


def test_unknown_ids_raise_not_found():
    with pytest.raises(NotFoundError):
        lookup_variety("rice_unknown")
    with pytest.raises(NotFoundError):
        lookup_category("cotton")
    with pytest.raises(NotFoundError):
        varieties_of("cotton")


def test_varieties_of_preserves_order():
    """Varieties come back in table order and all belong to the category."""
    expected = [vid for vid, cat, *_ in CROP_VARIETY_TABLE if cat == "rice"]
    got = varieties_of("rice")
    assert [v.id for v in got] == expected
    assert all(v.category == "rice" for v in got)


def test_every_category_has_varieties():
    for c in categories_of():
        assert len(varieties_of(c.id)) >= 1, c.id
    assert len(all_varieties()) == len(CROP_VARIETY_TABLE)


def test_catalog_frame_shape():
    df = catalog_frame()
    assert len(df) == len(CROP_VARIETY_TABLE)
    assert {"variety_id", "category", "min_ph", "max_ph", "moisture_threshold"} <= set(df.columns)


def test_compatibility_inclusive_bounds():
    """min 6.0 / max 6.8: both ends compatible, just outside is not."""
    v = CropVariety(id="test_variety", category="wheat", name="Test", min_ph=6.0, max_ph=6.8)
    assert check_compatibility(v, 6.0).is_compatible is True
    assert check_compatibility(v, 5.99).is_compatible is False
    assert check_compatibility(v, 6.8).is_compatible is True
    assert check_compatibility(v, 6.81).is_compatible is False
    assert check_compatibility(v, 6.4).optimal_range == (6.0, 6.8)


def test_compatibility_on_catalog_variety():
    prodip = lookup_variety("wheat_prodip")
    assert check_compatibility(prodip, 6.0).is_compatible is True
    assert check_compatibility(prodip, 5.99).is_compatible is False


def test_compatibility_rejects_invalid_ph():
    with pytest.raises(InvalidInputError):
        check_compatibility(lookup_variety("rice_miniket"), 10.0)


if __name__ == "__main__":
    import subprocess
    sys.exit(subprocess.call([sys.executable, "-m", "pytest", __file__, "-v", "-s"]))
