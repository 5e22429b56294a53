"""
Crop catalog: categories (base NPK, moisture threshold) and varieties (pH band).

Built once at import from the tables in config; read-only afterwards.
Unknown ids raise NotFoundError, which callers treat as a user-input error.
"""

from dataclasses import dataclass

import pandas as pd

from krishimitra.config import CROP_CATEGORY_TABLE, CROP_VARIETY_TABLE
from krishimitra.errors import NotFoundError


@dataclass(frozen=True)
class CropCategory:
    id: str
    base_nitrogen: float
    base_phosphorus: float
    base_potassium: float
    moisture_threshold: float


@dataclass(frozen=True)
class CropVariety:
    id: str
    category: str
    name: str
    min_ph: float
    max_ph: float


def _build_categories() -> dict[str, CropCategory]:
    return {
        cid: CropCategory(
            id=cid,
            base_nitrogen=float(row["n"]),
            base_phosphorus=float(row["p"]),
            base_potassium=float(row["k"]),
            moisture_threshold=float(row["moisture"]),
        )
        for cid, row in CROP_CATEGORY_TABLE.items()
    }


def _build_varieties(categories: dict[str, CropCategory]) -> dict[str, CropVariety]:
    varieties = {}
    for vid, category, name, lo, hi in CROP_VARIETY_TABLE:
        if category not in categories:
            raise ValueError(f"Variety '{vid}' refers to unknown category '{category}'")
        if lo > hi:
            raise ValueError(f"Variety '{vid}' has min pH {lo} above max pH {hi}")
        varieties[vid] = CropVariety(id=vid, category=category, name=name, min_ph=lo, max_ph=hi)
    return varieties


# dicts preserve declaration order
_CATEGORIES = _build_categories()
_VARIETIES = _build_varieties(_CATEGORIES)


def lookup_variety(variety_id: str) -> CropVariety:
    try:
        return _VARIETIES[variety_id]
    except KeyError:
        raise NotFoundError(f"Unknown crop variety '{variety_id}'") from None


def lookup_category(category_id: str) -> CropCategory:
    try:
        return _CATEGORIES[category_id]
    except KeyError:
        raise NotFoundError(f"Unknown crop category '{category_id}'") from None


def varieties_of(category_id: str) -> list[CropVariety]:
    """Varieties of one category, in declaration order."""
    lookup_category(category_id)
    return [v for v in _VARIETIES.values() if v.category == category_id]


def categories_of() -> list[CropCategory]:
    return list(_CATEGORIES.values())


def all_varieties() -> list[CropVariety]:
    return list(_VARIETIES.values())


def catalog_frame() -> pd.DataFrame:
    """One row per variety joined with its category constants (for display / export)."""
    rows = []
    for v in _VARIETIES.values():
        c = _CATEGORIES[v.category]
        rows.append({
            "variety_id":         v.id,
            "variety":            v.name,
            "category":           v.category,
            "min_ph":             v.min_ph,
            "max_ph":             v.max_ph,
            "base_nitrogen":      c.base_nitrogen,
            "base_phosphorus":    c.base_phosphorus,
            "base_potassium":     c.base_potassium,
            "moisture_threshold": c.moisture_threshold,
        })
    return pd.DataFrame(rows)
