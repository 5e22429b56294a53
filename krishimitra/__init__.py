"""
KrishiMitra fertilizer & irrigation advisory — core package.
"""

from krishimitra.catalog import (
    CropCategory,
    CropVariety,
    lookup_variety,
    lookup_category,
    varieties_of,
    categories_of,
)
from krishimitra.engine import compute_recommendation
from krishimitra.errors import (
    AdvisoryError,
    NotFoundError,
    InvalidInputError,
    UpstreamUnavailableError,
)
from krishimitra.models import FertilizerTier, Recommendation, WeatherSnapshot

__all__ = [
    "CropCategory",
    "CropVariety",
    "lookup_variety",
    "lookup_category",
    "varieties_of",
    "categories_of",
    "compute_recommendation",
    "AdvisoryError",
    "NotFoundError",
    "InvalidInputError",
    "UpstreamUnavailableError",
    "FertilizerTier",
    "Recommendation",
    "WeatherSnapshot",
]
