"""
Value types passed between the advisory core and its callers.
All are immutable; a Recommendation is created per request and discarded after use.
"""

from dataclasses import dataclass, asdict
from enum import Enum


class FertilizerTier(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for a location, supplied by the weather provider or the user."""
    temperature_c: float
    rainfall_mm: float
    humidity_pct: float
    soil_moisture_pct: float
    description: str = ""
    location: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> "WeatherSnapshot":
        return cls(
            temperature_c=d["temperature_c"],
            rainfall_mm=d["rainfall_mm"],
            humidity_pct=d["humidity_pct"],
            soil_moisture_pct=d["soil_moisture_pct"],
            description=d.get("description") or "",
            location=d.get("location") or "",
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class NPKDosage:
    nitrogen_kg_ha: int
    phosphorus_kg_ha: int
    potassium_kg_ha: int

    @property
    def total(self) -> int:
        return self.nitrogen_kg_ha + self.phosphorus_kg_ha + self.potassium_kg_ha


@dataclass(frozen=True)
class FertilizerEstimate:
    tier: FertilizerTier
    npk: NPKDosage


@dataclass(frozen=True)
class CompatibilityResult:
    is_compatible: bool
    optimal_range: tuple[float, float]


@dataclass(frozen=True)
class Recommendation:
    fertilizer_tier: FertilizerTier
    npk: NPKDosage
    irrigation_needed: bool
    variety_id: str = ""
    category_id: str = ""
    soil_ph: float = 0.0
    compatibility: CompatibilityResult | None = None
    explanation: str = ""

    def to_dict(self) -> dict:
        """JSON-ready representation (tier as its label, range as a list)."""
        compat = None
        if self.compatibility is not None:
            compat = {
                "is_compatible": self.compatibility.is_compatible,
                "optimal_range": list(self.compatibility.optimal_range),
            }
        return {
            "variety_id":        self.variety_id,
            "category_id":       self.category_id,
            "soil_ph":           self.soil_ph,
            "fertilizer_tier":   self.fertilizer_tier.value,
            "npk": {
                "nitrogen_kg_ha":   self.npk.nitrogen_kg_ha,
                "phosphorus_kg_ha": self.npk.phosphorus_kg_ha,
                "potassium_kg_ha":  self.npk.potassium_kg_ha,
            },
            "irrigation_needed": self.irrigation_needed,
            "compatibility":     compat,
            "explanation":       self.explanation,
        }
