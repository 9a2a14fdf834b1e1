import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from meadcalc.errors import InvalidInput, InvalidSweetness
from meadcalc.presets import (
    ABV_FACTOR,
    GAL_PER_10_LBS_HONEY,
    GRAVITY_POINTS_PER_LB,
    KG_TO_LBS,
    L_PER_KG_HONEY,
    L_TO_GAL,
    OG_CEILING,
)

logger = logging.getLogger(__name__)


class SweetnessLevel(Enum):
    DRY = "Dry"
    SEMI_SWEET = "Semi-Sweet"
    SWEET = "Sweet"
    DESSERT = "Dessert"

    @property
    def final_gravity(self) -> float:
        return FINAL_GRAVITY[self]

    @classmethod
    def from_label(cls, label: str) -> "SweetnessLevel":
        key = str(label).strip().lower()
        for level in cls:
            if level.value.lower() == key:
                return level
        raise InvalidSweetness(label)


FINAL_GRAVITY = {
    SweetnessLevel.DRY: 1.000,
    SweetnessLevel.SEMI_SWEET: 1.010,
    SweetnessLevel.SWEET: 1.020,
    SweetnessLevel.DESSERT: 1.030,
}


class FermentationMode(Enum):
    STANDARD = "Standard"
    FORCED_DRY = "Forced-Dry"

    @classmethod
    def from_label(cls, label) -> "FermentationMode":
        if isinstance(label, cls):
            return label
        key = str(label).strip().lower()
        if key not in _MODE_ALIASES:
            raise InvalidInput(f"Invalid selection for yeast method: {label!r}.")
        return _MODE_ALIASES[key]


class UnitSystem(Enum):
    US_IMPERIAL = "US Imperial"
    METRIC = "Metric"

    @classmethod
    def from_label(cls, label) -> "UnitSystem":
        if isinstance(label, cls):
            return label
        key = str(label).strip().lower()
        if key not in _UNIT_ALIASES:
            raise InvalidInput(f"Invalid unit selection: {label!r}.")
        return _UNIT_ALIASES[key]

    @property
    def volume_unit(self) -> str:
        return "gallons" if self is UnitSystem.US_IMPERIAL else "liters"

    @property
    def mass_unit(self) -> str:
        return "lbs" if self is UnitSystem.US_IMPERIAL else "kg"


# Console menu digits and the names used by both front ends
_MODE_ALIASES = {
    "1": FermentationMode.STANDARD,
    "standard": FermentationMode.STANDARD,
    "2": FermentationMode.FORCED_DRY,
    "forced-dry": FermentationMode.FORCED_DRY,
    "forced_dry": FermentationMode.FORCED_DRY,
    "turbo": FermentationMode.FORCED_DRY,
}

_UNIT_ALIASES = {
    "1": UnitSystem.US_IMPERIAL,
    "us": UnitSystem.US_IMPERIAL,
    "imperial": UnitSystem.US_IMPERIAL,
    "us imperial": UnitSystem.US_IMPERIAL,
    "gallons": UnitSystem.US_IMPERIAL,
    "2": UnitSystem.METRIC,
    "metric": UnitSystem.METRIC,
    "liters": UnitSystem.METRIC,
    "litres": UnitSystem.METRIC,
}


@dataclass(frozen=True)
class IngredientResult:
    sweetener_amount: float
    top_off_liquid_amount: float
    gravity_points_needed: float
    unit: UnitSystem

    @property
    def sweetener_unit(self) -> str:
        return self.unit.mass_unit

    @property
    def liquid_unit(self) -> str:
        return self.unit.volume_unit

    @property
    def honey_fills_batch(self) -> bool:
        """True when the honey alone meets or exceeds the batch volume."""
        return self.top_off_liquid_amount <= 0.0

    def as_dict(self) -> Dict[str, float]:
        return {
            "sweetener_amount": self.sweetener_amount,
            "sweetener_unit": self.sweetener_unit,
            "top_off_liquid_amount": self.top_off_liquid_amount,
            "liquid_unit": self.liquid_unit,
            "gravity_points_needed": self.gravity_points_needed,
        }


def _round_half_away(x: float, places: int = 3) -> float:
    scale = 10 ** places
    scaled = x * scale
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / scale


def _finite(value, name: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be a number, got {value!r}.") from None
    if not math.isfinite(value):
        raise InvalidInput(f"{name} must be a finite number, got {value!r}.")
    return value


def final_gravity(
    sweetness: Union[SweetnessLevel, str],
    mode: Union[FermentationMode, str] = FermentationMode.STANDARD,
) -> float:
    """Assumed final gravity for a sweetness level.

    Forced-dry fermentation always finishes at 1.000, so the sweetness label is
    not even looked at in that mode.
    """
    mode = FermentationMode.from_label(mode)
    if mode is FermentationMode.FORCED_DRY:
        return 1.000
    if not isinstance(sweetness, SweetnessLevel):
        sweetness = SweetnessLevel.from_label(sweetness)
    return FINAL_GRAVITY[sweetness]


def target_gravity(
    abv: float,
    sweetness: Union[SweetnessLevel, str],
    mode: Union[FermentationMode, str] = FermentationMode.STANDARD,
) -> float:
    """Starting gravity needed to reach ``abv`` percent at the assumed final gravity.

    OG = FG + ABV / 131.25, rounded half away from zero to 3 decimals. The
    result is not checked against the plausibility ceiling; see
    :func:`exceeds_gravity_ceiling`.
    """
    abv = _finite(abv, "ABV")
    mode = FermentationMode.from_label(mode)
    fg = final_gravity(sweetness, mode)
    og = _round_half_away(fg + abv / ABV_FACTOR, 3)
    logger.debug("target_gravity abv=%s fg=%.3f mode=%s -> og=%.3f", abv, fg, mode.value, og)
    return og


def exceeds_gravity_ceiling(og: float, ceiling: float = OG_CEILING) -> bool:
    return og > ceiling


def compute_ingredients(
    og: float, batch_volume: float, unit: Union[UnitSystem, str]
) -> IngredientResult:
    unit = UnitSystem.from_label(unit)
    og = _finite(og, "Original gravity")
    batch_volume = _finite(batch_volume, "Batch volume")
    if batch_volume <= 0.0:
        raise InvalidInput(f"Batch volume must be positive, got {batch_volume}.")

    # Gravity points are always worked out on a US gallon basis
    volume_gal = batch_volume * L_TO_GAL if unit is UnitSystem.METRIC else batch_volume
    gravity_points = (og - 1.000) * 1000.0 * volume_gal
    honey_lbs = gravity_points / GRAVITY_POINTS_PER_LB

    if unit is UnitSystem.METRIC:
        honey_kg = honey_lbs / KG_TO_LBS
        honey_volume_l = honey_kg * L_PER_KG_HONEY
        water_l = max(0.0, batch_volume - honey_volume_l)
        result = IngredientResult(honey_kg, water_l, gravity_points, unit)
    else:
        honey_volume_gal = (honey_lbs / 10.0) * GAL_PER_10_LBS_HONEY
        water_gal = max(0.0, volume_gal - honey_volume_gal)
        result = IngredientResult(honey_lbs, water_gal, gravity_points, unit)

    logger.debug(
        "compute_ingredients og=%.3f volume=%s %s -> %s",
        og, batch_volume, unit.volume_unit, result.as_dict(),
    )
    return result
