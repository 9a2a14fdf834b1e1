"""Input checks and the calculation pipeline shared by the console and web front ends.

Both front ends gather raw values their own way, then hand them to
:func:`plan_batch`, which runs gravity target -> ceiling check -> ingredients
and returns a :class:`BatchPlan` ready to be rendered.
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from meadcalc.calculations import (
    FermentationMode,
    IngredientResult,
    SweetnessLevel,
    UnitSystem,
    compute_ingredients,
    exceeds_gravity_ceiling,
    final_gravity,
    target_gravity,
)
from meadcalc.config import ValidationPolicy
from meadcalc.errors import ImplausibleGravityTarget, InvalidInput

logger = logging.getLogger(__name__)

FORCED_DRY_NOTE = "Forced-dry (turbo yeast) selected. Final Gravity (FG) forced to 1.000."


@dataclass(frozen=True)
class BatchPlan:
    og: float
    fg: float
    ingredients: IngredientResult
    mode: FermentationMode
    warnings: Tuple[str, ...] = ()
    implausible: bool = False


def _to_float(raw, what: str) -> float:
    try:
        value = float(str(raw).strip()) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError):
        raise InvalidInput(f"Invalid {what}: {raw!r} is not a number.") from None
    if not math.isfinite(value):
        raise InvalidInput(f"Invalid {what}: {raw!r} is not a finite number.")
    return value


def parse_volume(raw) -> float:
    volume = _to_float(raw, "volume")
    if volume <= 0.0:
        raise InvalidInput("Invalid volume: batch volume must be greater than zero.")
    return volume


def parse_abv(raw, policy: Optional[ValidationPolicy] = None) -> float:
    policy = policy or ValidationPolicy()
    abv = _to_float(raw, "ABV")
    if abv <= 0.0:
        raise InvalidInput("Invalid ABV: target ABV must be greater than zero.")
    if policy.enforce_abv_range and not (policy.abv_min <= abv <= policy.abv_max):
        raise InvalidInput(
            f"Invalid ABV range (must be between {policy.abv_min:g}% and {policy.abv_max:g}%)."
        )
    return abv


def parse_sweetness(raw) -> SweetnessLevel:
    if isinstance(raw, SweetnessLevel):
        return raw
    return SweetnessLevel.from_label(raw)


def parse_mode(raw) -> FermentationMode:
    if isinstance(raw, bool):
        return FermentationMode.FORCED_DRY if raw else FermentationMode.STANDARD
    return FermentationMode.from_label(raw)


def parse_unit(raw) -> UnitSystem:
    return UnitSystem.from_label(raw)


def plan_batch(
    volume,
    abv,
    sweetness: Union[SweetnessLevel, str],
    mode=FermentationMode.STANDARD,
    unit=UnitSystem.US_IMPERIAL,
    policy: Optional[ValidationPolicy] = None,
) -> BatchPlan:
    policy = policy or ValidationPolicy()
    volume = parse_volume(volume)
    abv = parse_abv(abv, policy)
    mode = parse_mode(mode)
    unit = parse_unit(unit)
    # Sweetness only matters for standard fermentation
    if mode is FermentationMode.STANDARD:
        sweetness = parse_sweetness(sweetness)

    og = target_gravity(abv, sweetness, mode)
    fg = final_gravity(sweetness, mode)

    warnings = []
    implausible = exceeds_gravity_ceiling(og, policy.og_ceiling)
    if implausible:
        if policy.abort_on_implausible:
            logger.info("Aborting plan: OG %.3f above ceiling %.3f", og, policy.og_ceiling)
            raise ImplausibleGravityTarget(og, policy.og_ceiling)
        warnings.append(
            f"WARNING: Calculated OG ({og:.3f}) is above {policy.og_ceiling:.3f}. Try a lower ABV."
        )
    if mode is FermentationMode.FORCED_DRY:
        warnings.append(FORCED_DRY_NOTE)

    ingredients = compute_ingredients(og, volume, unit)
    return BatchPlan(og=og, fg=fg, ingredients=ingredients, mode=mode,
                     warnings=tuple(warnings), implausible=implausible)
