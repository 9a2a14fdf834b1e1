import math

import pytest

from meadcalc.calculations import (
    FermentationMode,
    SweetnessLevel,
    UnitSystem,
    compute_ingredients,
    exceeds_gravity_ceiling,
    final_gravity,
    target_gravity,
)
from meadcalc.errors import InvalidInput, InvalidSweetness


def test_dry_14_percent():
    # 1.000 + 14 / 131.25 = 1.10667 -> 1.107
    assert target_gravity(14, "Dry") == 1.107


def test_semi_sweet_14_percent():
    # 1.010 + 0.10667 = 1.11667 -> 1.117
    assert target_gravity(14, "Semi-Sweet") == 1.117


@pytest.mark.parametrize("level, fg", [
    (SweetnessLevel.DRY, 1.000),
    (SweetnessLevel.SEMI_SWEET, 1.010),
    (SweetnessLevel.SWEET, 1.020),
    (SweetnessLevel.DESSERT, 1.030),
])
def test_final_gravity_table(level, fg):
    assert final_gravity(level) == fg
    assert level.final_gravity == fg
    assert target_gravity(10, level) == round(fg + 10 / 131.25, 3)


@pytest.mark.parametrize("label", ["dry", "DRY", "Dry", "  dRy "])
def test_sweetness_is_case_insensitive(label):
    assert final_gravity(label) == 1.000


@pytest.mark.parametrize("label", ["Medium", "semisweet", "", "Sweetish"])
def test_unknown_sweetness_raises(label):
    with pytest.raises(InvalidSweetness):
        target_gravity(14, label)


def test_forced_dry_ignores_sweetness():
    dessert = target_gravity(14, "Dessert", FermentationMode.FORCED_DRY)
    dry = target_gravity(14, "Dry", FermentationMode.FORCED_DRY)
    assert dessert == dry == 1.107
    # label is not even validated
    assert target_gravity(14, "nonsense", FermentationMode.FORCED_DRY) == 1.107


def test_rounds_half_away_from_zero():
    # 8.203125 / 131.25 == 0.0625 exactly, so OG lands on 1.0625
    assert target_gravity(8.203125, "Dry") == 1.063
    assert round(1.0625, 3) == 1.062


def test_zero_and_negative_abv_are_not_rejected():
    assert target_gravity(0, "Sweet") == 1.020
    assert target_gravity(-13.125, "Dry") == 0.9


def test_non_finite_abv_raises():
    with pytest.raises(InvalidInput):
        target_gravity(float("nan"), "Dry")


def test_ceiling_is_strict():
    assert not exceeds_gravity_ceiling(1.225)
    assert exceeds_gravity_ceiling(1.2251)
    assert exceeds_gravity_ceiling(1.3, ceiling=1.25)


def test_us_imperial_example():
    out = compute_ingredients(1.117, 5.0, UnitSystem.US_IMPERIAL)
    # 117 points * 5 gal = 585; / 35 = 16.714 lbs
    assert math.isclose(out.gravity_points_needed, 585.0, rel_tol=1e-9)
    assert math.isclose(out.sweetener_amount, 585.0 / 35.0, rel_tol=1e-9)
    honey_volume_gal = out.sweetener_amount / 10.0 * 0.65
    assert math.isclose(out.top_off_liquid_amount, 5.0 - honey_volume_gal, rel_tol=1e-9)
    assert math.isclose(out.top_off_liquid_amount, 3.9136, rel_tol=1e-4)
    assert out.sweetener_unit == "lbs"
    assert out.liquid_unit == "gallons"


def test_metric_example():
    og = target_gravity(14, "dry")
    out = compute_ingredients(og, 20.0, UnitSystem.METRIC)
    assert og == 1.107
    assert math.isclose(out.gravity_points_needed, 565.328, rel_tol=1e-5)
    assert math.isclose(out.sweetener_amount, 7.3266, rel_tol=1e-4)
    assert math.isclose(out.top_off_liquid_amount, 14.5783, rel_tol=1e-4)
    assert out.sweetener_unit == "kg"
    assert out.liquid_unit == "liters"


def test_metric_honey_matches_imperial_for_same_batch():
    liters = 23.0
    gallons = liters * 0.264172
    for og in (1.05, 1.107, 1.2):
        us = compute_ingredients(og, gallons, UnitSystem.US_IMPERIAL)
        metric = compute_ingredients(og, liters, UnitSystem.METRIC)
        assert math.isclose(metric.sweetener_amount, us.sweetener_amount / 2.20462, abs_tol=1e-6)
        assert math.isclose(metric.gravity_points_needed, us.gravity_points_needed, abs_tol=1e-6)


@pytest.mark.parametrize("unit", list(UnitSystem))
@pytest.mark.parametrize("og", [0.990, 1.000, 1.107, 1.5, 3.0])
def test_top_off_never_negative(unit, og):
    out = compute_ingredients(og, 1.0, unit)
    assert out.top_off_liquid_amount >= 0.0


def test_honey_fills_batch_clamps_water():
    out = compute_ingredients(3.0, 1.0, UnitSystem.US_IMPERIAL)
    assert out.top_off_liquid_amount == 0.0
    assert out.honey_fills_batch


def test_og_at_or_below_one_needs_no_honey():
    out = compute_ingredients(1.000, 5.0, UnitSystem.US_IMPERIAL)
    assert out.sweetener_amount == 0.0
    assert out.top_off_liquid_amount == 5.0


@pytest.mark.parametrize("volume", [0.0, -1.0, float("inf"), float("nan")])
def test_bad_volume_raises(volume):
    with pytest.raises(InvalidInput):
        compute_ingredients(1.1, volume, UnitSystem.METRIC)


def test_as_dict():
    out = compute_ingredients(1.1, 1.0, UnitSystem.US_IMPERIAL).as_dict()
    assert set(out) == {
        "sweetener_amount", "sweetener_unit", "top_off_liquid_amount",
        "liquid_unit", "gravity_points_needed",
    }


@pytest.mark.parametrize("mode", ["Forced-Dry", "forced-dry", "turbo", "2"])
def test_mode_accepts_labels(mode):
    assert target_gravity(14, "Dessert", mode) == 1.107
    assert final_gravity("Dessert", mode) == 1.000


def test_mode_label_standard():
    assert target_gravity(14, "Dessert", "Standard") == 1.137


@pytest.mark.parametrize("unit", ["metric", "Metric", "liters", "2"])
def test_unit_accepts_labels(unit):
    out = compute_ingredients(1.107, 20, unit)
    assert out.unit is UnitSystem.METRIC
    assert math.isclose(out.sweetener_amount, 7.3266, rel_tol=1e-4)


def test_unit_label_us():
    out = compute_ingredients(1.117, 5, "US Imperial")
    assert out.unit is UnitSystem.US_IMPERIAL
    assert math.isclose(out.sweetener_amount, 585.0 / 35.0, rel_tol=1e-9)


@pytest.mark.parametrize("mode", ["sometimes", None, 3])
def test_unknown_mode_raises(mode):
    with pytest.raises(InvalidInput):
        target_gravity(14, "Dry", mode)


@pytest.mark.parametrize("unit", ["furlongs", None, 3])
def test_unknown_unit_raises(unit):
    with pytest.raises(InvalidInput):
        compute_ingredients(1.107, 20, unit)
