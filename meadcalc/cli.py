"""Console front end for the mead ingredient calculator.

Run:
  meadcalc --unit us --volume 5 --abv 14 --sweetness Semi-Sweet
  python -m meadcalc.cli          # prompts for anything not given
"""
import argparse
import logging
import sys

from meadcalc.calculations import FermentationMode, UnitSystem
from meadcalc.config import load_policy
from meadcalc.errors import ImplausibleGravityTarget, MeadCalcError
from meadcalc.planner import (
    FORCED_DRY_NOTE,
    parse_abv,
    parse_mode,
    parse_unit,
    parse_volume,
    plan_batch,
)
from meadcalc.presets import GRAVITY_POINTS_PER_LB
from meadcalc.utils import format_number

logger = logging.getLogger(__name__)


def display_menu(out=None):
    if out is None:
        out = sys.stdout
    print("======================================", file=out)
    print("      Mead Ingredients Calculator", file=out)
    print("======================================", file=out)
    print("This tool calculates the approximate amount of honey needed to reach a", file=out)
    print("target Original Gravity (OG) based on your desired ABV and sweetness.", file=out)
    print("Assumptions:", file=out)
    print(f" - Honey contributes {GRAVITY_POINTS_PER_LB:g} gravity points per pound per gallon (PPG).", file=out)
    print(" - Sweetness level determines the assumed Final Gravity (FG).", file=out)
    print(" - FORCED-DRY (TURBO YEAST) MODE: Forces Final Gravity (FG) to 1.000 (Dry).", file=out)


def print_plan(plan, out=None):
    if out is None:
        out = sys.stdout
    ing = plan.ingredients
    print("\n--- Calculation Results ---", file=out)
    if plan.mode is FermentationMode.FORCED_DRY:
        print(f"NOTE: {FORCED_DRY_NOTE}", file=out)
    print(f"Target Original Gravity (OG): {format_number(plan.og, 3)}", file=out)
    mass_name = "pounds" if ing.unit is UnitSystem.US_IMPERIAL else "kilograms"
    print(f"Required Honey:               {format_number(ing.sweetener_amount)} {ing.sweetener_unit} ({mass_name})", file=out)
    water = f"{format_number(ing.top_off_liquid_amount)} {ing.liquid_unit}"
    if ing.honey_fills_batch:
        water += " (Honey volume meets or exceeds batch volume.)"
    print(f"Required Water (to top off):  {water}", file=out)
    points = format_number(ing.gravity_points_needed, 0)
    if ing.unit is UnitSystem.METRIC:
        points += " (Based on US Gal/Lbs)"
    print(f"Total Gravity Points Needed:  {points}", file=out)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="meadcalc",
        description="Estimate honey and water for a mead at a target ABV and sweetness.",
    )
    parser.add_argument("--unit", help="us (gallons/lbs) or metric (liters/kg)")
    parser.add_argument("--volume", help="Batch volume in gallons or liters")
    parser.add_argument("--abv", help="Target ABV in percent, e.g. 14")
    parser.add_argument("--sweetness", help="Dry, Semi-Sweet, Sweet or Dessert")
    parser.add_argument("--mode", help="standard or forced-dry (turbo yeast)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log calculation steps")
    return parser


def _ask(value, prompt, input_fn):
    if value is not None:
        return value
    return input_fn(prompt).strip()


def run(args, input_fn=input, out=None) -> int:
    if out is None:
        out = sys.stdout
    policy = load_policy("cli")
    display_menu(out)
    try:
        unit = parse_unit(_ask(
            args.unit, "\nSelect unit system (1 for US Imperial, 2 for Metric): ", input_fn))
        volume_name = "Gallons" if unit is UnitSystem.US_IMPERIAL else "Liters"
        volume = parse_volume(_ask(
            args.volume, f"Enter batch volume (in {volume_name}): ", input_fn))
        abv = parse_abv(_ask(args.abv, "Enter target ABV (%, e.g., 14): ", input_fn), policy)

        mode = parse_mode(args.mode) if args.mode is not None else None
        sweetness = args.sweetness
        if sweetness is None and mode is not FermentationMode.FORCED_DRY:
            sweetness = _ask(None, "Enter sweetness level (Dry, Semi-Sweet, Sweet, Dessert): ", input_fn)
        if mode is None:
            mode = parse_mode(_ask(
                None,
                "Are you using Turbo Yeast Method? (1 for Standard Yeast, 2 for Turbo Yeast): ",
                input_fn,
            ))

        plan = plan_batch(volume, abv, sweetness, mode, unit, policy)
    except ImplausibleGravityTarget as e:
        print(f"\nWARNING: Calculated Original Gravity (OG={e.og:.3f}) is extremely high.", file=out)
        print("This OG requires an impractical amount of honey and exceeds the tolerance "
              "of most mead yeasts (max OG is usually around 1.220).", file=out)
        print("Please try a lower ABV or a smaller batch size.", file=out)
        return 1
    except MeadCalcError as e:
        print(f"Error: {e} Exiting.", file=out)
        return 1
    except EOFError:
        print("\nNo input. Exiting.", file=out)
        return 1

    for w in plan.warnings:
        if w != FORCED_DRY_NOTE:
            print(w, file=out)
    print_plan(plan, out)
    print("\nCalculation complete. Remember this is an ESTIMATE and specific "
          "yeast/flavorings are required.", file=out)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except MeadCalcError as e:
        # bad MEADCALC_* settings
        logger.error("Configuration error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
