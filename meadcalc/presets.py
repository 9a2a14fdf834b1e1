# Honey extract potential, gravity points per pound per gallon (PPG)
GRAVITY_POINTS_PER_LB = 35.0

# Simplified ABV formula: ABV = (OG - FG) * 131.25
ABV_FACTOR = 131.25

L_TO_GAL = 0.264172
KG_TO_LBS = 2.20462

# Honey displacement
GAL_PER_10_LBS_HONEY = 0.65
L_PER_KG_HONEY = 0.74

# Most mead yeasts top out around 1.220
OG_CEILING = 1.225
ABV_MIN = 5.0
ABV_MAX = 25.0

# Defaults shown on first load of the windowed calculator
DEFAULT_EXAMPLE = {
    "volume": 5.0,
    "unit": "Gallons",
    "abv": 14.0,
    "sweetness": "Semi-Sweet",
    "forced_dry": False,
}
