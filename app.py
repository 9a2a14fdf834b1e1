import streamlit as st
from dotenv import load_dotenv

from meadcalc.calculations import SweetnessLevel
from meadcalc.config import default_abv, load_policy
from meadcalc.errors import MeadCalcError
from meadcalc.groq_helper import groq_available, render_groq_panel
from meadcalc.info import info_ui
from meadcalc.planner import FORCED_DRY_NOTE, plan_batch
from meadcalc.presets import DEFAULT_EXAMPLE
from meadcalc.utils import format_amount, format_gravity, format_number

# Load environment variables from a .env file for local development
load_dotenv()

st.set_page_config(page_title="Mead Master Calculator", page_icon="🍯", layout="centered")
st.title("Mead Ingredient Calculator 🍯")
st.markdown("OG = FG + ABV / 131.25  |  Honey ≈ **35 gravity points per lb per gallon**")

try:
    policy = load_policy("gui", dotenv=False)
except MeadCalcError as e:
    st.error(f"Configuration error: {e}")
    st.stop()

UNITS = ["Gallons", "Liters"]
SWEETNESS = [level.value for level in SweetnessLevel]

# ------------------------------------------------------------------
# SIDEBAR - batch inputs
# ------------------------------------------------------------------
with st.sidebar:
    st.header("Batch")
    unit_label = st.selectbox("Unit", UNITS, index=UNITS.index(DEFAULT_EXAMPLE["unit"]))
    volume = st.number_input(
        f"Batch volume ({unit_label.lower()})", min_value=0.0, value=DEFAULT_EXAMPLE["volume"], step=0.5,
    )
    abv_kwargs = {"min_value": 0.0}
    if policy.enforce_abv_range:
        abv_kwargs = {"min_value": policy.abv_min, "max_value": policy.abv_max}
    abv = st.number_input("Target ABV (%)", value=default_abv(policy), step=0.5, **abv_kwargs)
    sweetness = st.selectbox("Sweetness", SWEETNESS, index=SWEETNESS.index(DEFAULT_EXAMPLE["sweetness"]))
    forced_dry = st.toggle("Use turbo yeast (forced dry)", value=DEFAULT_EXAMPLE["forced_dry"])
    if forced_dry:
        st.caption("Sweetness is ignored: turbo yeast ferments to FG 1.000.")

# ------------------------------------------------------------------
# RESULTS
# ------------------------------------------------------------------
tab_calc, tab_info = st.tabs(["Calculator", "Water & Honey"])

with tab_calc:
    plan = None
    try:
        plan = plan_batch(volume, abv, sweetness, forced_dry, unit_label, policy)
    except MeadCalcError as e:
        st.error(f"Error: {e}")

    if plan is not None:
        ing = plan.ingredients
        st.subheader("Results")
        col1, col2 = st.columns(2)
        col1.metric("OG (original gravity)", format_gravity(plan.og))
        col2.metric("FG (final gravity)", format_gravity(plan.fg))
        col1.metric("Honey needed", format_amount(ing.sweetener_amount, ing.sweetener_unit))
        col2.metric("Water to top off", format_amount(ing.top_off_liquid_amount, ing.liquid_unit))
        st.caption(f"Total gravity points needed (US gal/lbs basis): {format_number(ing.gravity_points_needed, 0)}")

        if ing.honey_fills_batch:
            st.info("Honey volume meets or exceeds the batch volume; no top-off water is needed.")
        for w in plan.warnings:
            if w == FORCED_DRY_NOTE:
                st.markdown(f":red[{w}]")
            else:
                st.markdown(f":orange[{w}]")
        if not plan.warnings:
            st.success("Calculation complete.")

        st.markdown("---")
        if groq_available():
            render_groq_panel(plan, volume, abv, sweetness)
        else:
            st.info("To enable the AI explainer, set your `GROQ_API_KEY` in a `.env` file or Streamlit secrets.")

with tab_info:
    info_ui()
