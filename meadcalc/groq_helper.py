import os
from textwrap import dedent

import streamlit as st

from meadcalc.calculations import FermentationMode

DEFAULT_MODEL = "llama-3.3-70b-versatile"


def _get_api_key():
    api_key = os.getenv("GROQ_API_KEY")
    if not api_key:
        try:
            api_key = st.secrets.get("GROQ_API_KEY", None)
        except Exception:
            # no secrets.toml
            api_key = None
    return api_key


def _get_groq_client():
    api_key = _get_api_key()
    if not api_key:
        return None
    try:
        from groq import Groq  # lazy import
    except ImportError:
        return None
    return Groq(api_key=api_key)


def groq_available() -> bool:
    return _get_groq_client() is not None


def build_prompt(plan, volume: float, abv: float, sweetness: str, notes: str = "") -> str:
    ing = plan.ingredients
    if plan.mode is FermentationMode.FORCED_DRY:
        yeast = "forced-dry (turbo yeast)"
        # FG is fixed at 1.000, the selected label plays no part
        sweetness = "n/a (forced dry)"
    else:
        yeast = "standard mead yeast"
    return dedent(f"""
    Provide a concise explanation of this mead recipe plan, including the formulas used.
    Inputs:
    - Batch volume: {volume} {ing.liquid_unit}
    - Target ABV (%): {abv}
    - Sweetness: {sweetness}
    - Yeast: {yeast}
    Results:
    - Final gravity (FG): {plan.fg:.3f}
    - Original gravity (OG): {plan.og:.3f}
    - Honey: {ing.sweetener_amount:.2f} {ing.sweetener_unit}
    - Water to top off: {ing.top_off_liquid_amount:.2f} {ing.liquid_unit}
    - Gravity points (US gallon basis): {ing.gravity_points_needed:.0f}
    Notes: {notes or "N/A"}

    Include:
    - OG = FG + ABV / 131.25 and a worked numeric example from the inputs.
    - How honey at 35 gravity points per pound per gallon gives the honey amount.
    - Practical tips on yeast nutrients, staggered additions and degassing.
    """)


def render_groq_panel(plan, volume: float, abv: float, sweetness: str):
    with st.expander("AI Assistant (Groq)"):
        st.write("Generate a concise explanation of the recipe with formulas.")
        notes = st.text_area("Notes (honey variety, fruit, spices, yeast strain):", height=80)
        model = st.text_input("Groq model", value=DEFAULT_MODEL)
        if st.button("Explain my recipe"):
            client = _get_groq_client()
            if not client:
                st.error("Groq client not available. Set GROQ_API_KEY and install groq.")
                return
            try:
                resp = client.chat.completions.create(
                    model=model,
                    messages=[
                        {"role": "system", "content": "You are an experienced mead maker."},
                        {"role": "user", "content": build_prompt(plan, volume, abv, sweetness, notes)},
                    ],
                    temperature=0.2,
                )
                st.markdown(resp.choices[0].message.content)
            except Exception as e:
                st.error(f"Groq error: {e}")
