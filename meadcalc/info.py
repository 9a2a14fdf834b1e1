import streamlit as st

WATER_INFO = """
**Water quality in mead making**

Water quality is decisive for a healthy fermentation and for the final taste. It affects
yeast activity, mouthfeel and how well spices or fruit release their aroma.

**Key points:**
- **Chlorine / chloramine:** must be removed. They cause unpleasant medicinal off-flavours.
  Use Campden tablets or a carbon filter.
- **Mineral content (hardness):** calcium and magnesium are yeast nutrients. Fully distilled
  water may need mineral additions.
- **pH:** yeast prefers a slightly acidic environment (pH 3.0–4.0). High alkalinity in tap
  water can stress the yeast.
"""

HONEY_INFO = """
**Main honey varieties for mead**

The floral source of the honey sets the colour, aroma and final flavour of the mead.

**Common varieties:**
- **Clover:** light, delicate flavour. Excellent for traditional meads; the most common and
  easiest to find.
- **Orange blossom:** citrusy, floral aroma. Valued in lighter meads and melomels (fruit meads).
- **Wildflower:** highly variable, rich and complex. Suits spiced meads (metheglins).
- **Buckwheat:** very dark, rich and strong, often molasses-like. Needs long ageing.
"""


def info_ui(water_text: str = WATER_INFO, honey_text: str = HONEY_INFO):
    with st.expander("Water info"):
        st.markdown(water_text)
    with st.expander("Honey info"):
        st.markdown(honey_text)
