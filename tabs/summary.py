import streamlit as st
import pandas as pd
import altair as alt

from slotting.classification import CATEGORIES

DROP_LABELS = {
    "missing_product_code": "No product code",
    "outside_zone":         "Outside pick zone",
    "invalid_location":     "Unparseable location",
}


def render(result, theme):
    st.header("📋 Slotting Summary")

    # ─── 1) Category counts ───────────────────────────────────
    counts = result.counts()
    cols = st.columns(len(CATEGORIES))
    for col, category in zip(cols, CATEGORIES):
        col.metric(category.title, f"{counts[category.key]:,}")

    products = result.products
    c1, c2, c3 = st.columns(3)
    c1.metric("Products", f"{len(products):,}")
    c2.metric("On-hand Qty", f"{products['TotalQuantity'].sum():,.0f}" if len(products) else "0")
    c3.metric("Zero-demand Products", f"{int((products['SalesQuantity'] == 0).sum()):,}" if len(products) else "0")

    # ─── 2) Excluded rows ─────────────────────────────────────
    dropped = {DROP_LABELS.get(k, k): v for k, v in result.dropped.items() if v}
    if dropped:
        st.info(
            "Rows left out of the analysis: "
            + ", ".join(f"{label} {n:,}" for label, n in dropped.items())
        )

    # ─── 3) Min column vs demand ──────────────────────────────
    if products.empty:
        st.warning("No pickable-zone inventory found.")
        return

    st.subheader("Demand vs Nearest Column")
    chart = (
        alt.Chart(products[["ProductCode", "ProductName", "SalesQuantity", "MinColumn", "TotalQuantity"]])
        .mark_circle()
        .encode(
            x=alt.X("MinColumn:Q", title="Nearest Column"),
            y=alt.Y("SalesQuantity:Q", title="Shipped Qty"),
            size=alt.Size("TotalQuantity:Q", title="On-hand Qty"),
            tooltip=[
                alt.Tooltip("ProductCode:N", title="Code"),
                alt.Tooltip("ProductName:N", title="Name"),
                alt.Tooltip("SalesQuantity:Q", format=",.0f", title="Shipped"),
                alt.Tooltip("TotalQuantity:Q", format=",.0f", title="On-hand"),
            ]
        )
        .properties(height=400)
        .interactive()
    )
    st.altair_chart(theme(chart), use_container_width=True)
