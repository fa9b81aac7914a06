import streamlit as st
import pandas as pd
import altair as alt

from slotting.report import category_to_text


def render(category, df: pd.DataFrame, theme):
    st.header(category.title)
    if category.reason:
        st.caption(category.reason)

    st.metric("Products", f"{len(df):,}")
    if df.empty:
        st.info("No products in this category.")
        return

    # ─── 1) Ranked list ───────────────────────────────────────
    st.dataframe(df, use_container_width=True, hide_index=True)

    # ─── 2) Top products chart ────────────────────────────────
    metric = "TotalQuantity" if category.sort_by == "TotalQuantity" else "SalesQuantity"
    top_n = st.slider("Top N", 5, 50, 20, step=5, key=f"top_{category.key}")
    top = df.head(top_n).copy()
    top["Label"] = top["ProductCode"] + " – " + top["ProductName"].astype(str)
    chart = (
        alt.Chart(top)
        .mark_bar()
        .encode(
            x=alt.X(f"{metric}:Q", title="Shipped Qty" if metric == "SalesQuantity" else "On-hand Qty"),
            y=alt.Y("Label:N", sort=alt.SortField("Rank"), title=None),
            tooltip=["Rank", "ProductCode", "ProductName", "SalesQuantity", "TotalQuantity"]
        )
        .properties(height=max(200, 18 * len(top)))
    )
    st.altair_chart(theme(chart), use_container_width=True)

    # ─── 3) Text export ───────────────────────────────────────
    with st.expander("Copy as text", expanded=False):
        st.code(category_to_text(category.key, df), language=None)
