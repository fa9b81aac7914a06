# tabs/location_map.py
import streamlit as st
import pandas as pd
import plotly.express as px

from slotting.location import parse_locations


def _explode_locations(products: pd.DataFrame, levels) -> pd.DataFrame:
    rows = [
        {"ProductCode": code, "Location": loc, "Quantity": qty, "SalesQuantity": sales}
        for code, locs, sales in zip(products["ProductCode"], products["Locations"], products["SalesQuantity"])
        for loc, qty in locs
    ]
    df = pd.DataFrame(rows, columns=["ProductCode", "Location", "Quantity", "SalesQuantity"])
    return df.join(parse_locations(df["Location"], levels))


def render(products: pd.DataFrame, config):
    st.header("🗺️ Pick-Zone Location Map")
    if products.empty:
        st.info("No pickable-zone inventory to map.")
        return

    df = _explode_locations(products, config.easy_access_levels)
    df = df[df["Valid"]]

    rows = ["All"] + sorted(df["Row"].unique())
    sel_row = st.selectbox("Row", rows)
    if sel_row != "All":
        df = df[df["Row"] == sel_row]

    # ─── 1) On-hand by column × level ─────────────────────────
    measure = st.radio("Measure", ["Quantity", "SalesQuantity"], horizontal=True)
    fig = px.density_heatmap(
        df,
        x="Column",
        y="Level",
        z=measure,
        histfunc="sum",
        category_orders={
            "Column": sorted(df["Column"].unique()),
            "Level": sorted(df["Level"].unique(), reverse=True),
        },
        color_continuous_scale="Blues",
        title=f"{measure} by Column and Level",
    )
    st.plotly_chart(fig, use_container_width=True)

    # ─── 2) Easy-access occupancy ─────────────────────────────
    easy = df[df["EasyAccess"]]
    c1, c2 = st.columns(2)
    c1.metric("Easy-access slots", f"{easy['Location'].nunique():,}")
    c2.metric(
        "…held by zero-demand stock",
        f"{easy.loc[easy['SalesQuantity'] == 0, 'Location'].nunique():,}"
    )
    st.caption("Easy-access levels: " + ", ".join(config.easy_access_levels))
