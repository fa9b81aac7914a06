# -*- coding: utf-8 -*-
import io
import os
from datetime import datetime

import streamlit as st

from slotting.auth import check_password
from slotting.classification import CATEGORIES, CATEGORY_BY_KEY, run_pipeline
from slotting.config import DEFAULT_CONFIG
from slotting.io_utils import load_inventory_export, load_sales_export
from slotting.logger import logger
from slotting.report import default_report_name, write_report
from tabs import (
    summary,
    recommendations,
    location_map,
)

# -----------------------
# App & Page Settings
# -----------------------
st.set_page_config(
    page_title="📦 Location Slotting Recommender",
    layout="wide",
    initial_sidebar_state="expanded",
)
st.title("📦 Location Slotting Recommender")

# -----------------------
# Password Gate
# -----------------------
def _configured_secret() -> str:
    secret = os.environ.get("SLOTTING_APP_PASSWORD", "")
    if secret:
        return secret
    try:
        return st.secrets.get("app_password", "")
    except Exception:
        # no secrets.toml
        return ""


if "authenticated" not in st.session_state:
    st.session_state.authenticated = False

secret = _configured_secret()
if not secret:
    logger.error("SLOTTING_APP_PASSWORD is not configured")
    st.error("서버 설정 오류: password is not configured.")
    st.stop()

if not st.session_state.authenticated:
    entered = st.text_input("Password", type="password")
    if not entered:
        st.stop()
    if not check_password(entered, secret):
        logger.warning("Rejected login attempt")
        st.error("Wrong password.")
        st.stop()
    st.session_state.authenticated = True
    st.rerun()

# -----------------------
# File Upload
# -----------------------
inv_upload = st.sidebar.file_uploader("On-hand stock export (재고현황)", type=["xlsx", "csv"])
sales_upload = st.sidebar.file_uploader("Shipment export (기간별 수불현황)", type=["xlsx", "csv"])

if not inv_upload or not sales_upload:
    st.sidebar.warning("Upload both exports to begin.")
    st.stop()

# -----------------------
# Rule Settings
# -----------------------
with st.sidebar.expander("Rule Settings", expanded=False):
    channel = st.text_input("Demand channel", DEFAULT_CONFIG.channel)
    zone_prefix = st.text_input("Pick-zone prefix", DEFAULT_CONFIG.zone_prefix)
    easy_levels = st.text_input("Easy-access levels", ",".join(DEFAULT_CONFIG.easy_access_levels))
    to_front_sales = st.number_input(
        "Move-to-front: min shipped", value=float(DEFAULT_CONFIG.move_to_front_min_sales), step=50.0
    )
    to_front_col = st.number_input(
        "Move-to-front: nearest column above", value=DEFAULT_CONFIG.move_to_front_min_column, step=1
    )
    from_front_sales = st.number_input(
        "Move-from-front: shipped below", value=float(DEFAULT_CONFIG.move_from_front_max_sales), step=10.0
    )
    from_front_col = st.number_input(
        "Move-from-front: nearest column at most", value=DEFAULT_CONFIG.move_from_front_max_column, step=1
    )

config = DEFAULT_CONFIG.with_overrides(
    channel=channel,
    zone_prefix=zone_prefix,
    easy_access_levels=easy_levels,
    move_to_front_min_sales=to_front_sales,
    move_to_front_min_column=int(to_front_col),
    move_from_front_max_sales=from_front_sales,
    move_from_front_max_column=int(from_front_col),
)

# -----------------------
# Data Loading & Caching
# -----------------------
@st.cache_data(show_spinner=False)
def load_everything(inv_bytes: bytes, inv_name: str, sales_bytes: bytes, sales_name: str, _config, config_key: str):
    inv_file = io.BytesIO(inv_bytes)
    inv_file.name = inv_name
    sales_file = io.BytesIO(sales_bytes)
    sales_file.name = sales_name

    logger.info(f"Loading {inv_name} + {sales_name}")
    inv_df = load_inventory_export(inv_file, _config)
    sales_df = load_sales_export(sales_file, _config)
    return run_pipeline(inv_df, sales_df, _config)


with st.spinner("Classifying locations..."):
    try:
        result = load_everything(
            inv_upload.getvalue(), inv_upload.name,
            sales_upload.getvalue(), sales_upload.name,
            config, repr(config),
        )
    except ValueError as e:
        logger.error(f"Load failed: {e}")
        st.error(str(e))
        st.stop()

# -----------------------
# Download Report
# -----------------------
st.sidebar.download_button(
    label="📥 Download Report (.xlsx)",
    data=write_report(result.categories),
    file_name=default_report_name(),
    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)
st.sidebar.caption(f"Generated {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

# -----------------------
# Section Navigation
# -----------------------
section = st.sidebar.radio(
    "Select Section",
    ["📋 Summary"] + [c.title for c in CATEGORIES] + ["🗺 Location Map"],
)

# -----------------------
# Chart Theming
# -----------------------
def apply_theme(chart):
    return chart.configure_axis(labelFontSize=12, titleFontSize=14).configure_legend(
        labelFontSize=12, titleFontSize=14
    )

# -----------------------
# Render Selected Section
# -----------------------
by_title = {c.title: c.key for c in CATEGORIES}
if section == "📋 Summary":
    summary.render(result, apply_theme)
elif section == "🗺 Location Map":
    location_map.render(result.products, config)
else:
    key = by_title[section]
    recommendations.render(CATEGORY_BY_KEY[key], result.categories[key], apply_theme)
