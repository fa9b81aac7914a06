from collections import Counter
from typing import Dict, Optional

import pandas as pd

from .config import DEFAULT_CONFIG, SlottingConfig
from .location import parse_locations, zone_matches
from .logger import logger

AGGREGATE_COLUMNS = [
    "ProductCode",
    "ProductName",
    "TotalQuantity",
    "MinColumn",
    "Locations",
    "EasyAccessLocations",
    "FirstSeen",
]


def build_demand_index(sales_df: pd.DataFrame, channel: str) -> Dict[str, float]:
    """
    Map ProductCode -> DeliveredQuantity for rows whose Channel contains `channel`.
    A later row for the same code replaces the earlier value; nothing is summed.
    """
    codes = sales_df["ProductCode"].fillna("").astype(str).str.strip()
    in_channel = (
        sales_df["Channel"].fillna("").astype(str)
        .str.contains(channel, regex=False)
    )
    mask = (codes.ne("") & in_channel).astype(bool)
    qty = pd.to_numeric(sales_df["DeliveredQuantity"], errors="coerce").fillna(0)

    index: Dict[str, float] = {}
    for code, value in zip(codes[mask], qty[mask]):
        index[code] = value

    logger.info(f"Demand index for '{channel}': {len(index)} products from {int(mask.sum())} rows")
    return index


def aggregate_inventory(
    inv_df: pd.DataFrame,
    config: SlottingConfig = DEFAULT_CONFIG,
    dropped: Optional[Counter] = None,
) -> pd.DataFrame:
    """
    Fold per-location stock rows into one row per ProductCode:
      - TotalQuantity       = sum of Quantity
      - MinColumn           = lowest column number (sentinel when none is numeric)
      - Locations           = [(location, qty), ...] in row order
      - EasyAccessLocations = the subset on easy-access levels
      - FirstSeen           = Seq of the product's first row
    Rows with no ProductCode, outside the pickable zone or with an
    unparseable location are left out. Pass a Counter as `dropped`
    to get the excluded-row counts by reason.
    """
    codes = inv_df["ProductCode"].fillna("").astype(str).str.strip()
    raw = inv_df["Location"].fillna("").astype(str)

    has_code = codes.ne("")
    in_zone = raw.map(lambda r: zone_matches(r, config.zone_prefix)).astype(bool)
    parsed = parse_locations(raw, config.easy_access_levels, config.column_sentinel)
    keep = has_code & in_zone & parsed["Valid"]

    if dropped is not None:
        dropped["missing_product_code"] += int((~has_code).sum())
        dropped["outside_zone"] += int((has_code & ~in_zone).sum())
        dropped["invalid_location"] += int((has_code & in_zone & ~parsed["Valid"]).sum())

    if not keep.any():
        logger.info("Aggregated inventory: 0 products")
        return pd.DataFrame(columns=AGGREGATE_COLUMNS)

    seq = inv_df["Seq"] if "Seq" in inv_df.columns else pd.Series(range(len(inv_df)), index=inv_df.index)
    rows = pd.DataFrame({
        "ProductCode":  codes[keep],
        "ProductName":  inv_df.loc[keep, "ProductName"].fillna("").astype(str),
        "Quantity":     inv_df.loc[keep, "Quantity"],
        "ColumnNumber": parsed.loc[keep, "ColumnNumber"],
        "EasyAccess":   parsed.loc[keep, "EasyAccess"],
        "Seq":          seq[keep],
    })
    rows = rows.sort_values("Seq", kind="stable")
    rows["Entry"] = list(zip(raw[rows.index], rows["Quantity"]))
    rows["EasyEntry"] = [
        e if easy else None for e, easy in zip(rows["Entry"], rows["EasyAccess"])
    ]

    agg = (
        rows
        .groupby("ProductCode", sort=False)
        .agg(
            ProductName         = ("ProductName", "first"),
            TotalQuantity       = ("Quantity",     "sum"),
            MinColumn           = ("ColumnNumber", "min"),
            Locations           = ("Entry",        list),
            EasyAccessLocations = ("EasyEntry",    list),
            FirstSeen           = ("Seq",          "min"),
        )
        .reset_index()
        .sort_values("FirstSeen", kind="stable")
        .reset_index(drop=True)
    )
    agg["EasyAccessLocations"] = agg["EasyAccessLocations"].map(
        lambda entries: [e for e in entries if e is not None]
    )

    logger.info(f"Aggregated inventory: {len(agg)} products from {int(keep.sum())} rows")
    return agg[AGGREGATE_COLUMNS]


def join_demand(aggregates: pd.DataFrame, index: Dict[str, float]) -> pd.DataFrame:
    """
    Attach SalesQuantity from the demand index; products with no sales get 0.
    """
    df = aggregates.copy()
    df["SalesQuantity"] = df["ProductCode"].map(index).fillna(0)
    return df
