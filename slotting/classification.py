from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence, Tuple

import pandas as pd

from .aggregation import aggregate_inventory, build_demand_index, join_demand
from .cleaning import clean_inventory, clean_sales
from .config import DEFAULT_CONFIG, SlottingConfig
from .logger import logger

MORE_SUFFIX = " 외 {}곳"

RECORD_COLUMNS = [
    "Rank",
    "ProductCode",
    "ProductName",
    "SalesQuantity",
    "TotalQuantity",
    "MinColumn",
    "LocationSummary",
    "Reason",
]


@dataclass(frozen=True)
class Category:
    key: str
    title: str
    reason: str
    select: Callable[[pd.DataFrame, SlottingConfig], pd.Series]
    sort_by: str
    ascending: bool
    locations_field: str = "Locations"
    show_min_column: bool = True


def _move_to_front(df: pd.DataFrame, cfg: SlottingConfig) -> pd.Series:
    return (df["SalesQuantity"] >= cfg.move_to_front_min_sales) & (df["MinColumn"] > cfg.move_to_front_min_column)


def _move_from_front(df: pd.DataFrame, cfg: SlottingConfig) -> pd.Series:
    return (df["SalesQuantity"] < cfg.move_from_front_max_sales) & (df["MinColumn"] <= cfg.move_from_front_max_column)


def _zero_demand_easy_access(df: pd.DataFrame, cfg: SlottingConfig) -> pd.Series:
    return (df["SalesQuantity"] == 0) & (df["EasyAccessLocations"].map(len) > 0)


def _everything(df: pd.DataFrame, cfg: SlottingConfig) -> pd.Series:
    return pd.Series(True, index=df.index)


CATEGORIES: Tuple[Category, ...] = (
    Category(
        key="move_to_front",
        title="1열로 이동 추천",
        reason="배송량 높음, 1열 근처로 이동 필요",
        select=_move_to_front,
        sort_by="SalesQuantity",
        ascending=False,
    ),
    Category(
        key="move_from_front",
        title="1열에서 이동 추천",
        reason="배송 저조, 먼 곳으로 이동 가능",
        select=_move_from_front,
        sort_by="SalesQuantity",
        ascending=True,
        show_min_column=False,
    ),
    Category(
        key="zero_demand_easy_access",
        title="1단 차지 배송0 상품",
        reason="배송 0건, 1단(01,11,12단) 자리 낭비",
        select=_zero_demand_easy_access,
        sort_by="TotalQuantity",
        ascending=False,
        locations_field="EasyAccessLocations",
        show_min_column=False,
    ),
    Category(
        key="demand_ranking",
        title="전체 배송량 순위",
        reason="",
        select=_everything,
        sort_by="SalesQuantity",
        ascending=False,
    ),
)
CATEGORY_BY_KEY = {c.key: c for c in CATEGORIES}


def format_quantity(value) -> str:
    """Render 10.0 as '10' and 2.5 as '2.5'."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:g}"


def summarize_locations(entries: Sequence[Tuple[str, float]], limit: Optional[int] = None) -> str:
    """
    'loc(qty), loc(qty)' for the first `limit` entries,
    plus ' 외 K곳' when K entries were left out.
    """
    entries = list(entries)
    shown = entries if limit is None else entries[:limit]
    text = ", ".join(f"{loc}({format_quantity(qty)})" for loc, qty in shown)
    hidden = len(entries) - len(shown)
    if hidden > 0:
        text += MORE_SUFFIX.format(hidden)
    return text


def rank_category(
    products: pd.DataFrame,
    category: Category,
    config: SlottingConfig = DEFAULT_CONFIG,
) -> pd.DataFrame:
    """
    Filter + stable sort one category and shape it into ranked report records.
    """
    columns = [c for c in RECORD_COLUMNS if category.show_min_column or c != "MinColumn"]
    if products.empty:
        return pd.DataFrame(columns=columns)

    # ties keep first-appearance order
    ordered = products.sort_values("FirstSeen", kind="stable")
    picked = ordered[category.select(ordered, config)]
    picked = picked.sort_values(category.sort_by, ascending=category.ascending, kind="stable")

    limit = config.summary_limit(category.key)
    out = pd.DataFrame({
        "Rank":            range(1, len(picked) + 1),
        "ProductCode":     picked["ProductCode"].to_list(),
        "ProductName":     picked["ProductName"].to_list(),
        "SalesQuantity":   picked["SalesQuantity"].to_list(),
        "TotalQuantity":   picked["TotalQuantity"].to_list(),
        "MinColumn":       picked["MinColumn"].to_list(),
        "LocationSummary": [summarize_locations(e, limit) for e in picked[category.locations_field]],
        "Reason":          category.reason,
    })
    return out[columns]


def classify(
    products: pd.DataFrame,
    config: SlottingConfig = DEFAULT_CONFIG,
) -> Dict[str, pd.DataFrame]:
    """
    Split demand-joined aggregates into the four ranked report categories,
    keyed in report order.
    """
    categories = {}
    for category in CATEGORIES:
        categories[category.key] = rank_category(products, category, config)
        logger.info(f"{category.title}: {len(categories[category.key])} products")
    return categories


@dataclass
class SlottingResult:
    products: pd.DataFrame
    categories: Dict[str, pd.DataFrame]
    dropped: Counter = field(default_factory=Counter)

    def counts(self) -> Dict[str, int]:
        return {key: len(df) for key, df in self.categories.items()}


def run_pipeline(
    inv_df: pd.DataFrame,
    sales_df: pd.DataFrame,
    config: SlottingConfig = DEFAULT_CONFIG,
) -> SlottingResult:
    """
    Clean both exports, build the demand index, aggregate stock per product,
    join demand and classify.
    """
    inventory = clean_inventory(inv_df)
    sales = clean_sales(sales_df)

    index = build_demand_index(sales, config.channel)
    dropped: Counter = Counter()
    products = join_demand(aggregate_inventory(inventory, config, dropped), index)

    excluded = sum(dropped.values())
    if excluded:
        logger.warning(f"Excluded {excluded} inventory rows: {dict(dropped)}")

    return SlottingResult(products, classify(products, config), dropped)
