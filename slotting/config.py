from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

# -----------------------
# Input sheet layouts (zero-based column positions)
# -----------------------
INVENTORY_COLUMNS = {
    "ProductName": 1,
    "ProductCode": 2,
    "Location": 6,
    "Quantity": 7,
}
SALES_COLUMNS = {
    "ProductCode": 0,
    "Channel": 2,
    "DeliveredQuantity": 6,
}


@dataclass(frozen=True)
class SlottingConfig:
    """
    Every tunable literal of the slotting run.
    Defaults reproduce the thresholds the warehouse team tuned by hand.
    """
    channel: str = "B2C"
    zone_prefix: str = "CC-"
    easy_access_levels: Tuple[str, ...] = ("01", "11", "12")

    # Move-to-front: sales >= min_sales AND min column > min_column
    move_to_front_min_sales: float = 500
    move_to_front_min_column: int = 3
    # Move-from-front: sales < max_sales AND min column <= max_column
    move_from_front_max_sales: float = 100
    move_from_front_max_column: int = 1

    # Stands in for a missing/non-numeric column so it never wins "lowest column"
    column_sentinel: int = 99

    # Location-summary truncation per category (None = unlimited)
    summary_limits: Dict[str, Optional[int]] = field(default_factory=lambda: {
        "move_to_front": 5,
        "move_from_front": None,
        "zero_demand_easy_access": 5,
        "demand_ranking": 3,
    })

    header_rows: int = 2
    inventory_columns: Dict[str, int] = field(default_factory=lambda: dict(INVENTORY_COLUMNS))
    sales_columns: Dict[str, int] = field(default_factory=lambda: dict(SALES_COLUMNS))

    def with_overrides(self, **overrides) -> "SlottingConfig":
        """Copy with the given fields replaced; ``None`` values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "easy_access_levels" in changes:
            changes["easy_access_levels"] = parse_levels(changes["easy_access_levels"])
        return replace(self, **changes)

    def summary_limit(self, category: str) -> Optional[int]:
        return self.summary_limits.get(category)


def parse_levels(value) -> Tuple[str, ...]:
    """
    Normalize "01,11,12" or an iterable of levels into zero-padded strings.
    """
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = list(value)
    levels = [str(p).strip().zfill(2) for p in parts if str(p).strip()]
    return tuple(levels)


DEFAULT_CONFIG = SlottingConfig()
