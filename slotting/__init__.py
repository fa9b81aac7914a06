from .logger import logger
from .config import SlottingConfig, DEFAULT_CONFIG
from .location import LocationCode, is_easy_access, zone_matches, parse_locations
from .io_utils import load_inventory_export, load_sales_export
from .cleaning import clean_inventory, clean_sales
from .aggregation import (
    build_demand_index,
    aggregate_inventory,
    join_demand
)
from .classification import (
    CATEGORIES,
    classify,
    summarize_locations,
    run_pipeline,
    SlottingResult
)
from .report import write_report, default_report_name, category_to_text
from .auth import check_password
