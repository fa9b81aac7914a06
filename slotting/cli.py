"""
Batch slotting report.

USAGE:
    slotting-report 재고현황.xlsx 기간별_수불현황.xlsx
    slotting-report inventory.xlsx sales.xlsx -o report.xlsx --channel B2C
    slotting-report inventory.csv sales.csv --zone-prefix CC- --easy-levels 01,11,12
"""
import argparse
import sys

from .classification import CATEGORIES, run_pipeline
from .config import DEFAULT_CONFIG
from .io_utils import load_inventory_export, load_sales_export
from .logger import logger
from .report import default_report_name, write_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slotting-report",
        description="Recommend storage-location moves from stock and shipment exports.",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("inventory", help="On-hand stock export (.xlsx or .csv)")
    parser.add_argument("sales", help="Period shipment export (.xlsx or .csv)")
    parser.add_argument("-o", "--output", help="Output workbook (default: dated file name)")
    parser.add_argument("--channel", help=f"Demand channel substring (default: {DEFAULT_CONFIG.channel})")
    parser.add_argument("--zone-prefix", help=f"Pickable-storage prefix (default: {DEFAULT_CONFIG.zone_prefix})")
    parser.add_argument(
        "--easy-levels",
        help="Comma-separated easy-access levels (default: "
             + ",".join(DEFAULT_CONFIG.easy_access_levels) + ")",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = DEFAULT_CONFIG.with_overrides(
        channel=args.channel,
        zone_prefix=args.zone_prefix,
        easy_access_levels=args.easy_levels,
    )

    try:
        inv_df = load_inventory_export(args.inventory, config)
        sales_df = load_sales_export(args.sales, config)
    except ValueError as e:
        logger.error(str(e))
        return 1

    result = run_pipeline(inv_df, sales_df, config)
    output = args.output or default_report_name()
    write_report(result.categories, output)

    print(f"Report: {output}")
    for idx, category in enumerate(CATEGORIES, start=1):
        print(f"Sheet {idx} - {category.title}: {len(result.categories[category.key])} products")
    return 0


if __name__ == "__main__":
    sys.exit(main())
