"""Inventory aggregation and the demand index."""

from collections import Counter

from slotting.aggregation import aggregate_inventory, build_demand_index, join_demand
from slotting.cleaning import clean_inventory, clean_sales
from slotting.config import DEFAULT_CONFIG

from conftest import inventory_frame, sales_frame


def _aggregate(rows, config=DEFAULT_CONFIG, dropped=None):
    return aggregate_inventory(clean_inventory(inventory_frame(rows)), config, dropped)


class TestAggregateInventory:
    def test_totals_and_min_column(self):
        agg = _aggregate([
            ("P1", "Cream", "CC-01-05-03", 5),
            ("P1", "Cream", "CC-01-02-01", 10),
            ("P1", "Cream", "CC-02-09-02", 7),
        ])
        row = agg.iloc[0]
        assert len(agg) == 1
        assert row["TotalQuantity"] == 22
        assert row["MinColumn"] == 2
        assert row["TotalQuantity"] == sum(q for _, q in row["Locations"])

    def test_locations_keep_row_order(self):
        agg = _aggregate([
            ("P1", "Cream", "CC-01-05-03", 5),
            ("P2", "Toner", "CC-01-01-01", 1),
            ("P1", "Cream", "CC-01-02-01", 10),
        ])
        p1 = agg[agg["ProductCode"] == "P1"].iloc[0]
        assert p1["Locations"] == [("CC-01-05-03", 5), ("CC-01-02-01", 10)]

    def test_first_appearance_order(self):
        agg = _aggregate([
            ("B", "b", "CC-01-01-01", 1),
            ("A", "a", "CC-01-01-01", 1),
            ("B", "b", "CC-01-02-01", 1),
            ("C", "c", "CC-01-01-01", 1),
        ])
        assert agg["ProductCode"].tolist() == ["B", "A", "C"]
        assert agg["FirstSeen"].tolist() == [0, 1, 3]

    def test_easy_access_subset(self):
        agg = _aggregate([
            ("P1", "Cream", "CC-01-02-01", 10),
            ("P1", "Cream", "CC-01-05-03", 5),
            ("P1", "Cream", "CC-01-06-12", 2),
        ])
        assert agg.iloc[0]["EasyAccessLocations"] == [("CC-01-02-01", 10), ("CC-01-06-12", 2)]

    def test_product_name_from_first_row(self):
        agg = _aggregate([
            ("P1", "First name", "CC-01-02-01", 1),
            ("P1", "Second name", "CC-01-03-01", 1),
        ])
        assert agg.iloc[0]["ProductName"] == "First name"

    def test_zone_filtering(self):
        agg = _aggregate([
            ("P1", "Cream", "CC-01-02-01", 10),
            ("P1", "Cream", "DD-01-01-01", 100),
            ("P2", "Toner", "DD-01-01-01", 3),
        ])
        assert agg["ProductCode"].tolist() == ["P1"]
        row = agg.iloc[0]
        assert row["TotalQuantity"] == 10
        assert row["MinColumn"] == 2
        assert row["Locations"] == [("CC-01-02-01", 10)]

    def test_code_is_trimmed(self):
        agg = _aggregate([
            (" P1 ", "Cream", "CC-01-02-01", 1),
            ("P1", "Cream", "CC-01-03-01", 1),
        ])
        assert agg["ProductCode"].tolist() == ["P1"]
        assert agg.iloc[0]["TotalQuantity"] == 2

    def test_non_numeric_column_uses_sentinel(self):
        agg = _aggregate([("P1", "Cream", "CC-01-XX-01", 1)])
        assert agg.iloc[0]["MinColumn"] == 99

    def test_non_numeric_quantity_counts_as_zero(self):
        agg = _aggregate([
            ("P1", "Cream", "CC-01-02-01", "n/a"),
            ("P1", "Cream", "CC-01-03-01", 4),
        ])
        assert agg.iloc[0]["TotalQuantity"] == 4

    def test_dropped_rows_are_counted(self):
        dropped = Counter()
        agg = _aggregate([
            ("", "No code", "CC-01-02-01", 1),
            (None, "No code", "CC-01-02-01", 1),
            ("P1", "Cream", "DD-01-02-01", 1),
            ("P1", "Cream", "CC-01-02", 1),
            ("P1", "Cream", "CC-01-02-01-B", 1),
            ("P2", "Toner", "CC-01-02-01", 1),
        ], dropped=dropped)
        assert agg["ProductCode"].tolist() == ["P2"]
        assert dropped == Counter(missing_product_code=2, outside_zone=1, invalid_location=2)

    def test_nothing_qualifies(self):
        agg = _aggregate([("P1", "Cream", "DD-01-02-01", 1)])
        assert agg.empty
        assert "MinColumn" in agg.columns

    def test_custom_zone_prefix(self):
        cfg = DEFAULT_CONFIG.with_overrides(zone_prefix="DD-")
        agg = _aggregate([
            ("P1", "Cream", "CC-01-02-01", 1),
            ("P2", "Toner", "DD-01-02-01", 1),
        ], config=cfg)
        assert agg["ProductCode"].tolist() == ["P2"]


class TestDemandIndex:
    def test_last_write_wins(self):
        index = build_demand_index(clean_sales(sales_frame([
            ("P1", "B2C", 10),
            ("P1", "B2C", 40),
        ])), "B2C")
        assert index == {"P1": 40}

    def test_channel_is_substring(self):
        index = build_demand_index(clean_sales(sales_frame([
            ("P1", "온라인B2C창고", 7),
            ("P2", "B2B창고", 9),
            ("P3", None, 9),
        ])), "B2C")
        assert index == {"P1": 7}

    def test_other_channel_does_not_overwrite(self):
        index = build_demand_index(clean_sales(sales_frame([
            ("P1", "B2C", 10),
            ("P1", "B2B", 99),
        ])), "B2C")
        assert index == {"P1": 10}

    def test_blank_code_and_bad_quantity(self):
        index = build_demand_index(clean_sales(sales_frame([
            ("  ", "B2C", 5),
            ("P1 ", "B2C", "-"),
        ])), "B2C")
        assert index == {"P1": 0}


class TestJoinDemand:
    def test_absent_products_get_zero(self):
        agg = _aggregate([
            ("P1", "Cream", "CC-01-02-01", 1),
            ("P2", "Toner", "CC-01-03-01", 1),
        ])
        joined = join_demand(agg, {"P1": 600})
        assert joined["SalesQuantity"].tolist() == [600, 0]
        assert "SalesQuantity" not in agg.columns
