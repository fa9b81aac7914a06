"""Location code parsing and easy-access rules."""

import pandas as pd

from slotting.location import LocationCode, is_easy_access, parse_locations, zone_matches


class TestParse:
    def test_four_segments(self):
        loc = LocationCode.parse("CC-01-02-01")
        assert loc.zone == "CC"
        assert loc.row == "01"
        assert loc.column == "02"
        assert loc.level == "01"
        assert loc.raw == "CC-01-02-01"
        assert loc.column_number == 2
        assert loc.level_number == 1

    def test_extra_segments_are_invalid(self):
        assert LocationCode.parse("CC-01-02-11-A") is None
        assert LocationCode.parse("CC-01-02-11-") is None

    def test_missing_segment_is_invalid(self):
        assert LocationCode.parse("CC-01-02") is None
        assert LocationCode.parse("CC--02-01") is None
        assert LocationCode.parse("") is None

    def test_missing_values_are_invalid(self):
        assert LocationCode.parse(None) is None
        assert LocationCode.parse(float("nan")) is None

    def test_non_numeric_column(self):
        loc = LocationCode.parse("CC-01-XX-01")
        assert loc is not None
        assert loc.column_number is None

    def test_padded_level(self):
        assert LocationCode.parse("CC-01-02-1").padded_level == "01"


class TestEasyAccess:
    def test_default_levels(self):
        assert is_easy_access("01")
        assert is_easy_access("11")
        assert is_easy_access("12")
        assert not is_easy_access("02")
        assert not is_easy_access("03")

    def test_unpadded_level(self):
        assert is_easy_access("1")
        assert is_easy_access(1)

    def test_custom_levels(self):
        assert is_easy_access("02", levels=("02",))
        assert not is_easy_access("01", levels=("02",))

    def test_location_method(self):
        assert LocationCode.parse("CC-01-05-12").is_easy_access()
        assert not LocationCode.parse("CC-01-05-03").is_easy_access()


class TestZoneMatches:
    def test_prefix(self):
        assert zone_matches("CC-01-02-01", "CC-")

    def test_case_sensitive(self):
        assert not zone_matches("cc-01-02-01", "CC-")

    def test_position_zero_only(self):
        assert not zone_matches("XCC-01-02-01", "CC-")

    def test_non_string(self):
        assert not zone_matches(None, "CC-")


class TestParseLocations:
    def test_frame(self):
        raw = pd.Series(["CC-01-02-01", "CC-01", "CC-01-XX-11", "CC-02-07-03"])
        df = parse_locations(raw)

        assert df["Valid"].tolist() == [True, False, True, True]
        assert df["ColumnNumber"].tolist() == [2, 99, 99, 7]
        assert df["EasyAccess"].tolist() == [True, False, True, False]
        assert df["Level"].tolist() == ["01", "", "11", "03"]

    def test_keeps_index(self):
        raw = pd.Series(["CC-01-02-01"], index=[42])
        assert parse_locations(raw).index.tolist() == [42]

    def test_empty(self):
        df = parse_locations(pd.Series([], dtype=object))
        assert df.empty
        assert "Valid" in df.columns
