from typing import NamedTuple, Optional, Iterable

import pandas as pd

from .config import DEFAULT_CONFIG

DELIMITER = "-"


class LocationCode(NamedTuple):
    """
    A storage location such as ``CC-01-02-01``: zone, row, column, level.
    Segments stay as the source strings; numeric views are derived.
    """
    zone: str
    row: str
    column: str
    level: str
    raw: str

    @classmethod
    def parse(cls, raw) -> Optional["LocationCode"]:
        """Return the parsed location, or None unless it has exactly four non-empty parts."""
        if raw is None or (not isinstance(raw, str) and pd.isna(raw)):
            return None
        text = str(raw)
        parts = [p.strip() for p in text.split(DELIMITER)]
        if len(parts) != 4 or not all(parts):
            return None
        zone, row, column, level = parts
        return cls(zone, row, column, level, text)

    @property
    def column_number(self) -> Optional[int]:
        return _to_int(self.column)

    @property
    def level_number(self) -> Optional[int]:
        return _to_int(self.level)

    @property
    def padded_level(self) -> str:
        return self.level.zfill(2)

    def is_easy_access(self, levels: Iterable[str] = DEFAULT_CONFIG.easy_access_levels) -> bool:
        return is_easy_access(self.level, levels)


def _to_int(segment: str) -> Optional[int]:
    return int(segment) if segment.isdigit() else None


def is_easy_access(level, levels: Iterable[str] = DEFAULT_CONFIG.easy_access_levels) -> bool:
    """True iff the zero-padded level is one of the low-effort shelf levels."""
    return str(level).strip().zfill(2) in set(levels)


def zone_matches(raw, prefix: str) -> bool:
    """Case-sensitive prefix test on the raw location string."""
    return isinstance(raw, str) and raw.startswith(prefix)


def parse_locations(
    raw: pd.Series,
    levels: Iterable[str] = DEFAULT_CONFIG.easy_access_levels,
    sentinel: int = DEFAULT_CONFIG.column_sentinel,
) -> pd.DataFrame:
    """
    Parse a Series of raw location strings into a frame of
    Zone, Row, Column, Level, ColumnNumber, EasyAccess and Valid.
    ColumnNumber falls back to `sentinel` when the column is not a positive number.
    """
    levels = set(levels)
    codes = [LocationCode.parse(v) for v in raw]

    def _part(attr):
        return [getattr(c, attr) if c is not None else "" for c in codes]

    return pd.DataFrame({
        "Zone":         _part("zone"),
        "Row":          _part("row"),
        "Column":       _part("column"),
        "Level":        _part("level"),
        "ColumnNumber": [
            (c.column_number or sentinel) if c is not None else sentinel for c in codes
        ],
        "EasyAccess":   [c is not None and c.padded_level in levels for c in codes],
        "Valid":        [c is not None for c in codes],
    }, index=raw.index).astype({"ColumnNumber": int, "EasyAccess": bool, "Valid": bool})
