import io
from pathlib import Path
from typing import Dict

import pandas as pd

from .config import DEFAULT_CONFIG, SlottingConfig
from .logger import logger


def _read_bytes(source) -> tuple[bytes, str]:
    """
    Return (content, name) for a path or a file-like upload.
    Always rewinds uploads before reading.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            return path.read_bytes(), path.name
        except OSError as e:
            raise ValueError(f"Could not open '{path}': {e}") from e

    try:
        source.seek(0)
    except (AttributeError, OSError):
        pass
    return source.read(), getattr(source, "name", "file")


def _load_table(source, columns: Dict[str, int], header_rows: int) -> pd.DataFrame:
    content, name = _read_bytes(source)
    if not content:
        raise ValueError(f"'{name}' is empty. Please re-upload the export")

    bio = io.BytesIO(content)
    try:
        if name.lower().endswith(".csv"):
            raw = pd.read_csv(bio, header=None, skiprows=header_rows, dtype=str)
        else:
            raw = pd.read_excel(
                bio, sheet_name=0, header=None, skiprows=header_rows,
                dtype=str, engine="openpyxl"
            )
    except pd.errors.EmptyDataError:
        raw = pd.DataFrame()
    except Exception as e:
        raise ValueError(f"Could not read '{name}': {e}") from e

    needed = max(columns.values()) + 1
    if len(raw) and raw.shape[1] < needed:
        raise ValueError(
            f"'{name}' has {raw.shape[1]} columns; expected at least {needed}"
        )

    df = pd.DataFrame({
        col: (raw.iloc[:, pos] if len(raw) else pd.Series(dtype=object))
        for col, pos in columns.items()
    })
    logger.info(f"Loaded '{name}' ({len(df)} rows)")
    return df


def load_inventory_export(source, config: SlottingConfig = DEFAULT_CONFIG) -> pd.DataFrame:
    """
    Read the on-hand stock export (first sheet) into
    ProductName / ProductCode / Location / Quantity columns.
    """
    return _load_table(source, config.inventory_columns, config.header_rows)


def load_sales_export(source, config: SlottingConfig = DEFAULT_CONFIG) -> pd.DataFrame:
    """
    Read the period shipment export (first sheet) into
    ProductCode / Channel / DeliveredQuantity columns.
    """
    return _load_table(source, config.sales_columns, config.header_rows)
