import pandas as pd
from .logger import logger


def _text(series: pd.Series) -> pd.Series:
    return series.fillna("").astype(str)


def clean_inventory(df: pd.DataFrame) -> pd.DataFrame:
    """
    Normalize an on-hand stock export:
      - trim ProductCode (blank when missing)
      - ProductName / Location as plain strings
      - Quantity numeric, non-numeric -> 0
      - Seq = row-encounter order, used as the tie-break downstream
    """
    df = df.copy()

    df["ProductCode"] = _text(df.get("ProductCode", pd.Series("", index=df.index))).str.strip()
    df["ProductName"] = _text(df.get("ProductName", pd.Series("", index=df.index)))
    df["Location"]    = _text(df.get("Location", pd.Series("", index=df.index)))

    if "Quantity" in df.columns:
        df["Quantity"] = (
            pd.to_numeric(df["Quantity"], errors="coerce")
              .fillna(0)
        )
    else:
        df["Quantity"] = 0

    df["Seq"] = range(len(df))
    df = df.reset_index(drop=True)

    logger.info(f"Cleaned inventory ({len(df)} rows)")
    return df


def clean_sales(df: pd.DataFrame) -> pd.DataFrame:
    """
    Normalize a period shipment export:
      - trim ProductCode
      - Channel as string
      - DeliveredQuantity numeric, non-numeric -> 0
    """
    df = df.copy()

    df["ProductCode"] = _text(df.get("ProductCode", pd.Series("", index=df.index))).str.strip()
    df["Channel"]     = _text(df.get("Channel", pd.Series("", index=df.index)))

    if "DeliveredQuantity" in df.columns:
        df["DeliveredQuantity"] = (
            pd.to_numeric(df["DeliveredQuantity"], errors="coerce")
              .fillna(0)
        )
    else:
        df["DeliveredQuantity"] = 0

    df = df.reset_index(drop=True)
    logger.info(f"Cleaned sales ({len(df)} rows)")
    return df
