import io
from datetime import date
from pathlib import Path
from typing import Dict, Optional

import pandas as pd
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from .classification import CATEGORY_BY_KEY
from .logger import logger

# column key -> (header, width)
COLUMN_LAYOUT = {
    "Rank":            ("순위", 8),
    "ProductCode":     ("상품코드", 20),
    "ProductName":     ("상품명", 45),
    "SalesQuantity":   ("6개월 배송수량", 15),
    "TotalQuantity":   ("현재 재고", 12),
    "MinColumn":       ("현재 최소열", 12),
    "LocationSummary": ("현재 위치", 50),
    "Reason":          ("추천 사유", 30),
}

HEADER_COLORS = {
    "move_to_front":           "FF4472C4",
    "move_from_front":         "FFED7D31",
    "zero_demand_easy_access": "FFC00000",
    "demand_ranking":          "FF70AD47",
}

# per-sheet header tweaks
HEADER_OVERRIDES = {
    "zero_demand_easy_access": {"LocationSummary": ("1단 위치", 50), "Reason": ("추천 사유", 35)},
}


def default_report_name(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"로케이션_이동추천_배송기준_v2_{today.isoformat()}.xlsx"


def _sheet_frame(key: str, df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    if key == "demand_ranking":
        out = out.drop(columns=["Reason"], errors="ignore")
    if "MinColumn" in out.columns:
        out["MinColumn"] = out["MinColumn"].map(lambda c: f"{c}열")
    return out


def _layout(key: str) -> dict:
    return {**COLUMN_LAYOUT, **HEADER_OVERRIDES.get(key, {})}


def _style_sheet(ws, key: str, columns) -> None:
    layout = _layout(key)
    fill = PatternFill(fill_type="solid", fgColor=HEADER_COLORS.get(key, "FF4472C4"))
    font = Font(bold=True, color="FFFFFFFF")
    for idx, col in enumerate(columns, start=1):
        cell = ws.cell(row=1, column=idx)
        cell.fill = fill
        cell.font = font
        ws.column_dimensions[get_column_letter(idx)].width = layout[col][1]


def write_report(categories: Dict[str, pd.DataFrame], target=None) -> bytes:
    """
    Render each ranked category as its own worksheet and return the .xlsx bytes.
    When `target` is a path, the workbook is also written there.
    """
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        for key, df in categories.items():
            category = CATEGORY_BY_KEY[key]
            frame = _sheet_frame(key, df)
            layout = _layout(key)
            headers = [layout[c][0] for c in frame.columns]
            frame.to_excel(writer, sheet_name=category.title, index=False, header=headers)
            _style_sheet(writer.sheets[category.title], key, frame.columns)

    content = buffer.getvalue()
    if target is not None:
        Path(target).write_bytes(content)
        logger.info(f"Report written: {target}")
    return content


def category_to_text(key: str, df: pd.DataFrame) -> str:
    """Tab-separated rows laid out like the category's worksheet, ready to paste."""
    frame = _sheet_frame(key, df)
    layout = _layout(key)
    headers = [layout[c][0] for c in frame.columns]
    return frame.to_csv(sep="\t", index=False, header=headers)
