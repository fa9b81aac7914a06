import pandas as pd
import pytest
from openpyxl import Workbook


def inventory_frame(rows):
    """rows: (code, name, location, qty) tuples, in export order."""
    return pd.DataFrame(rows, columns=["ProductCode", "ProductName", "Location", "Quantity"])


def sales_frame(rows):
    """rows: (code, channel, delivered) tuples."""
    return pd.DataFrame(rows, columns=["ProductCode", "Channel", "DeliveredQuantity"])


def _write_sheet(path, header_rows, rows):
    wb = Workbook()
    ws = wb.active
    for header in header_rows:
        ws.append(header)
    for row in rows:
        ws.append(row)
    wb.save(path)
    return path


@pytest.fixture
def write_inventory_xlsx(tmp_path):
    """Write an on-hand stock export laid out like the WMS download (13 columns)."""
    def _write(rows, name="inventory.xlsx"):
        data = []
        for code, pname, location, qty in rows:
            parts = str(location).split("-")
            col = parts[2] if len(parts) > 2 else None
            level = parts[3] if len(parts) > 3 else None
            data.append([None, pname, code, None, None, "B2C창고", location, qty,
                         None, None, None, col, level])
        headers = [["재고현황"], ["No", "상품명", "상품코드", "", "", "창고", "로케이션", "수량",
                                "", "", "", "열", "단"]]
        return _write_sheet(tmp_path / name, headers, data)
    return _write


@pytest.fixture
def write_sales_xlsx(tmp_path):
    """Write a period shipment export (7 columns)."""
    def _write(rows, name="sales.xlsx"):
        data = [[code, "상품", channel, 0, 0, 0, qty] for code, channel, qty in rows]
        headers = [["기간별 수불현황"], ["상품코드", "상품명", "창고", "기초", "입고", "출고", "배송수량"]]
        return _write_sheet(tmp_path / name, headers, data)
    return _write
