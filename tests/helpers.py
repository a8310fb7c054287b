# tests/helpers.py
import io

import pandas as pd


def build_workbook(sheets: dict) -> bytes:
    """Writes {sheet name: DataFrame} to an in-memory .xlsx file."""
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        for name, frame in sheets.items():
            frame.to_excel(writer, sheet_name=name, index=False)
    return buffer.getvalue()
