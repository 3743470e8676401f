"""
Služba exportu údajů spolku / Club export service.
Generuje JSON, CSV a XLSX z projekce spolku.
Renders JSON, CSV and XLSX from a club projection.
"""

import csv
import io
import json
from datetime import datetime
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Font

from spolky.models.club import Club

CLUB_EXPORT_FIELDS = [
    "id",
    "name",
    "registration_number",
    "address",
    "email",
    "phone",
    "created_at",
    "guidelines",
    "guidelines_updated_at",
    "chairman_username",
]

MEDIA_TYPES = {
    "json": "application/json",
    "csv": "text/csv; charset=utf-8",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


class ExportService:
    """Export dat do JSON/CSV/XLSX / Data export to JSON/CSV/XLSX."""

    @staticmethod
    def club_to_dict(club: Club) -> dict[str, Any]:
        """Projekce spolku, data jako ISO 8601 / Club projection, dates as ISO 8601."""
        row = {}
        for f in CLUB_EXPORT_FIELDS:
            val = getattr(club, f, None)
            if isinstance(val, datetime):
                val = val.isoformat()
            row[f] = val
        return row

    @staticmethod
    def to_json(row: dict[str, Any]) -> bytes:
        return json.dumps(row, ensure_ascii=False).encode("utf-8")

    @staticmethod
    def to_csv(rows: list[dict], fields: list[str]) -> bytes:
        """Generovat CSV UTF-8 BOM se středníkem / Generate UTF-8 BOM CSV with ';' separator."""
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=fields, delimiter=";", extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow({f: row.get(f) if row.get(f) is not None else "" for f in fields})
        return ("\ufeff" + output.getvalue()).encode("utf-8")

    @staticmethod
    def to_xlsx(rows: list[dict], fields: list[str], sheet_name: str = "Data") -> bytes:
        """Generovat soubor Excel / Generate an Excel file."""
        wb = Workbook()
        ws = wb.active
        ws.title = sheet_name

        # Hlavičky / Headers
        for col_idx, field in enumerate(fields, 1):
            cell = ws.cell(row=1, column=col_idx, value=field)
            cell.font = Font(bold=True)

        # Data / Data rows
        for row_idx, row in enumerate(rows, 2):
            for col_idx, field in enumerate(fields, 1):
                ws.cell(row=row_idx, column=col_idx, value=row.get(field))

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()

    @classmethod
    def export_club(cls, club: Club, fmt: str) -> tuple[bytes, str, str]:
        """Vrátí (obsah, media type, název souboru) / Returns (content, media type, filename)."""
        row = cls.club_to_dict(club)
        if fmt == "csv":
            content = cls.to_csv([row], CLUB_EXPORT_FIELDS)
        elif fmt == "xlsx":
            content = cls.to_xlsx([row], CLUB_EXPORT_FIELDS, sheet_name="Spolek")
        else:
            fmt = "json"
            content = cls.to_json(row)
        return content, MEDIA_TYPES[fmt], f"club_{club.id}.{fmt}"
