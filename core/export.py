"""CSV and print report builders for the transaction table."""

from __future__ import annotations

import html
import math
from dataclasses import dataclass
from datetime import date
from typing import Sequence

import pandas as pd

from analytics.aggregation import compute_summary
from config.categories import type_label
from core.formatting import format_currency, format_long_date
from core.models import FinancialSummary, Transaction

__all__ = [
    "CSV_HEADERS",
    "PrintReport",
    "PrintRow",
    "build_csv_export",
    "build_print_report",
    "export_filename",
    "render_print_html",
]

CSV_HEADERS: tuple[str, ...] = ("Tanggal", "Kategori", "Deskripsi", "Tipe", "Jumlah (IDR)")
REPORT_TITLE = "Laporan Keuangan Kegiatan Kerja"


def _csv_amount(value: float) -> str:
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def build_csv_export(transactions: Sequence[Transaction]) -> str:
    """Return comma-delimited export text for the given transactions.

    Fields containing a delimiter, quote or newline are quoted with inner
    quotes doubled; the type column carries the Indonesian label instead of
    the raw value.
    """

    rows = [
        (t.date, t.category, t.description, type_label(t.type), _csv_amount(t.amount))
        for t in transactions
    ]
    frame = pd.DataFrame.from_records(rows, columns=list(CSV_HEADERS))
    return frame.to_csv(index=False, lineterminator="\n")


def export_filename(today: date | None = None) -> str:
    day = today or date.today()
    return f"laporan_keuangan_{day.isoformat()}.csv"


@dataclass(frozen=True)
class PrintRow:
    date: str
    description: str
    category: str
    type_label: str
    amount: str
    is_income: bool


@dataclass(frozen=True)
class PrintReport:
    title: str
    subtitle: str
    rows: tuple[PrintRow, ...]
    summary: FinancialSummary
    summary_rows: tuple[tuple[str, str], ...]


def build_print_report(
    transactions: Sequence[Transaction],
    start_date: str | None = None,
    end_date: str | None = None,
    printed_on: date | None = None,
) -> PrintReport:
    """Build the print view: table rows plus income/expense/balance totals."""

    if start_date and end_date:
        subtitle = f"Periode: {start_date} s/d {end_date}"
    else:
        subtitle = f"Dicetak pada: {format_long_date(printed_on or date.today())}"

    rows = tuple(
        PrintRow(
            date=format_long_date(t.date),
            description=t.description,
            category=t.category,
            type_label=type_label(t.type),
            amount=f"{'+' if t.is_income else '-'} {format_currency(t.amount)}",
            is_income=t.is_income,
        )
        for t in transactions
    )

    summary = compute_summary(transactions)
    summary_rows = (
        ("Total Pemasukan", format_currency(summary["total_income"])),
        ("Total Pengeluaran", format_currency(summary["total_expense"])),
        ("Saldo Akhir", format_currency(summary["balance"])),
    )

    return PrintReport(
        title=REPORT_TITLE,
        subtitle=subtitle,
        rows=rows,
        summary=summary,
        summary_rows=summary_rows,
    )


_PRINT_CSS = """
body { font-family: Inter, Arial, sans-serif; color: #1e293b; margin: 24px; }
h1 { font-size: 20px; margin: 0 0 4px; }
p.subtitle { color: #64748b; margin: 0 0 16px; }
table { width: 100%; border-collapse: collapse; font-size: 12px; }
th, td { border-bottom: 1px solid #e2e8f0; padding: 6px 8px; text-align: left; }
th { background: #f8fafc; }
td.amount, th.amount { text-align: right; white-space: nowrap; }
tr.income td.amount { color: #059669; }
tr.expense td.amount { color: #dc2626; }
tfoot td { font-weight: 700; border-top: 2px solid #cbd5e1; }
"""


def render_print_html(report: PrintReport) -> str:
    """Render ``report`` as a standalone HTML page for print-to-PDF."""

    body_rows = "".join(
        f"<tr class='{'income' if row.is_income else 'expense'}'>"
        f"<td>{html.escape(row.date)}</td>"
        f"<td>{html.escape(row.description)}</td>"
        f"<td>{html.escape(row.category)}</td>"
        f"<td>{html.escape(row.type_label)}</td>"
        f"<td class='amount'>{html.escape(row.amount)}</td>"
        "</tr>"
        for row in report.rows
    )
    footer_rows = "".join(
        f"<tr><td colspan='4'>{html.escape(label)}</td><td class='amount'>{html.escape(value)}</td></tr>"
        for label, value in report.summary_rows
    )
    return (
        "<!DOCTYPE html><html lang='id'><head><meta charset='utf-8'>"
        f"<title>{html.escape(report.title)}</title><style>{_PRINT_CSS}</style></head><body>"
        f"<h1>{html.escape(report.title)}</h1>"
        f"<p class='subtitle'>{html.escape(report.subtitle)}</p>"
        "<table><thead><tr><th>Tanggal</th><th>Deskripsi</th><th>Kategori</th><th>Tipe</th>"
        "<th class='amount'>Jumlah</th></tr></thead>"
        f"<tbody>{body_rows}</tbody><tfoot>{footer_rows}</tfoot></table>"
        "</body></html>"
    )
