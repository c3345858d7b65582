from __future__ import annotations

import csv
import io
from datetime import date

from core.export import (
    build_csv_export,
    build_print_report,
    export_filename,
    render_print_html,
)


def test_csv_export_header_and_rows(make_txn):
    transactions = [
        make_txn("1", "2023-10-01", 3500000, "income", "Las", "Jasa Las Pagar Besi"),
        make_txn("2", "2023-10-02", 450000.5, "expense", "Doorsmeer", "Sabun 20\" & Wax"),
    ]

    text = build_csv_export(transactions)
    lines = text.split("\n")

    assert lines[0] == "Tanggal,Kategori,Deskripsi,Tipe,Jumlah (IDR)"
    assert lines[1] == "2023-10-01,Las,Jasa Las Pagar Besi,Pemasukan,3500000"
    assert lines[2] == '2023-10-02,Doorsmeer,"Sabun 20"" & Wax",Pengeluaran,450000.5'
    assert text.endswith("\n")
    assert len(lines) == 4


def test_csv_export_quotes_fields_containing_commas(make_txn):
    transactions = [make_txn("1", "2023-10-01", 1000, "income", "Las, Besi", "Pagar, pintu\nkanopi")]

    rows = list(csv.reader(io.StringIO(build_csv_export(transactions))))

    assert rows[1] == ["2023-10-01", "Las, Besi", "Pagar, pintu\nkanopi", "Pemasukan", "1000"]
    assert all(len(row) == 5 for row in rows)


def test_csv_export_of_empty_list_is_header_only():
    assert build_csv_export([]) == "Tanggal,Kategori,Deskripsi,Tipe,Jumlah (IDR)\n"


def test_export_filename_embeds_date():
    assert export_filename(date(2024, 2, 29)) == "laporan_keuangan_2024-02-29.csv"


def test_print_report_appends_totals(sample_transactions):
    report = build_print_report(sample_transactions, printed_on=date(2023, 10, 31))

    assert len(report.rows) == len(sample_transactions)
    assert report.subtitle == "Dicetak pada: 31 Oktober 2023"
    assert report.summary_rows == (
        ("Total Pemasukan", "Rp 6.350.000"),
        ("Total Pengeluaran", "Rp 1.100.000"),
        ("Saldo Akhir", "Rp 5.250.000"),
    )
    assert report.rows[0].amount == "+ Rp 3.500.000"
    assert report.rows[1].type_label == "Pengeluaran"


def test_print_report_period_subtitle_requires_both_dates(sample_transactions):
    both = build_print_report(sample_transactions, start_date="2023-10-01", end_date="2023-10-31")
    start_only = build_print_report(sample_transactions, start_date="2023-10-01", printed_on=date(2023, 11, 1))

    assert both.subtitle == "Periode: 2023-10-01 s/d 2023-10-31"
    assert start_only.subtitle == "Dicetak pada: 1 November 2023"


def test_print_html_escapes_descriptions(make_txn):
    transactions = [make_txn("1", "2023-10-01", 1000, "income", "Las", "<b>Las</b> & Co")]

    page = render_print_html(build_print_report(transactions, printed_on=date(2023, 10, 1)))

    assert "&lt;b&gt;Las&lt;/b&gt; &amp; Co" in page
    assert "Saldo Akhir" in page
    assert "<button" not in page
