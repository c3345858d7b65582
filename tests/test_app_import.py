import importlib

from app.layout import NAV_LINKS
from visualization import build_category_chart, build_trend_chart, build_unit_chart


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_navigation_covers_all_pages():
    assert [link.slug for link in NAV_LINKS] == ["dashboard", "transactions", "analysis"]


def test_charts_render_placeholders_for_empty_data():
    unit = {"name": "Tenun", "income": 0.0, "expense": 0.0, "profit": 0.0, "has_data": False}

    assert build_unit_chart(unit).layout.annotations[0].text == "Belum ada data"
    assert build_category_chart({}).layout.annotations[0].text == "Belum ada data"
    assert len(build_trend_chart([]).data) == 0


def test_trend_chart_has_income_and_expense_series():
    trend = [{"date": "2023-10-01", "label": "01 Okt", "income": 100.0, "expense": 40.0}]

    fig = build_trend_chart(trend)

    assert [trace.name for trace in fig.data] == ["Pemasukan", "Pengeluaran"]
