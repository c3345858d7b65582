"""Page modules for the UnitLedger Streamlit application."""

from .analysis import render_page as render_analysis_page
from .dashboard import render_page as render_dashboard_page
from .transactions import render_page as render_transactions_page

__all__ = [
    "render_analysis_page",
    "render_dashboard_page",
    "render_transactions_page",
]
