"""Streamlit application package for UnitLedger."""

from .main import main

__all__ = ["main"]
