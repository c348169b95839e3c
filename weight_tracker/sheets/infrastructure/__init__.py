"""Infrastructure helpers for the weight sheet integration."""

from .client import GoogleSheetCsvAdapter, create_sheet_adapter

__all__ = ["GoogleSheetCsvAdapter", "create_sheet_adapter"]
