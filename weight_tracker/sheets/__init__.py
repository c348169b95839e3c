"""Google Sheets weight log integration."""

from .application import SheetFetchError, WeightSheetPort, fetch_weight_records
from .infrastructure import GoogleSheetCsvAdapter, create_sheet_adapter

__all__ = [
    "SheetFetchError",
    "WeightSheetPort",
    "fetch_weight_records",
    "GoogleSheetCsvAdapter",
    "create_sheet_adapter",
]
