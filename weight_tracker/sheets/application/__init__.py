"""Application layer helpers for the weight sheet integration."""

from .ports import SheetFetchError, WeightSheetPort
from .services import fetch_weight_records

__all__ = ["SheetFetchError", "WeightSheetPort", "fetch_weight_records"]
