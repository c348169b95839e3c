from .csv_parser import parse_sheet_date, parse_sheet_weight, parse_weight_csv
from .demo import generate_demo_records

__all__ = [
    "generate_demo_records",
    "parse_sheet_date",
    "parse_sheet_weight",
    "parse_weight_csv",
]
