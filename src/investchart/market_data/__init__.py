"""Market data records and the extractors that build them from chart responses."""

from .chart_extractor import extract_time_series
from .models import QuoteSummary, TimeSeries
from .summary_extractor import extract_quote_summary
from .symbols import display_symbol

__all__ = [
    "QuoteSummary",
    "TimeSeries",
    "display_symbol",
    "extract_quote_summary",
    "extract_time_series",
]
