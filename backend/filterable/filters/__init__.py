"""
Filter types for the filterable query layer.
"""

from .base import Filter, FilterType
from .date_range_picker import DateRangePickerFilter
from .select import MultiSelectFilter, SelectFilter
from .text import TextFilter

__all__ = [
    "Filter",
    "FilterType",
    "DateRangePickerFilter",
    "MultiSelectFilter",
    "SelectFilter",
    "TextFilter",
]
