from .date_range_service import DateRangeService

__all__ = ["DateRangeService"]
