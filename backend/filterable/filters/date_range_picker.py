from ..forms import DateRangePickerForm
from ..services.date_range_service import DateRangeService
from .base import Filter, FilterType


class DateRangePickerFilter(Filter):
    """
    A filter that narrows query results with the input from a date range picker.

    The picker submits one range value; mutation turns it into an ordered
    pair of ISO dates the query method receives as ``[start, end]``.
    """

    group = "Dates"

    date_range_service = DateRangeService

    def get_type(self):
        return FilterType.DATE_RANGE_PICKER

    def get_options(self):
        return []

    def get_mutated_values(self):
        return self.date_range_service.derive_bounds(self.get_values())

    def validate(self):
        return self._store_errors(DateRangePickerForm(self.get_values()))

    def get_bounds(self):
        """
        Get the validated range as a slice of timezone-aware day bounds.

        Returns:
            slice: ``slice(start_of_first_day, end_of_last_day)``, or None when
            the values are empty or invalid
        """
        form = DateRangePickerForm(self.get_values())
        if not form.is_valid():
            return None
        return form.cleaned_data["values"]
