from ..forms import TextFilterForm
from .base import Filter, FilterType


class TextFilter(Filter):
    """A free-text filter, e.g. a search box."""

    def get_type(self):
        return FilterType.TEXT

    def get_options(self):
        return []

    def get_mutated_values(self):
        stripped = (str(value).strip() for value in self.get_values() if value is not None)
        return [value for value in stripped if value]

    def validate(self):
        return self._store_errors(TextFilterForm(self.get_values()))
