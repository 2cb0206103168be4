"""
Option-based filters: a single-choice select and a multi-select.
"""

from collections.abc import Mapping

from ..forms import SelectFilterForm
from .base import Filter, FilterType


class SelectFilter(Filter):
    """A filter whose single value must be one of the declared options."""

    multiple = False

    def __init__(self):
        super().__init__()
        self._options = []

    def with_options(self, options):
        """
        Set the options presented to the user.

        Args:
            options: Mapping of {value: label} or iterable of (value, label) pairs

        Returns:
            SelectFilter: self
        """
        if isinstance(options, Mapping):
            options = options.items()
        self._options = [(str(value), label) for value, label in options]
        return self

    def get_type(self):
        return FilterType.SELECT

    def get_options(self):
        return [{"value": value, "label": label} for value, label in self._options]

    def get_mutated_values(self):
        mutated = []
        for value in self.get_values():
            value = str(value)
            if value not in mutated:
                mutated.append(value)
        return mutated

    def validate(self):
        form = SelectFilterForm(self.get_values(), choices=self._options, multiple=self.multiple)
        return self._store_errors(form)

    def copy(self):
        instance = super().copy()
        instance._options = list(self._options)
        return instance


class MultiSelectFilter(SelectFilter):
    """A filter accepting any number of the declared options."""

    multiple = True

    def get_type(self):
        return FilterType.MULTI_SELECT
