"""
Base filter class for the filterable query layer.

A filter binds a query method name to user-supplied values and carries the
metadata front-ends need to render a filter widget (type, group, read-only
flag). Concrete filter types implement the mutation and validation steps.
"""

import copy
import json
import logging
from abc import ABC, abstractmethod
from enum import Enum

from django.core.serializers.json import DjangoJSONEncoder
from django.forms.utils import ErrorDict

from ..serializers import FilterSerializer
from ..utils.text import camel

logger = logging.getLogger(__name__)


class FilterType(str, Enum):
    """Filter type tags understood by front-end filter widgets."""

    TEXT = "text"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    DATE_RANGE_PICKER = "date_range_picker"


class Filter(ABC):
    """
    A filter that can be applied to a query and serialized for a front-end.

    Filters are created with ``on()`` and configured with the fluent
    ``with_*`` setters, which return the same instance.
    """

    # The grouping used wherever filters are grouped together (e.g. select optgroups)
    group = "Other"

    def __init__(self):
        self._method = None
        self._name = None
        self._readonly = False
        self._values = []
        self._collection = None
        self._errors = ErrorDict()

    @classmethod
    def on(cls, method):
        """
        Create a new filter on a query method.

        Args:
            method (str): Field or method identifier (e.g., "created_at")

        Returns:
            Filter: New filter whose method is the camelCased identifier and
            whose name is the identifier unchanged
        """
        instance = cls()
        instance._method = camel(method)
        instance._name = method
        return instance

    def with_name(self, name):
        """Set the name of the filter."""
        self._name = name
        return self

    def with_group(self, group):
        """Set the group of the filter."""
        self.group = group
        return self

    def as_readonly(self, readonly=True):
        """
        Mark the filter as read only.

        Read-only filters are displayed with preset values rather than
        accepting new input.
        """
        self._readonly = readonly
        return self

    def get_method(self):
        return self._method

    def get_name(self):
        return self._name

    def get_collection(self):
        return self._collection

    def set_collection(self, collection):
        self._collection = collection
        return self

    def get_values(self):
        return self._values

    def set_values(self, values):
        """
        Replace the filter values.

        Empty strings are dropped; every other value keeps its relative order.

        Args:
            values: Iterable of raw input values

        Returns:
            Filter: self
        """
        self._values = [value for value in values if value != ""]
        return self

    def is_writable(self):
        """
        Check the read-only flag.

        Despite its name this returns True when the filter IS read only; the
        ``readonly`` field of the structured descriptor is built from it.
        """
        return self._readonly is True

    def is_readonly(self):
        """Check whether the filter is read only."""
        return self.is_writable()

    def get_group(self):
        """Get the filter group, falling back to "Other" when unset."""
        return "Other" if self.group is None else self.group

    @abstractmethod
    def get_type(self):
        """Get the filter type, e.g. FilterType.TEXT."""

    @abstractmethod
    def get_options(self):
        """Get the options that should be presented to the user."""

    @abstractmethod
    def get_mutated_values(self):
        """Get the filter values prepared for the query method."""

    @abstractmethod
    def validate(self):
        """
        Validate the current values.

        Implementations store the validation errors on the filter and
        return the bound form they validated with.
        """

    def mutate(self):
        """Replace the current values with the mutated values."""
        mutated = self.get_mutated_values()
        logger.debug(f"Mutated filter '{self._name}' values {self._values!r} -> {mutated!r}")
        self._values = mutated
        return self

    def errors(self):
        return self._errors

    def is_valid(self):
        return not self._errors

    def _store_errors(self, form):
        """Store the errors of a bound form and return the form."""
        self._errors = form.errors
        if self._errors:
            logger.debug(f"Filter '{self._name}' failed validation: {self._errors.get_json_data()}")
        return form

    def to_structured(self):
        """
        Serialize the filter to its structured descriptor.

        Returns:
            dict: ``{"type", "readonly", "group", "values", "collection"}``
        """
        return dict(FilterSerializer(self).data)

    def to_json(self, **options):
        """Serialize the structured descriptor to JSON; options go to ``json.dumps``."""
        return json.dumps(self.to_structured(), cls=DjangoJSONEncoder, **options)

    def copy(self):
        """
        Copy the filter.

        The copy never shares its values list or its errors with the source,
        so validating either instance leaves the other untouched.
        """
        instance = copy.copy(self)
        instance._values = list(self._values)
        instance._errors = ErrorDict(
            {field: messages.copy() for field, messages in self._errors.items()}
        )
        return instance

    def __repr__(self):
        return f"<{type(self).__name__} name={self._name!r} method={self._method!r}>"
