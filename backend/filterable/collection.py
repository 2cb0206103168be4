"""
Filter collections

A FilterCollection is a named set of filters applied to a query together. It
binds request parameters to copies of its filters, mutates and validates
them, applies the valid ones through their query method names and serializes
the whole set for a front-end.
"""

import logging

from .exceptions import FilterMethodNotFound

logger = logging.getLogger(__name__)


class FilterCollection:
    """A named collection of filters."""

    def __init__(self, name, filters):
        self.name = name
        self.filters = list(filters)

    def __iter__(self):
        return iter(self.filters)

    def __len__(self):
        return len(self.filters)

    def __getitem__(self, name):
        for filter_ in self.filters:
            if filter_.get_name() == name:
                return filter_
        raise KeyError(name)

    def bind(self, params):
        """
        Bind request parameters to copies of the filters.

        Args:
            params: QueryDict, or a plain mapping of filter name to value(s)

        Returns:
            FilterCollection: New collection; this collection is left untouched
        """
        bound = []
        for filter_ in self.filters:
            instance = filter_.copy()
            instance.set_collection(self.name)
            values = self._get_param_values(params, filter_.get_name())
            if values is not None:
                instance.set_values(values)
            bound.append(instance)

        return FilterCollection(self.name, bound)

    @staticmethod
    def _get_param_values(params, name):
        """Get the list of values submitted for a filter, or None if absent."""
        if name not in params:
            return None
        if hasattr(params, "getlist"):
            return params.getlist(name)

        value = params[name]
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]

    def prepare(self):
        """Mutate and then validate every filter."""
        for filter_ in self.filters:
            filter_.mutate()
            filter_.validate()
        return self

    def errors(self):
        """
        Get the validation errors of invalid filters.

        Returns:
            dict: Filter name mapped to its ErrorDict
        """
        return {
            filter_.get_name(): filter_.errors() for filter_ in self.filters if not filter_.is_valid()
        }

    def is_valid(self):
        return not self.errors()

    def apply(self, query):
        """
        Apply the filters to a query.

        Filters are prepared first. Each valid filter with values calls the
        query method named by ``get_method()`` with its values; the return
        value becomes the query for the next filter. Invalid filters are
        skipped.

        Args:
            query: QuerySet or any object exposing the filter methods

        Returns:
            The filtered query

        Raises:
            FilterMethodNotFound: If the query has no method for a filter
        """
        self.prepare()

        applied = 0
        for filter_ in self.filters:
            if not filter_.is_valid():
                logger.warning(
                    f"Skipping invalid filter '{filter_.get_name()}' in collection "
                    f"'{self.name}': {filter_.errors().get_json_data()}"
                )
                continue

            if not filter_.get_values():
                continue

            method = getattr(query, filter_.get_method(), None)
            if not callable(method):
                raise FilterMethodNotFound(query, filter_.get_method())

            query = method(filter_.get_values())
            applied += 1

        logger.info(f"Applied {applied} of {len(self.filters)} filters from collection '{self.name}'")
        return query

    def to_structured(self):
        """Serialize every filter, keyed by filter name."""
        return {filter_.get_name(): filter_.to_structured() for filter_ in self.filters}

    def options(self):
        """Get the options of every filter, keyed by filter name."""
        return {filter_.get_name(): filter_.get_options() for filter_ in self.filters}
