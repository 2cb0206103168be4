"""
Django REST framework filter backend for filter collections.

Views declare their filter collections and this backend binds the request
query parameters to the requested collection and applies it to the queryset.
"""

import logging

from django.conf import settings
from django_filters.utils import translate_validation
from rest_framework.exceptions import ValidationError
from rest_framework.filters import BaseFilterBackend

from .collection import FilterCollection
from .exceptions import UnknownFilterCollection

logger = logging.getLogger(__name__)


class FilterableBackend(BaseFilterBackend):
    """
    Filter backend applying a view's filter collections.

    Views provide either a ``filter_collections`` attribute or a
    ``get_filter_collections()`` method returning ``{name: [Filter, ...]}``.
    The collection is picked with the ``FILTERABLE_COLLECTION_PARAM`` query
    parameter and defaults to the first declared collection.
    """

    def get_collection_param(self):
        return getattr(settings, "FILTERABLE_COLLECTION_PARAM", "collection")

    def get_filter_collections(self, view):
        if hasattr(view, "get_filter_collections"):
            return view.get_filter_collections()
        return getattr(view, "filter_collections", None) or {}

    def get_collection(self, request, view):
        """
        Get the requested filter collection, bound to the request parameters.

        Returns:
            FilterCollection: Bound collection, or None if the view declares none

        Raises:
            UnknownFilterCollection: If the requested collection is not declared
        """
        collections = self.get_filter_collections(view)
        if not collections:
            return None

        name = request.query_params.get(self.get_collection_param())
        if not name:
            name = next(iter(collections))

        if name not in collections:
            raise UnknownFilterCollection(
                f"Unknown filter collection '{name}'. "
                f"Available collections: {', '.join(collections)}",
                code="unknown_collection",
            )

        return FilterCollection(name, collections[name]).bind(request.query_params)

    def filter_queryset(self, request, queryset, view):
        try:
            collection = self.get_collection(request, view)
        except UnknownFilterCollection as e:
            raise ValidationError({self.get_collection_param(): e.messages})

        if collection is None:
            return queryset

        queryset = collection.apply(queryset)

        if not collection.is_valid() and getattr(settings, "FILTERABLE_RAISE_EXCEPTION", True):
            errors = collection.errors()
            logger.info(f"Rejecting request with invalid filters: {', '.join(errors)}")
            raise ValidationError(
                {name: translate_validation(error_dict).detail for name, error_dict in errors.items()}
            )

        return queryset
