from django.db import models


class FilterableQuerySet(models.QuerySet):
    """
    QuerySet that can be narrowed by a FilterCollection.

    Subclasses define one method per filter, named by the filter's
    camelCased identifier and accepting the filter values, e.g.::

        class FileQuerySet(FilterableQuerySet):
            def uploadedAt(self, values):
                start, end = values
                return self.filter(uploaded_at__date__range=(start, end))
    """

    def filter_by(self, collection):
        """Apply every valid filter of a collection to this queryset."""
        return collection.apply(self)
