from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from .backends import FilterableBackend
from .exceptions import UnknownFilterCollection
from .serializers import FilterCollectionSerializer


class FilterableViewMixin:
    """
    ViewSet mixin describing the view's filters to front-ends.

    Adds a ``filters`` list route returning the requested collection with the
    request's values bound:

        {"collection": "...", "filters": {name: descriptor}, "options": {name: [...]}}
    """

    filterable_backend_class = FilterableBackend

    @action(detail=False, methods=["get"])
    def filters(self, request):
        """Describe the filters of the requested collection."""
        backend = self.filterable_backend_class()
        try:
            collection = backend.get_collection(request, self)
        except UnknownFilterCollection as e:
            raise ValidationError({backend.get_collection_param(): e.messages})

        if collection is None:
            return Response({"collection": None, "filters": {}, "options": {}})

        serializer = FilterCollectionSerializer(collection)
        return Response(serializer.data)
