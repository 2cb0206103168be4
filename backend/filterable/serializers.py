from rest_framework import serializers


class FilterSerializer(serializers.Serializer):
    """
    Serializer for the structured filter descriptor consumed by front-ends.

    The field names and nesting of this record are the wire contract for
    rendering filter widgets; method, name and errors are never exposed.
    """

    type = serializers.SerializerMethodField()
    readonly = serializers.BooleanField(source="is_writable", read_only=True)
    group = serializers.CharField(source="get_group", read_only=True)
    values = serializers.ListField(source="get_values", read_only=True)
    collection = serializers.CharField(source="get_collection", allow_null=True, read_only=True)

    def get_type(self, obj):
        """Get the filter type tag as a plain string."""
        return obj.get_type().value


class FilterCollectionSerializer(serializers.Serializer):
    """Serializer for a named collection of filters and their options."""

    collection = serializers.CharField(source="name", allow_null=True)
    filters = serializers.SerializerMethodField()
    options = serializers.SerializerMethodField()

    def get_filters(self, obj):
        return obj.to_structured()

    def get_options(self, obj):
        return obj.options()
