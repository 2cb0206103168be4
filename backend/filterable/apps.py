from django.apps import AppConfig


class FilterableConfig(AppConfig):
    name = "filterable"
    verbose_name = "Filterable"
