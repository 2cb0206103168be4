"""
Filter descriptors for Django query layers.

Filters describe one filterable field each; a FilterCollection applies a set
of them to a queryset and serializes them for front-end filter widgets.
"""
