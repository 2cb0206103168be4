"""
Validation forms for filter values.

Each filter type validates its values by binding them to one of these forms;
the form errors become the filter's ``errors()``.
"""

from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError
from django_filters.fields import DateRangeField
from django_filters.widgets import DateRangeWidget

from .services.date_range_service import DateRangeService


class ValuesField(forms.Field):
    """
    A form field holding a list of values, each cleaned by a child field.

    Errors are prefixed with the position of the offending value.
    """

    default_error_messages = {
        "item_invalid": "Item %(position)s is invalid: %(message)s",
        "max_items": "Ensure there are at most %(limit_value)d value(s) (it has %(show_value)d).",
    }

    def __init__(self, child, *, max_items=None, **kwargs):
        self.child = child
        self.max_items = max_items
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def to_python(self, value):
        if value in self.empty_values:
            return []
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]

    def clean(self, value):
        values = self.to_python(value)
        self.validate(values)

        if self.max_items is not None and len(values) > self.max_items:
            raise ValidationError(
                self.error_messages["max_items"],
                code="max_items",
                params={"limit_value": self.max_items, "show_value": len(values)},
            )

        cleaned = []
        errors = []
        for position, item in enumerate(values, start=1):
            try:
                cleaned.append(self.child.clean(item))
            except ValidationError as e:
                for message in e.messages:
                    errors.append(
                        ValidationError(
                            self.error_messages["item_invalid"],
                            code="item_invalid",
                            params={"position": position, "message": message},
                        )
                    )

        if errors:
            raise ValidationError(errors)

        return cleaned


class FilterForm(forms.Form):
    """Base form binding a filter's values to the "values" field."""

    def __init__(self, values, **kwargs):
        super().__init__(data={"values": list(values)}, **kwargs)


class TextFilterForm(FilterForm):
    """Validates free-text search terms."""

    def __init__(self, values, **kwargs):
        super().__init__(values, **kwargs)
        max_length = getattr(settings, "FILTERABLE_TEXT_MAX_LENGTH", 255)
        self.fields["values"] = ValuesField(forms.CharField(max_length=max_length))


class SelectFilterForm(FilterForm):
    """Validates that every value is one of the declared options."""

    def __init__(self, values, choices, multiple=False, **kwargs):
        super().__init__(values, **kwargs)
        self.fields["values"] = ValuesField(
            forms.ChoiceField(choices=choices),
            max_items=None if multiple else 1,
        )


class DateRangePickerForm(forms.Form):
    """
    Validates date range picker values.

    Values must resolve to at most two dates and the start must not be
    after the end. The cleaned value is a slice of day bounds.
    """

    values = DateRangeField(required=False, widget=DateRangeWidget)

    def __init__(self, values, **kwargs):
        self.tokens = DateRangeService.split_values(values)

        widget = self.base_fields["values"].widget
        bounds = [self.tokens[0], self.tokens[-1]] if self.tokens else []
        data = {
            widget.suffixed("values", suffix): bound
            for suffix, bound in zip(widget.suffixes, bounds)
        }

        super().__init__(data=data, **kwargs)

        input_formats = DateRangeService.get_input_formats()
        if input_formats is not None:
            for field in self.fields["values"].fields:
                field.input_formats = input_formats

    def clean(self):
        cleaned_data = super().clean()

        if len(self.tokens) > 2:
            self.add_error(
                "values",
                ValidationError(
                    "Enter a single date or a start and end date.",
                    code="too_many_dates",
                ),
            )
            return cleaned_data

        bounds = cleaned_data.get("values")
        if bounds and bounds.start and bounds.stop and bounds.start > bounds.stop:
            self.add_error(
                "values",
                ValidationError("The start date must be on or before the end date.", code="reversed"),
            )

        return cleaned_data
