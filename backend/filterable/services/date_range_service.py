"""
Date range service

Turns raw date range picker input ("2024-01-01,2024-01-31", "2024-01-01 - 2024-01-31",
a single date, or a preset such as "last_7_days") into an ordered pair of date bounds.
"""

import calendar
import logging
from datetime import date, timedelta

from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils import timezone

logger = logging.getLogger(__name__)


class DateRangeService:
    """Service for parsing date range input and deriving canonical bounds."""

    DEFAULT_SEPARATORS = [",", " - ", " to ", "|"]

    # Format of mutated values; always accepted
    ISO_FORMAT = "%Y-%m-%d"

    PRESETS = [
        "today",
        "yesterday",
        "last_7_days",
        "last_30_days",
        "this_month",
        "last_month",
        "this_year",
    ]

    @classmethod
    def get_separators(cls):
        """Get range separators from Django settings."""
        return getattr(settings, "FILTERABLE_DATE_RANGE_SEPARATORS", cls.DEFAULT_SEPARATORS)

    @classmethod
    def get_input_formats(cls):
        """
        Get accepted date input formats from Django settings.

        Returns:
            list: Configured formats plus the ISO format, or None to use
            Django's DATE_INPUT_FORMATS
        """
        input_formats = getattr(settings, "FILTERABLE_DATE_INPUT_FORMATS", None)
        if input_formats is None:
            return None

        input_formats = list(input_formats)
        if cls.ISO_FORMAT not in input_formats:
            input_formats.append(cls.ISO_FORMAT)
        return input_formats

    @classmethod
    def get_today(cls):
        """Get the current date, in the current time zone when USE_TZ is enabled."""
        if settings.USE_TZ:
            return timezone.localdate()
        return date.today()

    @classmethod
    def resolve_preset(cls, preset, today=None):
        """
        Resolve a preset name to a (start, end) pair of dates.

        Args:
            preset (str): One of PRESETS
            today (date): Reference date, defaults to the current local date

        Returns:
            tuple: (start, end) dates, or None if the preset is unknown
        """
        today = today or cls.get_today()

        if preset == "today":
            return today, today
        if preset == "yesterday":
            yesterday = today - timedelta(days=1)
            return yesterday, yesterday
        if preset == "last_7_days":
            return today - timedelta(days=6), today
        if preset == "last_30_days":
            return today - timedelta(days=29), today
        if preset == "this_month":
            last_day = calendar.monthrange(today.year, today.month)[1]
            return today.replace(day=1), today.replace(day=last_day)
        if preset == "last_month":
            end = today.replace(day=1) - timedelta(days=1)
            return end.replace(day=1), end
        if preset == "this_year":
            return today.replace(month=1, day=1), today.replace(month=12, day=31)

        return None

    @classmethod
    def split_values(cls, values):
        """
        Split raw picker values into date tokens.

        A value that parses as one date is kept whole. Otherwise it is split on
        the first configured separator whose parts all parse, falling back to
        the first separator it contains.
        Presets are replaced by the ISO dates of their bounds.

        Args:
            values (list): Raw filter values

        Returns:
            list: Non-empty string tokens
        """
        separators = cls.get_separators()
        tokens = []

        for value in values:
            value = str(value).strip()

            bounds = cls.resolve_preset(value) if value in cls.PRESETS else None
            if bounds:
                tokens.extend(bound.isoformat() for bound in bounds)
                continue

            parts = cls._split_value(value, separators)

            tokens.extend(part.strip() for part in parts if part.strip())

        return tokens

    @classmethod
    def _split_value(cls, value, separators):
        """Split one raw value into date parts."""
        if cls.parse_date(value) is not None:
            return [value]

        candidates = [
            [part.strip() for part in value.split(separator) if part.strip()]
            for separator in separators
            if separator in value
        ]
        for parts in candidates:
            if all(cls.parse_date(part) is not None for part in parts):
                return parts

        return candidates[0] if candidates else [value]

    @classmethod
    def parse_date(cls, token):
        """
        Parse a single date token.

        Returns:
            date: Parsed date, or None if the token is not a valid date
        """
        field = forms.DateField(input_formats=cls.get_input_formats())
        try:
            return field.to_python(token)
        except ValidationError:
            return None

    @classmethod
    def derive_bounds(cls, values):
        """
        Derive an ordered pair of date bounds from raw picker values.

        - No tokens: an empty list (no filter applied)
        - One date: a single-day range
        - Two dates: ordered so that start <= end (reversed input is swapped)

        Input that cannot be resolved (unparseable dates or more than two
        tokens) is returned unchanged so validation can report it.

        Args:
            values (list): Raw filter values

        Returns:
            list: [start, end] as ISO date strings, [] or the original values
        """
        tokens = cls.split_values(values)

        if not tokens:
            return []

        if len(tokens) > 2:
            logger.debug(f"Cannot derive date bounds from {len(tokens)} tokens: {tokens!r}")
            return list(values)

        dates = [cls.parse_date(token) for token in tokens]
        if any(parsed is None for parsed in dates):
            logger.debug(f"Cannot parse date range tokens: {tokens!r}")
            return list(values)

        start, end = dates[0], dates[-1]
        if start > end:
            start, end = end, start

        return [start.isoformat(), end.isoformat()]
