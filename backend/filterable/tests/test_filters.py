"""
Test cases for the shared filter contract.
"""

import json

from django.test import SimpleTestCase

from ..filters import DateRangePickerFilter, Filter, FilterType, SelectFilter, TextFilter


class FilterContractTestCase(SimpleTestCase):
    """Test behavior every filter type shares."""

    def test_filter_is_abstract(self):
        """Test the base filter cannot be instantiated."""
        with self.assertRaises(TypeError):
            Filter()

    def test_on_camel_cases_method_and_keeps_name(self):
        """Test on() derives the method name and keeps the identifier as name."""
        filter_ = TextFilter.on("created_at")

        self.assertEqual(filter_.get_method(), "createdAt")
        self.assertEqual(filter_.get_name(), "created_at")

    def test_on_accepts_any_identifier(self):
        """Test on() accepts odd identifiers without raising."""
        self.assertEqual(TextFilter.on("someField").get_method(), "someField")
        self.assertEqual(TextFilter.on("some-field name").get_method(), "someFieldName")
        self.assertEqual(TextFilter.on("").get_method(), "")
        self.assertEqual(TextFilter.on("").get_name(), "")

    def test_fluent_setters_return_same_instance(self):
        """Test with_name and with_group mutate and return the filter itself."""
        filter_ = TextFilter.on("title")

        self.assertIs(filter_.with_name("Title"), filter_)
        self.assertIs(filter_.with_group("Content"), filter_)
        self.assertEqual(filter_.get_name(), "Title")
        self.assertEqual(filter_.get_group(), "Content")
        # The method name is unaffected by renaming
        self.assertEqual(filter_.get_method(), "title")

    def test_set_values_strips_empty_strings(self):
        """Test set_values drops exact empty strings and keeps order."""
        filter_ = TextFilter.on("title").set_values(["b", "", "a", " ", "", 0, None])

        self.assertEqual(filter_.get_values(), ["b", "a", " ", 0, None])

    def test_set_values_accepts_any_iterable(self):
        """Test set_values accepts tuples and generators."""
        filter_ = TextFilter.on("title").set_values(value for value in ("x", "", "y"))

        self.assertEqual(filter_.get_values(), ["x", "y"])

    def test_default_group(self):
        """Test groups default to Other, and Dates for date range pickers."""
        self.assertEqual(TextFilter.on("title").get_group(), "Other")
        self.assertEqual(SelectFilter.on("status").get_group(), "Other")
        self.assertEqual(DateRangePickerFilter.on("created_at").get_group(), "Dates")

    def test_group_falls_back_to_other_when_unset(self):
        """Test a cleared group reads back as Other."""
        filter_ = DateRangePickerFilter.on("created_at").with_group(None)

        self.assertEqual(filter_.get_group(), "Other")
        self.assertEqual(filter_.to_structured()["group"], "Other")

    def test_with_group_does_not_leak_to_other_instances(self):
        """Test with_group only changes the instance it is called on."""
        DateRangePickerFilter.on("created_at").with_group("Timeline")

        self.assertEqual(DateRangePickerFilter.on("updated_at").get_group(), "Dates")

    def test_is_writable_reports_readonly_flag(self):
        """Test is_writable is True only when the filter is read only."""
        filter_ = TextFilter.on("title")
        self.assertFalse(filter_.is_writable())
        self.assertFalse(filter_.is_readonly())

        filter_.as_readonly()
        self.assertTrue(filter_.is_writable())
        self.assertTrue(filter_.is_readonly())

        # Only an explicit True counts
        filter_.as_readonly(1)
        self.assertFalse(filter_.is_writable())

    def test_collection_accessors(self):
        """Test the collection tag can be set and overwritten."""
        filter_ = TextFilter.on("title")
        self.assertIsNone(filter_.get_collection())

        filter_.set_collection("reviews")
        self.assertEqual(filter_.get_collection(), "reviews")

        filter_.set_collection("products")
        self.assertEqual(filter_.get_collection(), "products")

    def test_mutate_replaces_values(self):
        """Test mutate swaps values for the mutated values and chains."""
        filter_ = TextFilter.on("title").set_values(["  hello ", "   "])

        self.assertIs(filter_.mutate(), filter_)
        self.assertEqual(filter_.get_values(), ["hello"])

    def test_errors_empty_before_validation(self):
        """Test a new filter has no errors."""
        filter_ = TextFilter.on("title")

        self.assertEqual(dict(filter_.errors()), {})
        self.assertTrue(filter_.is_valid())


class FilterSerializationTestCase(SimpleTestCase):
    """Test the structured descriptor and its JSON form."""

    def test_date_range_picker_structured_descriptor(self):
        """Test the descriptor of a default date range picker."""
        filter_ = DateRangePickerFilter.on("created_at").set_values(["2024-01-01,2024-01-31"])

        self.assertEqual(
            filter_.to_structured(),
            {
                "type": "date_range_picker",
                "readonly": False,
                "group": "Dates",
                "values": ["2024-01-01,2024-01-31"],
                "collection": None,
            },
        )

    def test_structured_descriptor_excludes_internal_fields(self):
        """Test method, name and errors never reach the descriptor."""
        structured = TextFilter.on("title").with_name("Title").to_structured()

        self.assertEqual(set(structured), {"type", "readonly", "group", "values", "collection"})

    def test_structured_descriptor_reflects_state(self):
        """Test readonly, group and collection flow into the descriptor."""
        filter_ = (
            SelectFilter.on("status")
            .with_group("State")
            .as_readonly()
            .set_values(["open"])
            .set_collection("tickets")
        )

        self.assertEqual(
            filter_.to_structured(),
            {
                "type": "select",
                "readonly": True,
                "group": "State",
                "values": ["open"],
                "collection": "tickets",
            },
        )

    def test_type_is_plain_string(self):
        """Test the type tag serializes to the enum value."""
        filter_ = TextFilter.on("title")

        self.assertEqual(filter_.get_type(), FilterType.TEXT)
        self.assertEqual(filter_.to_structured()["type"], "text")
        self.assertIs(type(filter_.to_structured()["type"]), str)

    def test_to_json_round_trip(self):
        """Test the JSON form parses back to the structured descriptor."""
        filter_ = (
            DateRangePickerFilter.on("created_at")
            .set_values(["2024-01-01,2024-01-31"])
            .set_collection("orders")
        )

        self.assertEqual(json.loads(filter_.to_json()), filter_.to_structured())

    def test_to_json_passes_options(self):
        """Test to_json forwards options to json.dumps."""
        filter_ = TextFilter.on("title")

        self.assertIn("\n", filter_.to_json(indent=2))
        self.assertNotIn("\n", filter_.to_json())


class FilterCopyTestCase(SimpleTestCase):
    """Test copying filters."""

    def setUp(self):
        self.filter = (
            DateRangePickerFilter.on("created_at")
            .with_name("Created")
            .as_readonly()
            .set_values(["2024-01-01,2024-01-31"])
            .set_collection("orders")
        )

    def test_copy_keeps_state(self):
        """Test the copy carries the source's state."""
        copied = self.filter.copy()

        self.assertIsInstance(copied, DateRangePickerFilter)
        self.assertIsNot(copied, self.filter)
        self.assertEqual(copied.get_method(), "createdAt")
        self.assertEqual(copied.get_name(), "Created")
        self.assertTrue(copied.is_writable())
        self.assertEqual(copied.get_collection(), "orders")
        self.assertEqual(copied.get_values(), ["2024-01-01,2024-01-31"])
        self.assertEqual(copied.to_structured(), self.filter.to_structured())

    def test_copy_keeps_custom_group(self):
        """Test a group set with with_group survives copying."""
        self.filter.with_group("Timeline")

        self.assertEqual(self.filter.copy().get_group(), "Timeline")

    def test_copy_values_are_independent(self):
        """Test changing the copy's values leaves the source alone."""
        copied = self.filter.copy()
        copied.set_values(["2023-01-01"])
        copied.get_values().append("2023-02-01")

        self.assertEqual(self.filter.get_values(), ["2024-01-01,2024-01-31"])

    def test_copy_errors_are_independent(self):
        """Test validating the copy does not change the source's errors."""
        self.filter.set_values(["not a date"]).validate()
        self.assertIn("values", self.filter.errors())

        copied = self.filter.copy()
        self.assertIn("values", copied.errors())

        copied.set_values(["2024-01-01"]).validate()
        self.assertTrue(copied.is_valid())
        self.assertIn("values", self.filter.errors())

        copied.errors()["extra"] = ["Injected"]
        self.assertNotIn("extra", self.filter.errors())
