"""Unit tests for error-body helpers in app.core.errors."""

import unittest

from app.core.errors import FieldValidationError, errors_from_pydantic, summarize_errors


class TestSummarizeErrors(unittest.TestCase):
    def test_single_message(self) -> None:
        self.assertEqual(summarize_errors({"name": ["Required."]}), "Required.")

    def test_counts_remaining_messages(self) -> None:
        errors = {"name": ["Required."], "link": ["Bad URL."], "category_ids": ["Empty."]}
        self.assertEqual(summarize_errors(errors), "Required. (and 2 more errors)")

    def test_one_more_is_singular(self) -> None:
        errors = {"name": ["Required."], "link": ["Bad URL."]}
        self.assertEqual(summarize_errors(errors), "Required. (and 1 more error)")

    def test_empty_map_has_generic_message(self) -> None:
        self.assertEqual(summarize_errors({}), "The given data was invalid.")


class TestErrorsFromPydantic(unittest.TestCase):
    def test_strips_request_section_and_dots_nested_paths(self) -> None:
        raw = [
            {"loc": ("body", "name"), "msg": "Field required"},
            {"loc": ("body", "category_ids", 0), "msg": "Input should be a valid integer"},
            {"loc": ("query", "page"), "msg": "Input should be greater than or equal to 1"},
        ]
        self.assertEqual(
            errors_from_pydantic(raw),
            {
                "name": ["Field required"],
                "category_ids.0": ["Input should be a valid integer"],
                "page": ["Input should be greater than or equal to 1"],
            },
        )

    def test_groups_messages_for_same_field(self) -> None:
        raw = [
            {"loc": ("body", "link"), "msg": "first"},
            {"loc": ("body", "link"), "msg": "second"},
        ]
        self.assertEqual(errors_from_pydantic(raw), {"link": ["first", "second"]})


class TestFieldValidationError(unittest.TestCase):
    def test_single_builds_one_field_map(self) -> None:
        err = FieldValidationError.single("name", "Taken.")
        self.assertEqual(err.errors, {"name": ["Taken."]})
        self.assertEqual(str(err), "Taken.")
