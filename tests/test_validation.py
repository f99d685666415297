"""Tests for structured-output validation."""

import pytest

from navigator.schemas import AnswerOutput, LinksOutput
from navigator.validation import is_absolute_url, validate


class TestIsAbsoluteUrl:
    @pytest.mark.parametrize("value", [
        "https://example.com/paris",
        "http://example.com",
        "https://www.google.com/maps/search/?api=1&query=Eiffel%20Tower%2C%20Paris",
    ])
    def test_accepts_absolute_urls(self, value):
        assert is_absolute_url(value)

    @pytest.mark.parametrize("value", ["", "   ", "not a url", "/relative/path", "example.com", None, 42])
    def test_rejects_everything_else(self, value):
        assert not is_absolute_url(value)


class TestValidateAnswer:
    def test_valid_output(self):
        result = validate(AnswerOutput, {"answer": "Hi!", "mapUrl": "https://maps.example.com/x"})
        assert result.ok
        assert result.value.answer == "Hi!"
        assert result.value.map_url == "https://maps.example.com/x"

    def test_url_string_is_kept_verbatim(self):
        result = validate(AnswerOutput, {"answer": "Hi!", "mapUrl": "https://example.com"})
        assert result.value.map_url == "https://example.com"

    def test_none_is_missing_output(self):
        result = validate(AnswerOutput, None)
        assert not result.ok
        assert result.errors[0].constraint == "missing"

    def test_missing_answer_names_the_field(self):
        result = validate(AnswerOutput, {"mapUrl": "https://example.com"})
        assert not result.ok
        assert "answer" in result.failed_fields()

    def test_non_string_answer(self):
        result = validate(AnswerOutput, {"answer": 42})
        assert not result.ok
        assert result.failed_fields() == {"answer"}

    def test_blank_answer(self):
        assert not validate(AnswerOutput, {"answer": "   "}).ok

    @pytest.mark.parametrize("map_url", [None, "", "  "])
    def test_empty_map_url_becomes_absent(self, map_url):
        result = validate(AnswerOutput, {"answer": "Hi!", "mapUrl": map_url})
        assert result.ok
        assert result.value.map_url is None

    def test_malformed_map_url_is_a_url_error(self):
        result = validate(AnswerOutput, {"answer": "Hi!", "mapUrl": "somewhere in Paris"})
        assert not result.ok
        assert result.failed_fields() == {"mapUrl"}

    def test_extra_fields_are_ignored(self):
        result = validate(AnswerOutput, {"answer": "Hi!", "tool_calls": [{"name": "get_fun_fact"}]})
        assert result.ok


class TestValidateLinks:
    def test_accepts_mixed_entries_for_later_filtering(self):
        result = validate(LinksOutput, {"links": ["https://example.com/paris", "", "not a url"]})
        assert result.ok
        assert result.value.links == ["https://example.com/paris", "", "not a url"]

    def test_links_must_be_a_list(self):
        assert not validate(LinksOutput, {"links": "https://example.com"}).ok

    def test_links_are_required(self):
        assert not validate(LinksOutput, {}).ok
