"""
Unit tests for request payload parsing.
"""

import pytest

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from service_strings.app.domain.payload import parse_body, require_char_lists, require_string
from shared.errors import ValidationError


class TestParseBody:
    """Test cases for parse_body."""

    def test_json_without_content_type(self):
        assert parse_body(b'{"string":"split me"}') == {"string": "split me"}

    def test_json_with_form_content_type(self):
        """curl -d sends form content type even for JSON documents."""
        body = b'{"odd":["a"],"even":[]}'
        assert parse_body(body, "application/x-www-form-urlencoded") == {"odd": ["a"], "even": []}

    def test_form_fallback(self):
        body = b"odd=s&odd=l&even=p&string=abc"
        params = parse_body(body, "application/x-www-form-urlencoded; charset=utf-8")

        assert params["odd"] == ["s", "l"]
        assert params["even"] == "p"
        assert params["string"] == "abc"

    def test_form_bracket_keys(self):
        params = parse_body(b"odd[]=s&even[]=p", "application/x-www-form-urlencoded")

        assert params == {"odd": ["s"], "even": ["p"]}

    def test_empty_body(self):
        assert parse_body(b"") == {}

    def test_non_object_json(self):
        assert parse_body(b'["split me"]', "application/json") == {}

    def test_garbage_body(self):
        assert parse_body(b"\xff\xfe not json", "application/json") == {}


class TestRequireParams:
    """Test cases for parameter validation."""

    def test_require_string(self):
        assert require_string({"string": "abc"}, "string") == "abc"

    @pytest.mark.parametrize("params", [{}, {"string": None}, {"string": ""}])
    def test_require_string_missing(self, params):
        with pytest.raises(ValidationError) as exc_info:
            require_string(params, "string")

        assert exc_info.value.status_code == 422
        assert exc_info.value.message == "Missing param 'string'"

    def test_require_string_wrong_type(self):
        with pytest.raises(ValidationError):
            require_string({"string": 42}, "string")

    def test_require_char_lists(self):
        odd, even = require_char_lists({"odd": ["a"], "even": []}, "odd", "even")

        assert odd == ["a"]
        assert even == []

    def test_require_char_lists_single_form_value(self):
        odd, even = require_char_lists({"odd": "a", "even": ["b"]}, "odd", "even")

        assert odd == ["a"]

    @pytest.mark.parametrize("params", [{"odd": ["a"]}, {"even": ["a"]}, {"odd": None, "even": []}])
    def test_require_char_lists_missing(self, params):
        with pytest.raises(ValidationError) as exc_info:
            require_char_lists(params, "odd", "even")

        assert exc_info.value.message == "Missing param 'odd' or 'even'"

    @pytest.mark.parametrize("params", [{"odd": {"a": 1}, "even": []}, {"odd": ["a", 1], "even": []}])
    def test_require_char_lists_wrong_type(self, params):
        with pytest.raises(ValidationError):
            require_char_lists(params, "odd", "even")

    def test_require_char_lists_null_item(self):
        with pytest.raises(ValidationError) as exc_info:
            require_char_lists({"odd": ["a", None], "even": ["b"]}, "odd", "even")

        assert exc_info.value.message == "Param 'odd' must be an array of strings"
