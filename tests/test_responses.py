"""
Tests for response helper functions and the tool result contract.

Success results carry pretty-printed JSON; error results carry
``isError`` and text starting with ``"Error: "``.
"""

import json

from mcp.types import CallToolResult

from play_developer_mcp.core.responses import (
    ERROR_PREFIX,
    error_response,
    success_response,
)


class TestSuccessResponse:
    """Tests for success_response()."""

    def test_returns_single_text_block(self):
        result = success_response({"totalReviews": 0, "reviews": []})

        assert isinstance(result, CallToolResult)
        assert len(result.content) == 1
        assert result.content[0].type == "text"

    def test_is_error_not_set(self):
        result = success_response({"ok": True})
        assert not result.isError

    def test_text_is_pretty_printed_json(self):
        data = {"details": {"defaultLanguage": "en-US"}, "listings": []}
        result = success_response(data)

        text = result.content[0].text
        assert json.loads(text) == data
        assert text == json.dumps(data, indent=2)

    def test_accepts_list_payload(self):
        result = success_response([{"track": "production"}])
        assert json.loads(result.content[0].text) == [{"track": "production"}]

    def test_non_ascii_text_preserved(self):
        result = success_response({"text": "Très bien"})
        assert "Très bien" in result.content[0].text


class TestErrorResponse:
    """Tests for error_response()."""

    def test_sets_is_error(self):
        result = error_response("Something went wrong")
        assert result.isError is True

    def test_text_has_error_prefix(self):
        result = error_response("Package not found: com.example.app")

        assert result.content[0].type == "text"
        assert result.content[0].text == "Error: Package not found: com.example.app"
        assert result.content[0].text.startswith(ERROR_PREFIX)
