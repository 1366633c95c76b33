"""Shared fixtures: a mocked Android Publisher service and clients built on it."""

import json
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from play_developer_mcp.core.publisher import PublisherClient


def make_http_error(status: int, message: str) -> HttpError:
    """Build an HttpError shaped like an Android Publisher API failure."""
    content = json.dumps({"error": {"code": status, "message": message}}).encode("utf-8")
    return HttpError(httplib2.Response({"status": status}), content)


@pytest.fixture
def service():
    """Mock discovery resource with an edit that opens and deletes cleanly."""
    service = MagicMock()
    edits = service.edits.return_value
    edits.insert.return_value.execute.return_value = {"id": "edit-123"}
    edits.delete.return_value.execute.return_value = None
    return service


@pytest.fixture
def edits(service):
    """Shortcut to the ``service.edits()`` resource."""
    return service.edits.return_value


@pytest.fixture
def publisher_client(service):
    """PublisherClient wrapping the mocked service."""
    return PublisherClient(service)


@pytest.fixture
def http_error():
    """Factory for API HttpErrors: ``http_error(404, "Package not found")``."""
    return make_http_error
