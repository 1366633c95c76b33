"""Async facade over the Android Publisher v3 API.

The Google API client is synchronous; every request runs in a worker thread
over its own authorized HTTP transport, since ``httplib2.Http`` objects must
not be shared between threads.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Dict, List, Optional

import httplib2
from google.auth.exceptions import RefreshError
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from play_developer_mcp.core.errors.publisher import CredentialsError, PublisherApiError
from play_developer_mcp.core.publisher.credentials import (
    load_credentials,
    resolve_credentials_path,
)

logger = logging.getLogger(__name__)

API_NAME = "androidpublisher"
API_VERSION = "v3"


def _api_error(exc: HttpError) -> PublisherApiError:
    """Convert a googleapiclient ``HttpError`` into a ``PublisherApiError``."""
    status = getattr(exc.resp, "status", None)
    reason = getattr(exc, "reason", None)
    message = reason or str(exc)
    return PublisherApiError(message, status=int(status) if status else None, reason=reason)


class PublisherClient:
    """Read-only operations on the Android Publisher API.

    Args:
        service: Discovery-built ``androidpublisher`` resource
        http_factory: Returns a fresh authorized transport for each request.
            When omitted, requests use the transport bound to *service*.
    """

    def __init__(
        self,
        service: Any,
        *,
        http_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        self._service = service
        self._http_factory = http_factory

    async def _execute(self, request: Any) -> Dict[str, Any]:
        try:
            if self._http_factory is None:
                response = await asyncio.to_thread(request.execute)
            else:
                response = await asyncio.to_thread(request.execute, http=self._http_factory())
        except HttpError as e:
            raise _api_error(e) from e
        except RefreshError as e:
            raise CredentialsError(f"Service account authentication failed: {e}") from e
        return response or {}

    # ------------------------------------------------------------------
    # Edit sessions
    # ------------------------------------------------------------------

    async def insert_edit(self, package_name: str) -> str:
        edit = await self._execute(self._service.edits().insert(packageName=package_name, body={}))
        return edit["id"]

    async def delete_edit(self, package_name: str, edit_id: str) -> None:
        await self._execute(self._service.edits().delete(packageName=package_name, editId=edit_id))

    @asynccontextmanager
    async def edit_session(self, package_name: str) -> AsyncIterator[str]:
        """Open an edit for *package_name* and delete it when the block exits.

        The edit is deleted exactly once whether the block succeeds, raises or
        is cancelled. A failing delete after a successful block propagates; a
        failing delete after a failed block is logged and the original error
        propagates instead.
        """
        edit_id = await self.insert_edit(package_name)
        logger.debug(f"Opened edit {edit_id} for {package_name}")
        try:
            yield edit_id
        except BaseException:
            try:
                await self.delete_edit(package_name, edit_id)
            except Exception as delete_error:
                logger.warning(
                    f"Failed to delete edit {edit_id} for {package_name}: {delete_error}",
                    extra={"package_name": package_name, "edit_id": edit_id},
                )
            raise
        else:
            await self.delete_edit(package_name, edit_id)
        logger.debug(f"Deleted edit {edit_id} for {package_name}")

    # ------------------------------------------------------------------
    # Edit-scoped reads
    # ------------------------------------------------------------------

    async def get_app_details(self, package_name: str, edit_id: str) -> Dict[str, Any]:
        return await self._execute(
            self._service.edits().details().get(packageName=package_name, editId=edit_id)
        )

    async def list_listings(self, package_name: str, edit_id: str) -> Optional[List[Dict[str, Any]]]:
        result = await self._execute(
            self._service.edits().listings().list(packageName=package_name, editId=edit_id)
        )
        return result.get("listings")

    async def get_track(self, package_name: str, edit_id: str, track: str) -> Dict[str, Any]:
        return await self._execute(
            self._service.edits().tracks().get(packageName=package_name, editId=edit_id, track=track)
        )

    async def list_tracks(self, package_name: str, edit_id: str) -> Optional[List[Dict[str, Any]]]:
        result = await self._execute(
            self._service.edits().tracks().list(packageName=package_name, editId=edit_id)
        )
        return result.get("tracks")

    async def list_bundles(self, package_name: str, edit_id: str) -> Optional[List[Dict[str, Any]]]:
        result = await self._execute(
            self._service.edits().bundles().list(packageName=package_name, editId=edit_id)
        )
        return result.get("bundles")

    async def list_apks(self, package_name: str, edit_id: str) -> Optional[List[Dict[str, Any]]]:
        result = await self._execute(
            self._service.edits().apks().list(packageName=package_name, editId=edit_id)
        )
        return result.get("apks")

    # ------------------------------------------------------------------
    # Reviews (not edit-scoped)
    # ------------------------------------------------------------------

    async def list_reviews(
        self,
        package_name: str,
        *,
        max_results: int,
        translation_language: Optional[str] = None,
        token: Optional[str] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {"packageName": package_name, "maxResults": max_results}
        if translation_language:
            params["translationLanguage"] = translation_language
        if token:
            params["token"] = token
        return await self._execute(self._service.reviews().list(**params))

    async def get_review(
        self,
        package_name: str,
        review_id: str,
        *,
        translation_language: Optional[str] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {"packageName": package_name, "reviewId": review_id}
        if translation_language:
            params["translationLanguage"] = translation_language
        return await self._execute(self._service.reviews().get(**params))


def build_publisher_client(credentials_path: Optional[str] = None) -> PublisherClient:
    """Build an authenticated client.

    Args:
        credentials_path: Service account key path. Falls back to the
            ``GOOGLE_SERVICE_ACCOUNT_KEY`` environment variable when ``None``.

    Raises:
        ConfigurationError: No credential path is available
        CredentialsError: The key file cannot be loaded
    """
    path = resolve_credentials_path(credentials_path)
    credentials = load_credentials(path)
    service = build(API_NAME, API_VERSION, credentials=credentials, cache_discovery=False)
    return PublisherClient(
        service,
        http_factory=lambda: AuthorizedHttp(credentials, http=httplib2.Http()),
    )
