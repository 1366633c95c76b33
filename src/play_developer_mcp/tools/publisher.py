"""
Google Play Developer tools for play-developer-mcp.

Read-only tools over the Android Publisher API. App details, release tracks
and bundle details read through an edit session that is always discarded;
reviews are read directly.
"""

import asyncio
import logging
from typing import Annotated, Callable, Literal, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from play_developer_mcp.config import ServerConfig
from play_developer_mcp.core.errors import classify_error, is_expected_error
from play_developer_mcp.core.formatting import (
    compact,
    map_apk,
    map_all,
    map_app_details,
    map_bundle,
    map_listing,
    map_review,
    map_track,
)
from play_developer_mcp.core.naming import canonical_tool
from play_developer_mcp.core.publisher import PublisherClient, build_publisher_client
from play_developer_mcp.core.responses import error_response, success_response

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Optional[str]], PublisherClient]

PackageName = Annotated[str, Field(description="Android package name (e.g., com.example.app)")]
TrackName = Literal["internal", "alpha", "beta", "production"]

TOOL_NAMES = (
    "get-app-details",
    "get-release-tracks",
    "get-reviews",
    "get-review",
    "get-bundle-details",
)


def _tool_error(tool_name: str, exc: Exception) -> CallToolResult:
    """Log *exc* and turn it into an error result."""
    error_type = classify_error(exc)
    if is_expected_error(exc):
        logger.warning(
            f"{tool_name} failed ({error_type.value}): {exc}",
            extra={"tool": tool_name, "error_type": error_type.value},
        )
    else:
        logger.exception(
            f"Unexpected error in {tool_name}",
            extra={"tool": tool_name, "error_type": error_type.value},
        )
    return error_response(str(exc) or type(exc).__name__)


def register_publisher_tools(
    mcp: FastMCP,
    config: ServerConfig,
    client_factory: ClientFactory = build_publisher_client,
) -> None:
    """Register Google Play Developer tools with the FastMCP server.

    Args:
        mcp: FastMCP server instance
        config: Server configuration
        client_factory: Builds a ``PublisherClient`` from a credential path
            (``None`` means read ``GOOGLE_SERVICE_ACCOUNT_KEY``)
    """

    def _client() -> PublisherClient:
        path = str(config.credentials_path) if config.credentials_path else None
        return client_factory(path)

    def _register(name: str):
        if not config.is_tool_enabled(name):
            logger.info(f"Tool {name} disabled by configuration")
            return lambda func: func
        return canonical_tool(mcp, canonical_name=name)

    @_register("get-app-details")
    async def get_app_details(packageName: PackageName) -> CallToolResult:
        """Get app details including version, status, and configuration from Google Play Console."""
        try:
            client = _client()
            async with client.edit_session(packageName) as edit_id:
                details = await client.get_app_details(packageName, edit_id)
                listings = await client.list_listings(packageName, edit_id)

            return success_response(
                compact(
                    {
                        "details": map_app_details(details),
                        "listings": map_all(listings, map_listing),
                    }
                )
            )
        except Exception as e:
            return _tool_error("get-app-details", e)

    @_register("get-release-tracks")
    async def get_release_tracks(
        packageName: PackageName,
        track: Annotated[
            Optional[TrackName],
            Field(description="Specific track to query. If omitted, returns all tracks."),
        ] = None,
    ) -> CallToolResult:
        """Get release track information (internal, alpha, beta, production) for an app."""
        try:
            client = _client()
            async with client.edit_session(packageName) as edit_id:
                if track:
                    tracks = [await client.get_track(packageName, edit_id, track)]
                else:
                    tracks = await client.list_tracks(packageName, edit_id)

            return success_response(map_all(tracks, map_track) or [])
        except Exception as e:
            return _tool_error("get-release-tracks", e)

    @_register("get-reviews")
    async def get_reviews(
        packageName: PackageName,
        maxResults: Annotated[
            int,
            Field(ge=1, le=100, description="Maximum number of reviews to return (1-100, default 20)"),
        ] = 20,
        translationLanguage: Annotated[
            Optional[str],
            Field(description="Language code to translate reviews to (e.g., 'en' for English)"),
        ] = None,
        pageToken: Annotated[
            Optional[str],
            Field(description="Continuation token from a previous call's nextPageToken"),
        ] = None,
    ) -> CallToolResult:
        """Get user reviews and ratings for an app from Google Play."""
        try:
            client = _client()
            result = await client.list_reviews(
                packageName,
                max_results=maxResults,
                translation_language=translationLanguage,
                token=pageToken,
            )

            reviews = [map_review(r) for r in result.get("reviews") or []]
            next_page_token = (result.get("tokenPagination") or {}).get("nextPageToken")
            return success_response(
                compact(
                    {
                        "totalReviews": len(reviews),
                        "reviews": reviews,
                        "nextPageToken": next_page_token,
                    }
                )
            )
        except Exception as e:
            return _tool_error("get-reviews", e)

    @_register("get-review")
    async def get_review(
        packageName: PackageName,
        reviewId: Annotated[str, Field(description="The review ID to retrieve")],
        translationLanguage: Annotated[
            Optional[str],
            Field(description="Language code to translate review to"),
        ] = None,
    ) -> CallToolResult:
        """Get a specific user review by ID."""
        try:
            client = _client()
            review = await client.get_review(
                packageName,
                reviewId,
                translation_language=translationLanguage,
            )
            return success_response(map_review(review))
        except Exception as e:
            return _tool_error("get-review", e)

    @_register("get-bundle-details")
    async def get_bundle_details(packageName: PackageName) -> CallToolResult:
        """Get details about uploaded app bundles and APKs."""
        try:
            client = _client()
            async with client.edit_session(packageName) as edit_id:
                # Both reads settle before the edit is deleted.
                bundles, apks = await asyncio.gather(
                    client.list_bundles(packageName, edit_id),
                    client.list_apks(packageName, edit_id),
                    return_exceptions=True,
                )
                for outcome in (bundles, apks):
                    if isinstance(outcome, BaseException):
                        raise outcome

            return success_response(
                compact(
                    {
                        "bundles": map_all(bundles, map_bundle),
                        "apks": map_all(apks, map_apk),
                    }
                )
            )
        except Exception as e:
            return _tool_error("get-bundle-details", e)
