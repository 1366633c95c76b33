"""Projection helpers for Android Publisher API payloads.

Every tool reduces the raw API JSON to a smaller shape before returning it:
long free text is truncated, timestamps become ISO-8601 strings and only a
subset of keys survives. Keys whose value is absent are dropped so the JSON
output only carries what the API actually returned.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence

ELLIPSIS = "..."

DESCRIPTION_BUDGET = 200
RELEASE_NOTES_BUDGET = 100


def truncate(text: Optional[str], budget: int) -> Optional[str]:
    """Cut *text* to *budget* characters and mark the cut.

    Text shorter than the budget is returned unchanged. Text at or over the
    budget is cut to exactly ``budget`` characters followed by ``"..."``.
    ``None`` passes through.
    """
    if text is None:
        return None
    if len(text) < budget:
        return text
    return text[:budget] + ELLIPSIS


def format_timestamp(value: Optional[Mapping[str, Any]]) -> Optional[str]:
    """Convert an API ``Timestamp`` (``{"seconds": ..., "nanos": ...}``) to ISO-8601.

    The result is a UTC instant with millisecond precision, e.g.
    ``{"seconds": "1700000000"}`` -> ``"2023-11-14T22:13:20.000Z"``.
    Returns ``None`` when the timestamp or its seconds are missing or zero.
    """
    if not value:
        return None
    seconds = int(value.get("seconds") or 0)
    if not seconds:
        return None
    millis = int(value.get("nanos") or 0) // 1_000_000
    instant = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return f"{instant.strftime('%Y-%m-%dT%H:%M:%S')}.{millis:03d}Z"


def compact(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of *data* without ``None`` values."""
    return {key: value for key, value in data.items() if value is not None}


# ---------------------------------------------------------------------------
# App details
# ---------------------------------------------------------------------------


def map_app_details(details: Mapping[str, Any]) -> Dict[str, Any]:
    return compact(
        {
            "defaultLanguage": details.get("defaultLanguage"),
            "contactWebsite": details.get("contactWebsite"),
            "contactEmail": details.get("contactEmail"),
            "contactPhone": details.get("contactPhone"),
        }
    )


def map_listing(listing: Mapping[str, Any]) -> Dict[str, Any]:
    return compact(
        {
            "language": listing.get("language"),
            "title": listing.get("title"),
            "shortDescription": listing.get("shortDescription"),
            "fullDescription": truncate(listing.get("fullDescription"), DESCRIPTION_BUDGET),
        }
    )


# ---------------------------------------------------------------------------
# Tracks
# ---------------------------------------------------------------------------


def map_release_note(note: Mapping[str, Any]) -> Dict[str, Any]:
    return compact(
        {
            "language": note.get("language"),
            "text": truncate(note.get("text"), RELEASE_NOTES_BUDGET),
        }
    )


def map_release(release: Mapping[str, Any]) -> Dict[str, Any]:
    notes = release.get("releaseNotes")
    return compact(
        {
            "name": release.get("name"),
            "status": release.get("status"),
            "versionCodes": release.get("versionCodes"),
            "userFraction": release.get("userFraction"),
            "releaseNotes": [map_release_note(n) for n in notes] if notes is not None else None,
            "inAppUpdatePriority": release.get("inAppUpdatePriority"),
        }
    )


def map_track(track: Mapping[str, Any]) -> Dict[str, Any]:
    releases = track.get("releases")
    return compact(
        {
            "track": track.get("track"),
            "releases": [map_release(r) for r in releases] if releases is not None else None,
        }
    )


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


def _find_comment(comments: Sequence[Mapping[str, Any]], kind: str) -> Optional[Mapping[str, Any]]:
    """Return the first comment body of *kind* (``userComment`` or ``developerComment``)."""
    for comment in comments:
        body = comment.get(kind)
        if body is not None:
            return body
    return None


def map_device_metadata(metadata: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if metadata is None:
        return None
    return compact(
        {
            "manufacturer": metadata.get("manufacturer"),
            "deviceClass": metadata.get("deviceClass"),
            "screenDensityDpi": metadata.get("screenDensityDpi"),
        }
    )


def map_developer_reply(reply: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if reply is None:
        return None
    return compact(
        {
            "text": reply.get("text"),
            "lastModified": format_timestamp(reply.get("lastModified")),
        }
    )


def map_review(review: Mapping[str, Any]) -> Dict[str, Any]:
    """Flatten a review into the user comment fields plus an optional developer reply.

    Comment entries are told apart by their ``userComment`` /
    ``developerComment`` key, not by their position in the list.
    """
    comments = review.get("comments") or []
    comment = _find_comment(comments, "userComment") or {}
    reply = _find_comment(comments, "developerComment")
    return compact(
        {
            "reviewId": review.get("reviewId"),
            "authorName": review.get("authorName"),
            "starRating": comment.get("starRating"),
            "text": comment.get("text"),
            "originalText": comment.get("originalText"),
            "reviewerLanguage": comment.get("reviewerLanguage"),
            "lastModified": format_timestamp(comment.get("lastModified")),
            "appVersionCode": comment.get("appVersionCode"),
            "appVersionName": comment.get("appVersionName"),
            "device": comment.get("device"),
            "androidOsVersion": comment.get("androidOsVersion"),
            "thumbsUpCount": comment.get("thumbsUpCount"),
            "thumbsDownCount": comment.get("thumbsDownCount"),
            "deviceMetadata": map_device_metadata(comment.get("deviceMetadata")),
            "developerReply": map_developer_reply(reply),
        }
    )


# ---------------------------------------------------------------------------
# Bundles / APKs
# ---------------------------------------------------------------------------


def map_bundle(bundle: Mapping[str, Any]) -> Dict[str, Any]:
    return compact({"versionCode": bundle.get("versionCode"), "sha256": bundle.get("sha256")})


def map_apk(apk: Mapping[str, Any]) -> Dict[str, Any]:
    binary = apk.get("binary")
    return compact(
        {
            "versionCode": apk.get("versionCode"),
            "binary": {"sha256": binary.get("sha256")} if binary else None,
        }
    )


def map_all(items: Optional[Sequence[Mapping[str, Any]]], mapper) -> Optional[List[Dict[str, Any]]]:
    """Apply *mapper* to every item, keeping ``None`` when the API omitted the list."""
    if items is None:
        return None
    return [mapper(item) for item in items]
