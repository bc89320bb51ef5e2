"""Helpers that build response bodies, hypermedia links and caching headers."""

import hashlib
import json
from datetime import UTC, datetime
from email.utils import format_datetime

from fastapi import Request, Response

from ..config.settings import settings


def collection_url(collection: str) -> str:
    return f"{settings.api_prefix}/{collection}"


def item_url(collection: str, document_id) -> str:
    return f"{collection_url(collection)}/{document_id}"


def document_links(collection: str, record: dict, related: dict[str, tuple[str, str]]) -> dict:
    """Links for one document.

    Args:
        collection: URL segment of the document's own collection ("matches")
        record: the document as returned by to_record()
        related: link name -> (collection, id field), e.g. {"season": ("seasons", "season_id")}
    """
    links = {
        "self": item_url(collection, record["id"]),
        "collection": collection_url(collection),
    }
    for name, (target, field) in related.items():
        value = record.get(field)
        links[name] = item_url(target, value) if value is not None else None
    return links


def http_date(value: datetime | None) -> str:
    value = value or datetime.now(UTC)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return format_datetime(value.astimezone(UTC), usegmt=True)


def etag_for(record: dict) -> str:
    """Weak validator over the whole document, so any stored change alters it."""
    content = json.dumps(record, default=str, sort_keys=True)
    digest = hashlib.sha1(content.encode()).hexdigest()
    return f'W/"{digest}"'


def not_modified(request: Request, etag: str) -> bool:
    """True when the client's If-None-Match already names this version."""
    candidates = request.headers.get("if-none-match")
    if not candidates:
        return False
    return etag in [tag.strip() for tag in candidates.split(",")] or candidates.strip() == "*"


def no_content(headers: dict[str, str] | None = None, status_code: int = 204) -> Response:
    return Response(status_code=status_code, headers=headers or {})
