"""
Shared REST endpoints for every collection.

Each resource module (players, matches, ...) calls build_crud_router() to get
the six standard endpoints, then adds its own sub-resource endpoints to the
returned router.

Key FastAPI Concepts Used:
- APIRouter: Groups related endpoints together
- Depends(): Dependency injection for database sessions
- Query/Path parameters: validated URL parameters (ge=greater/equal, le=less/equal)
- Response: injected so handlers can add headers to the normal JSON response
- Returning a Response directly skips serialization (used for 204 and 304)

Response conventions:
- Bodies are {"data": ..., "_links": {...}}
- GET collection: X-Total-Count and X-Resource-Type; an empty page is 204
- GET item: ETag and Last-Modified; a matching If-None-Match is 304
- POST: 201 with Location and X-Resource-Id
- DELETE: 204 with X-Deleted-At
"""

from typing import Any

from fastapi import APIRouter, Depends, Path, Query, Request, Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ...config.settings import settings
from ...database.connection import get_db
from ...services.base import CrudService
from ..responses import (
    collection_url,
    document_links,
    etag_for,
    http_date,
    item_url,
    no_content,
    not_modified,
)
from ..schemas import DataEnvelope


class ResourceView:
    """How one resource is presented: its URL, response schema and related links."""

    def __init__(
        self,
        collection: str,
        resource_type: str,
        response_schema: type[BaseModel],
        related: dict[str, tuple[str, str]] | None = None,
    ):
        self.collection = collection  # URL segment, "player-stats"
        self.resource_type = resource_type  # X-Resource-Type header, "PlayerStats"
        self.response_schema = response_schema
        self.related = related or {}  # link name -> (collection, id field)

    def present(self, row) -> BaseModel:
        record = row.to_record()
        record["links"] = document_links(self.collection, record, self.related)
        return self.response_schema.model_validate(record)

    def envelope(self, row) -> dict[str, Any]:
        item = self.present(row)
        return {"data": item, "links": item.links}

    def item_url(self, document_id) -> str:
        return item_url(self.collection, document_id)

    def write_headers(self, response: Response, row) -> None:
        response.headers["X-Resource-Type"] = self.resource_type
        response.headers["X-Resource-Id"] = str(row.id)
        response.headers["Last-Modified"] = http_date(row.updated_at)


def page_links(collection: str, limit: int | None, offset: int, total: int) -> dict[str, str | None]:
    links = {"self": collection_url(collection), "next": None, "prev": None}
    if limit is None:
        return links
    base = collection_url(collection)
    links["self"] = f"{base}?limit={limit}&offset={offset}"
    if offset + limit < total:
        links["next"] = f"{base}?limit={limit}&offset={offset + limit}"
    if offset > 0:
        links["prev"] = f"{base}?limit={limit}&offset={max(offset - limit, 0)}"
    return links


def build_crud_router(
    service: CrudService,
    view: ResourceView,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
) -> APIRouter:
    """List/get/create/replace/update/delete endpoints for one collection."""
    router = APIRouter(prefix=f"/{view.collection}", tags=[view.collection])
    name = view.resource_type

    @router.get("", response_model=DataEnvelope[list[view.response_schema]], summary=f"List {name} documents")
    async def list_documents(
        response: Response,
        limit: int | None = Query(None, ge=1, le=settings.max_page_size, description="Page size"),
        offset: int = Query(0, ge=0, description="Documents to skip"),
        db: Session = Depends(get_db),
    ):
        rows, total = service.list_page(db, limit=limit, offset=offset)
        headers = {"X-Total-Count": str(total), "X-Resource-Type": view.resource_type}

        # Nothing to return: 204 keeps the count header so clients can still page
        if not rows:
            return no_content(headers)

        response.headers.update(headers)
        return {
            "data": [view.present(row) for row in rows],
            "links": page_links(view.collection, limit, offset, total),
        }

    @router.get("/{item_id}", response_model=DataEnvelope[view.response_schema], summary=f"Get a {name}")
    async def get_document(
        request: Request,
        response: Response,
        item_id: int = Path(ge=1),
        db: Session = Depends(get_db),
    ):
        row = service.get(db, item_id)
        etag = etag_for(row.to_record())
        headers = {
            "ETag": etag,
            "Last-Modified": http_date(row.updated_at),
            "X-Resource-Type": view.resource_type,
        }
        if not_modified(request, etag):
            return no_content(headers, status_code=304)

        response.headers.update(headers)
        return view.envelope(row)

    @router.post(
        "",
        status_code=201,
        response_model=DataEnvelope[view.response_schema],
        summary=f"Create a {name}",
    )
    async def create_document(
        payload: create_schema,
        response: Response,
        db: Session = Depends(get_db),
    ):
        row = service.create(db, payload)
        view.write_headers(response, row)
        response.headers["Location"] = view.item_url(row.id)
        return view.envelope(row)

    @router.put("/{item_id}", response_model=DataEnvelope[view.response_schema], summary=f"Replace a {name}")
    async def replace_document(
        payload: create_schema,
        response: Response,
        item_id: int = Path(ge=1),
        db: Session = Depends(get_db),
    ):
        row = service.replace(db, item_id, payload)
        view.write_headers(response, row)
        return view.envelope(row)

    @router.patch("/{item_id}", response_model=DataEnvelope[view.response_schema], summary=f"Update a {name}")
    async def update_document(
        payload: update_schema,
        response: Response,
        item_id: int = Path(ge=1),
        db: Session = Depends(get_db),
    ):
        row = service.update(db, item_id, payload)
        view.write_headers(response, row)
        return view.envelope(row)

    @router.delete("/{item_id}", status_code=204, summary=f"Delete a {name}")
    async def delete_document(item_id: int = Path(ge=1), db: Session = Depends(get_db)):
        service.delete(db, item_id)
        return no_content({"X-Deleted-At": http_date(None), "X-Resource-Type": view.resource_type})

    return router
