"""Shared plumbing for the per-entity resolvers.

Every entity exposes the same five operations, so the resolver modules only
wire their own filter builder, output type and service into these helpers.
"""

import logging

from strawberry.types import Info

from ...core.exceptions import ResourceNotFoundError
from ..inputs import PaginationInput, SortDirection, SortInput
from ..utils import get_session, graphql_errors, input_to_dict, parse_id

logger = logging.getLogger(__name__)


def sort_spec(sort: SortInput | None) -> tuple[str, bool] | None:
    """(field, descending) as understood by CrudService.query."""
    if sort is None:
        return None
    return sort.field, sort.direction == SortDirection.DESC


def page_spec(pagination: PaginationInput | None) -> dict:
    if pagination is None:
        return {}
    return {"page": pagination.page, "page_size": pagination.page_size}


def list_rows(info: Info, service, build_conditions, filter, sort, pagination, plural: str) -> list:
    """Rows for a list query. The filter is turned into conditions here so that
    a bad id inside it is reported like any other fetch error."""
    with graphql_errors(f"fetching {plural}"):
        return service.query(
            get_session(info),
            build_conditions(filter),
            sort=sort_spec(sort),
            **page_spec(pagination),
        )


def get_row(info: Info, service, document_id, label: str):
    """A single row, or None when no document has that id."""
    with graphql_errors(f"fetching {label}"):
        try:
            return service.get(get_session(info), parse_id(document_id))
        except ResourceNotFoundError:
            return None


def create_row(info: Info, service, data, label: str):
    with graphql_errors(f"creating {label}"):
        return service.create(get_session(info), input_to_dict(data))


def update_row(info: Info, service, document_id, data, label: str):
    with graphql_errors(f"updating {label}"):
        return service.update(get_session(info), parse_id(document_id), input_to_dict(data))


def delete_row(info: Info, service, document_id, label: str) -> bool:
    """True when the document was deleted, False when it did not exist."""
    with graphql_errors(f"deleting {label}"):
        try:
            service.delete(get_session(info), parse_id(document_id))
        except ResourceNotFoundError:
            logger.info("Nothing to delete: %s %s", label, document_id)
            return False
    return True
