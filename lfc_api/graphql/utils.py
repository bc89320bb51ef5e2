"""Small helpers shared by the GraphQL resolvers."""

import dataclasses
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any

import strawberry
from graphql import GraphQLError
from sqlalchemy.orm import Session
from strawberry.types import Info

from ..core.exceptions import InvalidQueryError, LFCError


def get_session(info: Info) -> Session:
    return info.context["db"]


def parse_id(value: Any) -> int:
    """GraphQL ids arrive as strings; the database uses integers."""
    try:
        document_id = int(value)
    except (TypeError, ValueError) as e:
        raise InvalidQueryError(f"Invalid ID format: {value!r}") from e
    if document_id < 1:
        raise InvalidQueryError(f"Invalid ID format: {value!r}")
    return document_id


def input_to_dict(value: Any) -> Any:
    """Convert a Strawberry input into plain data, dropping fields that were not sent.

    Fields left UNSET are omitted so that partial updates only touch what the
    client supplied; an explicit null is kept as None.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        result = {}
        for field in dataclasses.fields(value):
            item = getattr(value, field.name)
            if item is strawberry.UNSET:
                continue
            result[field.name] = input_to_dict(item)
        return result
    if isinstance(value, list):
        return [input_to_dict(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value


@contextmanager
def graphql_errors(action: str) -> Iterator[None]:
    """Re-raise domain errors as GraphQL errors: "Error fetching players: ..."."""
    try:
        yield
    except LFCError as e:
        raise GraphQLError(f"Error {action}: {e}") from e
