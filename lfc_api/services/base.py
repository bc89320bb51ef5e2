"""Shared CRUD service used by both the REST routers and the GraphQL resolvers.

Every resource goes through the same write path:

1. Validate the incoming document against its Pydantic schema
2. Check that referenced documents exist (scalar ids and id lists)
3. Check unique values (jersey numbers, competition names, ...)
4. Run resource-specific consistency rules (matches have many)
5. Copy the document onto the ORM row, commit, log

Keeping this in one place means a GraphQL mutation and a REST PUT can never
disagree about what a valid player or match looks like.
"""

import logging
import re
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..config.settings import settings
from ..core.exceptions import (
    ConflictError,
    DocumentValidationError,
    InvalidQueryError,
    InvalidReferenceError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


def deep_merge(base: dict, changes: dict) -> dict:
    """Merge `changes` into a copy of `base`, descending into nested dicts.

    Lists and scalars in `changes` replace the stored value outright.
    """
    merged = dict(base)
    for key, value in changes.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def format_validation_errors(errors: Iterable[dict]) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def validate_document(schema: type[BaseModel], data: Any) -> BaseModel:
    """Run `data` through `schema`, turning Pydantic errors into our own."""
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        raise DocumentValidationError(format_validation_errors(errors), errors) from e


def to_snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


class CrudService:
    """Generic document service for one ORM model.

    Subclasses fill in the class attributes; the Match and Contract services
    add their embedded-list operations on top.
    """

    model: type = None  # ORM class
    create_schema: type[BaseModel] = None  # POST/PUT body
    document_schema: type[BaseModel] | None = None  # Full stored document, if wider than create_schema
    resource: str = "Document"  # Used in messages: "Player not found"

    references: dict[str, type] = {}  # field -> ORM class the id must exist in
    many_references: dict[str, tuple[str, type]] = {}  # field -> (relationship attribute, ORM class)
    unique_fields: dict[str, str] = {}  # field -> conflict message
    sort_fields: dict[str, str] = {}  # public sort name -> column attribute

    # ========== READS ==========

    def get(self, db: Session, document_id: int):
        row = db.get(self.model, document_id)
        if row is None:
            raise ResourceNotFoundError(self.resource, document_id)
        return row

    def list_page(self, db: Session, limit: int | None = None, offset: int = 0) -> tuple[list, int]:
        """Return one page of documents in id order, plus the total count."""
        query = db.query(self.model)
        total = query.count()
        query = query.order_by(self.model.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all(), total

    def count(self, db: Session, conditions: Iterable = ()) -> int:
        return db.query(self.model).filter(*conditions).count()

    def query(
        self,
        db: Session,
        conditions: Iterable = (),
        sort: tuple[str, bool] | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> list:
        """Filtered, sorted, paginated search used by GraphQL list queries.

        Args:
            conditions: SQLAlchemy expressions, combined with AND
            sort: (field name, descending); camelCase or snake_case
            page: 1-based page number
            page_size: documents per page, defaults to settings.default_page_size
        """
        page_size = settings.default_page_size if page_size is None else page_size
        if page < 1:
            raise InvalidQueryError("page must be 1 or greater")
        if not 1 <= page_size <= settings.max_page_size:
            raise InvalidQueryError(f"pageSize must be between 1 and {settings.max_page_size}")

        query = db.query(self.model).filter(*conditions)
        if sort is not None:
            column = self.sort_column(sort[0])
            query = query.order_by(column.desc() if sort[1] else column.asc())
        query = query.order_by(self.model.id)
        return query.offset((page - 1) * page_size).limit(page_size).all()

    def sort_column(self, field: str):
        name = to_snake_case(field)
        if name == "id":
            return self.model.id
        if name not in self.sort_fields:
            allowed = ", ".join(sorted(["id", *self.sort_fields]))
            raise InvalidQueryError(f"Cannot sort {self.resource} by '{field}'. Allowed: {allowed}")
        return getattr(self.model, self.sort_fields[name])

    # ========== WRITES ==========

    def create(self, db: Session, data: Any):
        document = validate_document(self.create_schema, data)
        row = self.model()
        row = self._save(db, row, document.model_dump(), document.model_fields_set)
        logger.info("Created %s %s", self.resource, row.id)
        return row

    def replace(self, db: Session, document_id: int, data: Any):
        """Full replacement (PUT): every field not supplied falls back to its default."""
        row = self.get(db, document_id)
        document = validate_document(self.create_schema, data)
        doc = self.prepare_replacement(row, document.model_dump())
        row = self._save(db, row, doc, document.model_fields_set)
        logger.info("Replaced %s %s", self.resource, row.id)
        return row

    def update(self, db: Session, document_id: int, changes: Any):
        """Partial update (PATCH): deep-merge, then validate the whole document."""
        row = self.get(db, document_id)
        if isinstance(changes, BaseModel):
            changes = changes.model_dump(exclude_unset=True)
        merged = deep_merge(row.to_document(), changes)
        document = validate_document(self.document_schema or self.create_schema, merged)
        row = self._save(db, row, document.model_dump(), set(changes))
        logger.info("Updated %s %s (%s)", self.resource, row.id, ", ".join(sorted(changes)) or "no changes")
        return row

    def delete(self, db: Session, document_id: int) -> None:
        row = self.get(db, document_id)
        db.delete(row)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ConflictError(
                f"{self.resource} {document_id} is still referenced by other documents"
            ) from e
        logger.info("Deleted %s %s", self.resource, document_id)

    # ========== HOOKS ==========

    def prepare_replacement(self, row, doc: dict) -> dict:
        """Adjust a PUT document before saving; the match service keeps lineup and goals."""
        return doc

    def check_consistency(self, db: Session, row, doc: dict, changed: set[str]) -> dict:
        """Cross-document rules. Returns the document to store (possibly adjusted)."""
        return doc

    # ========== INTERNALS ==========

    def _save(self, db: Session, row, doc: dict, changed: set[str]):
        self._check_references(db, doc)
        related = self._load_many_references(db, doc)
        self._check_unique(db, doc, row.id)
        doc = self.check_consistency(db, row, doc, changed)

        row.apply_document(doc)
        for attribute, rows in related.items():
            setattr(row, attribute, rows)

        db.add(row)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ConflictError(f"{self.resource} conflicts with an existing document") from e
        db.refresh(row)
        return row

    def _check_references(self, db: Session, doc: dict) -> None:
        for field, model in self.references.items():
            value = doc.get(field)
            if value is not None and db.get(model, value) is None:
                raise InvalidReferenceError(field, value)

    def _load_many_references(self, db: Session, doc: dict) -> dict[str, list]:
        related = {}
        for field, (attribute, model) in self.many_references.items():
            ids = list(dict.fromkeys(doc.get(field) or []))  # de-duplicate, keep order
            found = {}
            if ids:
                found = {item.id: item for item in db.query(model).filter(model.id.in_(ids))}
            missing = [value for value in ids if value not in found]
            if missing:
                raise InvalidReferenceError(field, missing[0])
            related[attribute] = [found[value] for value in ids]
        return related

    def _check_unique(self, db: Session, doc: dict, row_id: int | None) -> None:
        for field, message in self.unique_fields.items():
            value = doc.get(field)
            if value is None:
                continue
            query = db.query(self.model.id).filter(getattr(self.model, field) == value)
            if row_id is not None:
                query = query.filter(self.model.id != row_id)
            if query.first() is not None:
                raise ConflictError(message)
