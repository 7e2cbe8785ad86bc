"""
Document-style access to a table of schema-less records.

Each row keeps the caller's fields in a JSON column; this wrapper exposes
them as plain dicts keyed the way clients see them, with the generated
identifier under ``_id``.
"""

import re
from typing import Any

from sqlalchemy.orm import Session

from app.models.document import DocumentMixin, new_id
from app.schemas.results import DeleteResult, InsertResult, UpdateResult

ID_FIELD = "_id"
_ID_RE = re.compile(r"[0-9a-f]{32}")


def is_valid_id(value: Any) -> bool:
    return isinstance(value, str) and _ID_RE.fullmatch(value) is not None


def to_document(row: DocumentMixin) -> dict[str, Any]:
    return {ID_FIELD: row.id, **row.data}


class DocumentCollection:
    def __init__(self, db: Session, model: type[DocumentMixin]):
        self.db = db
        self.model = model

    def _get(self, id: str) -> DocumentMixin | None:
        # malformed ids simply match nothing
        if not is_valid_id(id):
            return None
        return self.db.get(self.model, id)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def find(self, filter: dict[str, str] | None = None) -> list[dict[str, Any]]:
        """Return every document, or those whose fields equal ``filter`` exactly."""
        query = self.db.query(self.model)
        for field, value in (filter or {}).items():
            query = query.filter(self.model.data[field].as_string() == value)
        return [to_document(row) for row in query.all()]

    def find_one(self, id: str) -> dict[str, Any] | None:
        row = self._get(id)
        return to_document(row) if row is not None else None

    def insert_one(self, document: dict[str, Any]) -> InsertResult:
        data = {k: v for k, v in document.items() if k != ID_FIELD}
        row = self.model(id=new_id(), data=data)
        self.db.add(row)
        self._commit()
        return InsertResult(inserted_id=row.id)

    def update_one(self, id: str, fields: dict[str, Any]) -> UpdateResult:
        """Set ``fields`` on the matching document, leaving its other fields alone."""
        row = self._get(id)
        if row is None:
            return UpdateResult(matched_count=0, modified_count=0)

        updated = {**row.data, **{k: v for k, v in fields.items() if k != ID_FIELD}}
        if updated == row.data:
            return UpdateResult(matched_count=1, modified_count=0)

        # JSON columns are not mutation-tracked, assign a new dict
        row.data = updated
        self._commit()
        return UpdateResult(matched_count=1, modified_count=1)

    def delete_one(self, id: str) -> DeleteResult:
        row = self._get(id)
        if row is None:
            return DeleteResult(deleted_count=0)

        self.db.delete(row)
        self._commit()
        return DeleteResult(deleted_count=1)
