from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from diagnocare.schemas import DeleteResult, InsertResult, UpdateResult


class DocumentRepository:
    """
    Data access for one document collection.

    Responsibilities:
      - list/find/insert/update/delete on a single table
      - documents in, documents out (plain dicts keyed like the JSON API)
      - no FastAPI, no HTTP status codes
    """

    model: Any = None

    def __init__(self, db: Session):
        self.db = db

    def _where(self, filters: dict[str, Any]):
        return [self.model.column_for(key) == value for key, value in filters.items()]

    def get(self, document_id: str):
        return self.db.get(self.model, document_id)

    def list_all(self) -> list[dict[str, Any]]:
        rows = self.db.execute(select(self.model)).scalars().all()
        return [row.to_document() for row in rows]

    def find_one(self, filters: dict[str, Any]) -> dict[str, Any] | None:
        row = self.db.execute(select(self.model).where(*self._where(filters))).scalars().first()
        return row.to_document() if row is not None else None

    def find_many(self, filters: dict[str, Any]) -> list[dict[str, Any]]:
        rows = self.db.execute(select(self.model).where(*self._where(filters))).scalars().all()
        return [row.to_document() for row in rows]

    def insert(self, document: dict[str, Any]) -> InsertResult:
        row = self.model.from_document(document)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return InsertResult(inserted_id=row.id)

    def update_fields(self, document_id: str, partial: dict[str, Any]) -> UpdateResult:
        row = self.get(document_id)
        if row is None:
            return UpdateResult(matched_count=0, modified_count=0)

        changed = row.merge(partial)
        self.db.commit()
        return UpdateResult(matched_count=1, modified_count=1 if changed else 0)

    def delete_one(self, document_id: str) -> DeleteResult:
        result = self.db.execute(
            delete(self.model)
            .where(self.model.id == document_id)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return DeleteResult(deleted_count=result.rowcount)
