"""Shared behaviour for tables that store client documents."""

import re
import secrets
from typing import Any, ClassVar

from sqlalchemy import JSON, Column, String


ID_FIELD = "_id"
ID_LENGTH = 24
ID_PATTERN = re.compile(rf"[0-9a-fA-F]{{{ID_LENGTH}}}")


def new_document_id() -> str:
    return secrets.token_hex(ID_LENGTH // 2)


def is_document_id(value: str) -> bool:
    return ID_PATTERN.fullmatch(value) is not None


class DocumentMixin:
    """Maps a row to and from a free-form JSON document.

    ``document_fields`` lists the document keys stored in real columns
    (document key -> attribute name). Everything else lives in
    ``attributes``.
    """

    document_fields: ClassVar[dict[str, str]] = {}

    id = Column(String(ID_LENGTH), primary_key=True, default=new_document_id)
    attributes = Column(JSON, nullable=False, default=dict)

    @classmethod
    def column_for(cls, key: str):
        if key == ID_FIELD:
            return cls.id
        attribute = cls.document_fields.get(key)
        if attribute is None:
            raise ValueError(f"{cls.__name__} cannot be filtered by '{key}'.")
        return getattr(cls, attribute)

    @classmethod
    def from_document(cls, document: dict[str, Any]):
        instance = cls(attributes={})
        instance.merge(document)
        return instance

    def merge(self, partial: dict[str, Any]) -> bool:
        """Apply ``partial`` to the row and report whether anything changed."""
        changed = False
        attributes = dict(self.attributes or {})

        for key, value in partial.items():
            if key == ID_FIELD:
                continue
            attribute = self.document_fields.get(key)
            if attribute is not None:
                if getattr(self, attribute) != value:
                    setattr(self, attribute, value)
                    changed = True
            elif key not in attributes or attributes[key] != value:
                attributes[key] = value
                changed = True

        # Reassign so the JSON column is flagged dirty.
        self.attributes = attributes
        return changed

    def to_document(self) -> dict[str, Any]:
        document: dict[str, Any] = {ID_FIELD: self.id}
        document.update(self.attributes or {})
        for key, attribute in self.document_fields.items():
            document[key] = getattr(self, attribute)
        return document
