from sqlalchemy import select
from sqlalchemy.orm import Session
from dms.models.document import Document
from dms.repositories.base import escape_like, parse_id
from dms.schemas.document import DocumentOut

UPDATABLE_FIELDS = ("title", "content")

class DocumentRepository:
    """Data access for documents.

    Read methods that return lists hand back projected dicts; ``access`` is
    hidden unless the caller asks for the administrative view.
    """

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def project(doc: Document, include_access: bool = False) -> dict:
        exclude = None if include_access else {"access"}
        return DocumentOut.model_validate(doc).model_dump(by_alias=True, mode="json", exclude=exclude)

    def create(self, fields: dict) -> Document:
        doc = Document(**fields)
        self.db.add(doc)
        self.db.commit()
        self.db.refresh(doc)
        return doc

    def find(self, filters: dict | None = None, include_access: bool = False) -> list[dict]:
        """Projected documents matching ``filters``.

        ``access`` is left out of owner listings; owners see it in the create
        and update responses, administrators in every /admin view.
        """
        stmt = select(Document).filter_by(**(filters or {})).order_by(Document.id)
        return [self.project(d, include_access) for d in self.db.scalars(stmt)]

    def find_by_id(self, doc_id) -> Document | None:
        pk = parse_id(doc_id)
        if pk is None:
            return None
        return self.db.get(Document, pk)

    def search(self, keyword: str | None) -> list[dict]:
        stmt = select(Document).order_by(Document.id)
        if keyword:
            stmt = stmt.where(Document.title.ilike(f"%{escape_like(keyword)}%", escape="\\"))
        return [self.project(d, include_access=True) for d in self.db.scalars(stmt)]

    def update(self, doc: Document, fields: dict) -> Document:
        for key in UPDATABLE_FIELDS:
            if fields.get(key) is not None:
                setattr(doc, key, fields[key])
        self.db.commit()
        self.db.refresh(doc)
        return doc

    def delete(self, doc: Document) -> None:
        self.db.delete(doc)
        self.db.commit()
