
import logging
from fastapi import APIRouter
from dms.auth.deps import DocumentRepoDep, IdentityDep, UserRepoDep
from dms.auth.policy import require_owner
from dms.errors import NotFound
from dms.schemas.document import DocumentCreate, DocumentUpdate
from dms.utils.response import success, created

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])

def _owner_or_404(users, identity):
    owner = users.find_by_id(identity.id)
    if not owner:
        raise NotFound("User with this ID not found")
    return owner

def _document_or_404(docs, doc_id):
    doc = docs.find_by_id(doc_id)
    if not doc:
        raise NotFound(f"Document with ID {doc_id} not found")
    return doc

@router.post("/document/create", status_code=201)
def create_document(body: DocumentCreate, identity: IdentityDep, users: UserRepoDep, docs: DocumentRepoDep):
    owner = _owner_or_404(users, identity)
    doc = docs.create({"title": body.title, "content": body.content, "access": body.access, "owner_id": owner.id})
    logger.info("User %s created document %s", owner.id, doc.id)
    return created("New Document Has Been Created Successfully", docs.project(doc, include_access=True))

@router.get("/documents")
def get_documents(identity: IdentityDep, users: UserRepoDep, docs: DocumentRepoDep):
    owner = _owner_or_404(users, identity)
    return success("Successfully retrieved documents", docs.find({"owner_id": owner.id}))

@router.get("/document/{doc_id}")
def get_document(doc_id: str, identity: IdentityDep, docs: DocumentRepoDep):
    doc = _document_or_404(docs, doc_id)
    require_owner(identity, doc.owner_id)
    return success("Successfully retrieved document", docs.project(doc))

@router.put("/document/update/{doc_id}")
def update_document(doc_id: str, body: DocumentUpdate, identity: IdentityDep, docs: DocumentRepoDep):
    doc = _document_or_404(docs, doc_id)
    require_owner(identity, doc.owner_id)
    doc = docs.update(doc, body.model_dump(exclude_none=True))
    return success("Document has been updated successfully", docs.project(doc, include_access=True))

@router.delete("/document/delete/{doc_id}")
def delete_document(doc_id: str, identity: IdentityDep, docs: DocumentRepoDep):
    doc = _document_or_404(docs, doc_id)
    require_owner(identity, doc.owner_id)
    docs.delete(doc)
    logger.info("User %s deleted document %s", identity.id, doc_id)
    return success(f"Successfully deleted document with ID {doc_id}")
