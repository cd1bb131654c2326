
import logging
from fastapi import APIRouter, Depends
from dms.auth.deps import DocumentRepoDep, UserRepoDep, admin_only
from dms.errors import NotFound
from dms.utils.response import success

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(admin_only)])

@router.get("/documents")
def all_documents(docs: DocumentRepoDep):
    return success("Successfully retrieved all documents", docs.find(include_access=True))

@router.get("/documents/search")
def search_documents(docs: DocumentRepoDep, keyword: str | None = None):
    return success("Successfully searched documents", docs.search(keyword))

@router.get("/document/{doc_id}")
def document_by_id(doc_id: str, docs: DocumentRepoDep):
    doc = docs.find_by_id(doc_id)
    if not doc:
        raise NotFound(f"Document with ID {doc_id} not found")
    return success(f"Successfully retrieved document with ID {doc_id}", docs.project(doc, include_access=True))

@router.delete("/delete/document/{doc_id}")
def delete_document(doc_id: str, docs: DocumentRepoDep):
    doc = docs.find_by_id(doc_id)
    if not doc:
        raise NotFound(f"Document with ID {doc_id} not found")
    docs.delete(doc)
    logger.info("Admin deleted document %s", doc_id)
    return success(f"Successfully deleted document with ID {doc_id}")

@router.get("/users")
def all_users(users: UserRepoDep):
    return success("Successfully retrieved all users", users.find_all())

@router.get("/users/search")
def search_users(users: UserRepoDep, keyword: str | None = None):
    return success("Successfully searched users", users.search(keyword))

@router.get("/user/{user_id}")
def user_by_id(user_id: str, users: UserRepoDep):
    user = users.find_by_id(user_id)
    if not user:
        raise NotFound(f"User with the ID {user_id} not found")
    return success(f"Successfully retrieved user with ID {user_id}", users.project(user, include_role=False))

@router.delete("/delete/user/{user_id}")
def delete_user(user_id: str, users: UserRepoDep):
    user = users.find_by_id(user_id)
    if not user:
        raise NotFound(f"User with ID {user_id} is not found")
    # documents owned by the user are left in place
    users.delete(user)
    logger.info("Admin deleted user %s", user_id)
    return success(f"Successfully deleted user with ID {user_id}")
