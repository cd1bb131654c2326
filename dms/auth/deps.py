
from typing import Annotated
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from dms.auth.policy import require_role
from dms.auth.tokens import Identity
from dms.db.session import get_db
from dms.errors import Unauthenticated
from dms.models.user import Role
from dms.repositories.document_repository import DocumentRepository
from dms.repositories.user_repository import UserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)

def get_document_repository(db: Session = Depends(get_db)) -> DocumentRepository:
    return DocumentRepository(db)

def get_identity(request: Request) -> Identity:
    """Identity attached by the auth middleware."""
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise Unauthenticated()
    return identity

def admin_only(identity: Identity = Depends(get_identity)) -> Identity:
    require_role(identity, Role.ADMINISTRATOR)
    return identity


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
DocumentRepoDep = Annotated[DocumentRepository, Depends(get_document_repository)]
IdentityDep = Annotated[Identity, Depends(get_identity)]
