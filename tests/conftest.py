import os

os.environ["APP_ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PASSWORD_SCHEMES"] = '["pbkdf2_sha256"]'

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from dms.auth import tokens
from dms.db.session import get_db, init_db, make_engine
from dms.main import create_app
from dms.models.document import Access
from dms.models.user import Role
from dms.repositories.document_repository import DocumentRepository
from dms.repositories.user_repository import UserRepository


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
def session_factory():
    engine = make_engine("sqlite://")
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def users(db):
    return UserRepository(db)


@pytest.fixture
def docs(db):
    return DocumentRepository(db)


# =============================================================================
# App
# =============================================================================


@pytest.fixture
def app(session_factory):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


# =============================================================================
# Helpers
# =============================================================================


@pytest.fixture
def auth_header():
    """Header carrying a valid token for a user row or an Identity."""

    def _header(user_or_identity) -> dict:
        identity = user_or_identity
        if not isinstance(identity, tokens.Identity):
            identity = tokens.identity_for(user_or_identity)
        return {"x-auth-token": tokens.issue(identity)}

    return _header


@pytest.fixture
def make_user(users):
    counter = {"n": 0}

    def _make(role: Role = Role.STANDARD, **overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "user_name": f"user{n}",
            "first_name": "Frank",
            "last_name": "Osagie",
            "email": f"user{n}@mail.com",
            "password": "frank123",
            "role": int(role),
        }
        fields.update(overrides)
        return users.create(fields)

    return _make


@pytest.fixture
def make_document(docs):
    def _make(owner, title="doc_title", content="doc_content", access=Access.PRIVATE):
        return docs.create({"title": title, "content": content, "access": access, "owner_id": owner.id})

    return _make
