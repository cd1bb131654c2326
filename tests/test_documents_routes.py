"""
Tests for document endpoints: validation, ownership and fetch-first ordering.
"""

import pytest

from dms.auth import tokens
from dms.models.user import Role


def document_payload(**overrides):
    payload = {"title": "doc_title", "content": "doc_content", "access": "private"}
    payload.update(overrides)
    return payload


class TestCreateDocument:
    @pytest.mark.parametrize("field", ["title", "content", "access"])
    def test_missing_field(self, client, make_user, auth_header, field):
        payload = document_payload()
        del payload[field]

        res = client.post("/document/create", headers=auth_header(make_user()), json=payload)

        assert res.status_code == 400
        assert field in res.json()["message"].lower()

    @pytest.mark.parametrize("overrides, field", [
        ({"title": "abc"}, "title"),
        ({"title": "x" * 51}, "title"),
        ({"content": "abc"}, "content"),
        ({"access": "secret"}, "access"),
    ])
    def test_invalid_field(self, client, make_user, auth_header, overrides, field):
        res = client.post("/document/create", headers=auth_header(make_user()), json=document_payload(**overrides))

        assert res.status_code == 400
        assert field in res.json()["message"]

    def test_owner_must_exist(self, client, auth_header):
        ghost = tokens.Identity(id="999", role=Role.STANDARD)

        res = client.post("/document/create", headers=auth_header(ghost), json=document_payload())

        assert res.status_code == 404
        assert "not found" in res.json()["message"].lower()

    def test_create_then_list(self, client, make_user, auth_header):
        user = make_user()
        headers = auth_header(user)

        res = client.post("/document/create", headers=headers, json=document_payload())
        assert res.status_code == 201
        created = res.json()["body"]
        assert created["access"] == "private"
        assert created["ownerId"] == user.id

        res = client.get("/documents", headers=headers)

        assert res.status_code == 200
        listed = res.json()["body"]
        assert len(listed) == 1
        assert listed[0]["id"] == created["id"]
        assert listed[0]["title"] == "doc_title"
        assert listed[0]["content"] == "doc_content"
        assert "access" not in listed[0]

    def test_owner_cannot_be_supplied(self, client, make_user, auth_header):
        user, other = make_user(), make_user()

        res = client.post("/document/create", headers=auth_header(user), json=document_payload(ownerId=other.id))

        assert res.json()["body"]["ownerId"] == user.id


class TestListDocuments:
    def test_only_own_documents(self, client, make_user, make_document, auth_header):
        a, b = make_user(), make_user()
        make_document(a, title="title of a")
        make_document(b, title="title of b")

        res = client.get("/documents", headers=auth_header(a))

        assert [d["title"] for d in res.json()["body"]] == ["title of a"]

    def test_missing_user(self, client, auth_header):
        res = client.get("/documents", headers=auth_header(tokens.Identity(id="999", role=Role.STANDARD)))

        assert res.status_code == 404

    def test_get_single_own_document(self, client, make_user, make_document, auth_header):
        user = make_user()
        doc = make_document(user)

        res = client.get(f"/document/{doc.id}", headers=auth_header(user))

        assert res.status_code == 200
        assert res.json()["body"]["title"] == "doc_title"

    def test_get_single_other_document(self, client, make_user, make_document, auth_header):
        doc = make_document(make_user())

        res = client.get(f"/document/{doc.id}", headers=auth_header(make_user()))

        assert res.status_code == 401


class TestUpdateDocument:
    def test_owner_updates(self, client, make_user, make_document, auth_header):
        user = make_user()
        doc = make_document(user)

        res = client.put(f"/document/update/{doc.id}", headers=auth_header(user), json={"title": "new title"})

        assert res.status_code == 200
        body = res.json()["body"]
        assert body["title"] == "new title"
        assert body["content"] == "doc_content"

    def test_non_owner_is_not_authorized(self, client, docs, make_user, make_document, auth_header):
        doc = make_document(make_user())
        intruder = make_user()

        res = client.put(f"/document/update/{doc.id}", headers=auth_header(intruder), json={"title": "hijacked"})

        assert res.status_code == 401
        assert "not authorized" in res.json()["message"]
        docs.db.expire_all()
        assert docs.find_by_id(doc.id).title == "doc_title"

    @pytest.mark.parametrize("doc_id", ["999", "not-an-id"])
    def test_missing_document_is_404(self, client, make_user, auth_header, doc_id):
        res = client.put(f"/document/update/{doc_id}", headers=auth_header(make_user()), json={"title": "new title"})

        assert res.status_code == 404

    def test_invalid_update(self, client, make_user, make_document, auth_header):
        user = make_user()
        doc = make_document(user)

        res = client.put(f"/document/update/{doc.id}", headers=auth_header(user), json={"content": "abc"})

        assert res.status_code == 400
        assert "content" in res.json()["message"]


class TestDeleteDocument:
    def test_owner_deletes(self, client, make_user, make_document, auth_header):
        user = make_user()
        doc = make_document(user)

        res = client.delete(f"/document/delete/{doc.id}", headers=auth_header(user))

        assert res.status_code == 200
        assert client.get("/documents", headers=auth_header(user)).json()["body"] == []

    def test_repeat_delete_is_404(self, client, make_user, make_document, auth_header):
        user = make_user()
        doc = make_document(user)
        headers = auth_header(user)

        client.delete(f"/document/delete/{doc.id}", headers=headers)
        res = client.delete(f"/document/delete/{doc.id}", headers=headers)

        assert res.status_code == 404

    def test_non_owner_cannot_delete(self, client, docs, make_user, make_document, auth_header):
        doc = make_document(make_user())

        res = client.delete(f"/document/delete/{doc.id}", headers=auth_header(make_user()))

        assert res.status_code == 401
        docs.db.expire_all()
        assert docs.find_by_id(doc.id) is not None

    def test_admin_uses_admin_route_not_owner_route(self, client, make_user, make_document, auth_header):
        doc = make_document(make_user())

        res = client.delete(f"/document/delete/{doc.id}", headers=auth_header(make_user(role=Role.ADMINISTRATOR)))

        assert res.status_code == 401
