"""API tests for the users endpoints."""

import pytest

from apps.users.models import UserModel

LIST_URL = "/api/users/"
DETAIL_URL = "/api/users/{uid}/"


@pytest.mark.django_db
def test_create_user_returns_201_and_record(client):
    r = client.post(LIST_URL, data={"email": "grace@example.com", "name": "Grace"}, content_type="application/json")
    assert r.status_code == 201
    body = r.json()
    assert body["email"] == "grace@example.com"
    assert body["name"] == "Grace"
    assert UserModel.objects.filter(id=body["id"]).exists()


@pytest.mark.django_db
def test_create_user_rejects_invalid_email(client):
    r = client.post(LIST_URL, data={"email": "not-an-email"}, content_type="application/json")
    assert r.status_code == 400
    assert "email" in r.json()["detail"]


@pytest.mark.django_db
def test_create_user_duplicate_email_is_bad_request(client, user):
    r = client.post(LIST_URL, data={"email": user.email}, content_type="application/json")
    assert r.status_code == 400


@pytest.mark.django_db
def test_list_and_get_user(client, user):
    r = client.get(LIST_URL)
    assert r.status_code == 200
    assert [u["id"] for u in r.json()] == [user.id]

    r = client.get(DETAIL_URL.format(uid=user.id))
    assert r.status_code == 200
    assert r.json() == {"id": user.id, "email": "ada@example.com", "name": "Ada"}


@pytest.mark.django_db
def test_get_missing_user_returns_404(client):
    r = client.get(DETAIL_URL.format(uid=999))
    assert r.status_code == 404
    assert r.json()["detail"] == "No User found with id 999"
