import pytest
from fastapi import HTTPException
from sqlalchemy.orm import Session

import kanbanify.api.v1.admin as admin
import kanbanify.api.v1.boards as boards
import kanbanify.models as models
import kanbanify.schemas as schemas
from kanbanify.auth import check_admin_password, has_admin_headers


@pytest.fixture
def admin_password(monkeypatch):
    monkeypatch.setattr("kanbanify.config.settings.ADMIN_PASSWORD", "correct horse")
    return "correct horse"


def test_check_admin_password(admin_password, monkeypatch):
    assert check_admin_password(admin_password) is True
    assert check_admin_password("battery staple") is False
    assert check_admin_password(None) is False

    monkeypatch.setattr("kanbanify.config.settings.ADMIN_PASSWORD", None)
    assert check_admin_password("") is False
    assert check_admin_password("anything") is False


def test_has_admin_headers(admin_password):
    assert has_admin_headers(None, "true") is True
    assert has_admin_headers(admin_password, None) is True
    assert has_admin_headers("nope", "false") is False
    assert has_admin_headers(None, None) is False


@pytest.mark.asyncio
async def test_admin_login_direct(admin_password):
    result = await admin.admin_login(schemas.AdminLoginRequest(password=admin_password))
    assert result.success is True

    with pytest.raises(HTTPException) as exc:
        await admin.admin_login(schemas.AdminLoginRequest(password=""))
    assert exc.value.status_code == 400
    assert exc.value.detail == "Password is required"

    with pytest.raises(HTTPException) as exc:
        await admin.admin_login(schemas.AdminLoginRequest(password="wrong"))
    assert exc.value.status_code == 401
    assert exc.value.detail == "Invalid admin password"


def test_admin_login_over_http(client, admin_password):
    response = client.post("/api/admin/login", json={"password": ""})
    assert response.status_code == 400
    assert response.json() == {"error": "Password is required"}

    response = client.post("/api/admin/login", json={"password": "wrong"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid admin password"}

    response = client.post("/api/admin/login", json={"password": admin_password})
    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_admin_login_unexpected_failure(client, admin_password, monkeypatch):
    def explode(_password):
        raise RuntimeError("boom")

    monkeypatch.setattr(admin, "check_admin_password", explode)
    response = client.post("/api/admin/login", json={"password": admin_password})
    assert response.status_code == 500
    assert response.json() == {"error": "Login failed"}


@pytest.mark.asyncio
async def test_board_access_records_email_once(db_session: Session):
    board = await boards.create_board(schemas.BoardCreate(title="Private", access_code="abc123"), db_session)

    with pytest.raises(HTTPException) as exc:
        await boards.validate_board_access(board.id, schemas.BoardAccessRequest(access_code="nope"), db_session)
    assert exc.value.status_code == 401
    assert exc.value.detail == "Invalid access code"

    with pytest.raises(HTTPException) as exc:
        await boards.validate_board_access(board.id, schemas.BoardAccessRequest(), db_session)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Access code is required"

    with pytest.raises(HTTPException) as exc:
        await boards.validate_board_access("missing", schemas.BoardAccessRequest(access_code="abc123"), db_session)
    assert exc.value.status_code == 404

    request = schemas.BoardAccessRequest(access_code="abc123", email="Alice@Example.com")
    assert (await boards.validate_board_access(board.id, request, db_session)).success is True
    assert (await boards.validate_board_access(board.id, request, db_session)).success is True

    records = db_session.query(models.BoardAccess).all()
    assert [record.email for record in records] == ["alice@example.com"]


def test_board_access_over_http(client):
    board = client.post("/api/boards", json={"title": "Private", "accessCode": "abc123"}).json()

    response = client.post(f"/api/boards/{board['id']}/access", json={"accessCode": "wrong"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid access code"}

    response = client.post(f"/api/boards/{board['id']}/access", json={"accessCode": "abc123"})
    assert response.status_code == 200
    assert response.json() == {"success": True}
