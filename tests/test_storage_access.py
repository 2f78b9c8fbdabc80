import json

import pytest

from kanbanify.client import access
from kanbanify.client.api import ApiClient, ApiError
from kanbanify.client.storage import ADMIN_SESSION_KEY, BOARD_ACCESS_KEY, LocalStorage


def test_local_storage_persists_to_file(tmp_path):
    path = tmp_path / "state" / "local-storage.json"
    storage = LocalStorage(path)
    storage.set_item("kanbanify-current-board-id", "abc")
    storage.set_item(ADMIN_SESSION_KEY, "true")

    reloaded = LocalStorage(path)
    assert reloaded.get_item("kanbanify-current-board-id") == "abc"
    assert sorted(reloaded.keys()) == [ADMIN_SESSION_KEY, "kanbanify-current-board-id"]

    reloaded.remove_item(ADMIN_SESSION_KEY)
    assert LocalStorage(path).get_item(ADMIN_SESSION_KEY) is None

    reloaded.clear()
    assert json.loads(path.read_text()) == {}


def test_local_storage_ignores_corrupt_file(tmp_path):
    path = tmp_path / "local-storage.json"
    path.write_text("{not json")
    assert LocalStorage(path).keys() == []


def test_admin_session_flag(storage):
    assert access.is_admin_session(storage) is False
    access.set_admin_session(storage, True)
    assert access.is_admin_session(storage) is True
    assert storage.get_item(ADMIN_SESSION_KEY) == "true"

    access.logout_admin(storage)
    assert access.is_admin_session(storage) is False


def test_board_access_list(storage):
    assert access.get_board_access(storage) == []

    access.add_board_access(storage, "b1")
    access.add_board_access(storage, "b2")
    access.add_board_access(storage, "b1")
    assert access.get_board_access(storage) == ["b1", "b2"]
    assert access.has_board_access(storage, "b2") is True

    access.remove_board_access(storage, "b1")
    assert access.get_board_access(storage) == ["b2"]

    access.clear_all_board_access(storage)
    assert access.has_board_access(storage, "b2") is False

    storage.set_item(BOARD_ACCESS_KEY, "garbage")
    assert access.get_board_access(storage) == []


@pytest.mark.asyncio
async def test_unlock_board_only_records_valid_codes(api: ApiClient, storage):
    board = await api.post("boards", json={"title": "Private", "accessCode": "abc123"})

    assert await access.unlock_board(api, storage, board["id"], "wrong") is False
    assert access.has_board_access(storage, board["id"]) is False

    assert await access.unlock_board(api, storage, board["id"], "abc123") is True
    assert access.get_board_access(storage) == [board["id"]]


@pytest.mark.asyncio
async def test_login_admin(api: ApiClient, storage, monkeypatch):
    monkeypatch.setattr("kanbanify.config.settings.ADMIN_PASSWORD", "hunter2")

    assert await access.login_admin(api, storage, "nope") is False
    assert access.is_admin_session(storage) is False

    assert await access.login_admin(api, storage, "hunter2") is True
    assert access.is_admin_session(storage) is True


@pytest.mark.asyncio
async def test_login_admin_without_connection(api: ApiClient, storage, transport):
    transport.disconnect_when = lambda request: request.url.path.endswith("/admin/login")

    assert await access.login_admin(api, storage, "hunter2") is False
    assert access.is_admin_session(storage) is False


@pytest.mark.asyncio
async def test_api_error_carries_server_message(api: ApiClient):
    with pytest.raises(ApiError) as exc:
        await api.get("boards/missing")
    assert exc.value.message == "Board not found"
    assert exc.value.status_code == 404
