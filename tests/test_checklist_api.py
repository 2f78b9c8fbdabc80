import pytest
from fastapi import HTTPException
from sqlalchemy.orm import Session

import kanbanify.api.v1.boards as boards
import kanbanify.api.v1.cards as cards
import kanbanify.api.v1.checklist as checklist
import kanbanify.schemas as schemas


async def _card(session: Session):
    board = await boards.create_board(schemas.BoardCreate(title="Checklist"), session)
    return await cards.create_card(schemas.CardCreate(title="Task", list_id=board.lists[0].id), session)


@pytest.mark.asyncio
async def test_checklist_items_append_and_update_partially(db_session: Session):
    card = await _card(db_session)

    first = await checklist.create_checklist_item(
        schemas.ChecklistItemCreate(content="Create wireframes", card_id=card.id), db_session
    )
    second = await checklist.create_checklist_item(
        schemas.ChecklistItemCreate(content="Design mockups", card_id=card.id, completed=True), db_session
    )
    assert (first.position, first.completed) == (1000, False)
    assert (second.position, second.completed) == (2000, True)

    updated = await checklist.update_checklist_item(first.id, schemas.ChecklistItemUpdate(completed=True), db_session)
    assert updated.completed is True
    assert updated.content == "Create wireframes"


@pytest.mark.asyncio
async def test_checklist_validation(db_session: Session):
    with pytest.raises(HTTPException) as exc:
        await checklist.create_checklist_item(schemas.ChecklistItemCreate(content="Orphan"), db_session)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Content and cardId are required"

    with pytest.raises(HTTPException) as exc:
        await checklist.create_checklist_item(
            schemas.ChecklistItemCreate(content="Orphan", card_id="missing"), db_session
        )
    assert exc.value.status_code == 404
    assert exc.value.detail == "Card not found"


def test_checklist_over_http(client):
    board = client.post("/api/boards", json={"title": "Board"}).json()
    card = client.post("/api/cards", json={"title": "Task", "listId": board["lists"][0]["id"]}).json()

    response = client.post("/api/checklist", json={"content": "Write tests", "cardId": card["id"]})
    assert response.status_code == 201
    item = response.json()
    assert item["cardId"] == card["id"]
    assert item["completed"] is False

    response = client.put(f"/api/checklist/{item['id']}", json={"content": "Write more tests"})
    assert response.json()["content"] == "Write more tests"

    fetched = client.get(f"/api/cards/{card['id']}").json()
    assert [entry["content"] for entry in fetched["checklist"]] == ["Write more tests"]

    assert client.delete(f"/api/checklist/{item['id']}").json() == {"success": True}
    assert client.get(f"/api/cards/{card['id']}").json()["checklist"] == []
