import pytest
from fastapi import HTTPException
from sqlalchemy.orm import Session

import kanbanify.api.v1.boards as boards
import kanbanify.api.v1.cards as cards
import kanbanify.api.v1.team_members as team_members
import kanbanify.schemas as schemas
from kanbanify.errors import PersistenceError


async def _board_with_lists(session: Session):
    board = await boards.create_board(schemas.BoardCreate(title="Cards"), session)
    return board, [item.id for item in board.lists]


@pytest.mark.asyncio
async def test_cards_append_to_end_of_list(db_session: Session):
    _, list_ids = await _board_with_lists(db_session)

    first = await cards.create_card(schemas.CardCreate(title="First", list_id=list_ids[0]), db_session)
    second = await cards.create_card(schemas.CardCreate(title="Second", list_id=list_ids[0]), db_session)
    other = await cards.create_card(schemas.CardCreate(title="Other", list_id=list_ids[1]), db_session)

    assert first.position == 1000
    assert second.position == 2000
    assert other.position == 1000
    assert first.priority.value == "medium"
    assert first.status.value == "active"


@pytest.mark.asyncio
async def test_create_card_validation(db_session: Session):
    with pytest.raises(HTTPException) as exc:
        await cards.create_card(schemas.CardCreate(title="No list"), db_session)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Card title and list ID are required"

    with pytest.raises(HTTPException) as exc:
        await cards.create_card(schemas.CardCreate(title="Lost", list_id="missing"), db_session)
    assert exc.value.status_code == 404
    assert exc.value.detail == "List not found"


@pytest.mark.asyncio
async def test_moving_card_to_other_list_without_position_appends(db_session: Session):
    _, list_ids = await _board_with_lists(db_session)
    await cards.create_card(schemas.CardCreate(title="Resident", list_id=list_ids[1]), db_session)
    card = await cards.create_card(schemas.CardCreate(title="Mover", list_id=list_ids[0]), db_session)

    moved = await cards.update_card(card.id, schemas.CardUpdate(list_id=list_ids[1]), db_session)
    assert moved.list_id == list_ids[1]
    assert moved.position == 2000

    placed = await cards.update_card(card.id, schemas.CardUpdate(list_id=list_ids[2], position=1000), db_session)
    assert placed.list_id == list_ids[2]
    assert placed.position == 1000


@pytest.mark.asyncio
async def test_update_card_fields_and_clear_due_date(db_session: Session):
    _, list_ids = await _board_with_lists(db_session)
    card = await cards.create_card(
        schemas.CardCreate.model_validate(
            {"title": "Task", "listId": list_ids[0], "dueDate": "2024-01-15T09:00:00Z", "priority": "high"}
        ),
        db_session,
    )
    assert card.due_date is not None

    updated = await cards.update_card(
        card.id,
        schemas.CardUpdate.model_validate({"title": "Renamed", "status": "completed", "dueDate": None}),
        db_session,
    )
    assert updated.title == "Renamed"
    assert updated.status.value == "completed"
    assert updated.priority.value == "high"
    assert updated.due_date is None

    with pytest.raises(PersistenceError):
        await cards.update_card("missing", schemas.CardUpdate(title="x"), db_session)


@pytest.mark.asyncio
async def test_assignment_rules(db_session: Session):
    board, list_ids = await _board_with_lists(db_session)
    card = await cards.create_card(schemas.CardCreate(title="Task", list_id=list_ids[0]), db_session)
    member = await team_members.create_team_member(
        schemas.TeamMemberCreate(name="Alice", board_id=board.id, color="#e91e63"), db_session
    )

    assignment = await cards.assign_member(card.id, schemas.AssignmentCreate(team_member_id=member.id), db_session)
    assert assignment.team_member.name == "Alice"

    with pytest.raises(HTTPException) as exc:
        await cards.assign_member(card.id, schemas.AssignmentCreate(team_member_id=member.id), db_session)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Team member is already assigned to this card"

    with pytest.raises(HTTPException) as exc:
        await cards.assign_member(card.id, schemas.AssignmentCreate(), db_session)
    assert exc.value.detail == "Team member ID is required"

    result = await cards.unassign_member(card.id, team_member_id=member.id, db=db_session)
    assert result.success is True

    with pytest.raises(PersistenceError):
        await cards.unassign_member(card.id, team_member_id=member.id, db=db_session)


def test_card_endpoints_over_http(client):
    board = client.post("/api/boards", json={"title": "Board"}).json()
    list_id = board["lists"][0]["id"]

    response = client.post("/api/cards", json={"title": "Task", "listId": list_id, "priority": "low"})
    assert response.status_code == 201
    card = response.json()
    assert card["position"] == 1000
    assert card["assignees"] == []
    assert card["checklist"] == []

    response = client.post("/api/cards", json={"title": "Next", "listId": list_id})
    assert response.json()["position"] == 2000

    by_board = client.get("/api/cards", params={"boardId": board["id"]}).json()
    assert [item["title"] for item in by_board] == ["Task", "Next"]

    member = client.post("/api/team-members", json={"name": "Bob", "boardId": board["id"]}).json()
    response = client.post(f"/api/cards/{card['id']}/assignments", json={"teamMemberId": member["id"]})
    assert response.status_code == 201
    assert response.json()["teamMember"]["name"] == "Bob"

    fetched = client.get(f"/api/cards/{card['id']}").json()
    assert [item["teamMemberId"] for item in fetched["assignees"]] == [member["id"]]

    response = client.delete(f"/api/cards/{card['id']}/assignments")
    assert response.status_code == 400
    assert response.json() == {"error": "Team member ID is required"}

    response = client.delete(f"/api/cards/{card['id']}/assignments", params={"teamMemberId": member["id"]})
    assert response.json() == {"success": True}

    assert client.delete(f"/api/cards/{card['id']}").json() == {"success": True}
    assert client.get(f"/api/cards/{card['id']}").status_code == 404


def test_assigning_unknown_member_is_not_found(client):
    board = client.post("/api/boards", json={"title": "Board"}).json()
    card = client.post("/api/cards", json={"title": "Task", "listId": board["lists"][0]["id"]}).json()

    response = client.post(f"/api/cards/{card['id']}/assignments", json={"teamMemberId": "ghost"})
    assert response.status_code == 404
    assert response.json() == {"error": "The requested item was not found"}
