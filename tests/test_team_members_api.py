import pytest
from fastapi import HTTPException
from sqlalchemy.orm import Session

import kanbanify.api.v1.boards as boards
import kanbanify.api.v1.team_members as team_members
import kanbanify.schemas as schemas


@pytest.mark.asyncio
async def test_create_member_trims_name_and_picks_color(db_session: Session):
    board = await boards.create_board(schemas.BoardCreate(title="Team"), db_session)

    member = await team_members.create_team_member(
        schemas.TeamMemberCreate(name="  Carol Davis  ", board_id=board.id), db_session
    )
    assert member.name == "Carol Davis"
    assert member.color in team_members.AVATAR_COLORS

    chosen = await team_members.create_team_member(
        schemas.TeamMemberCreate(name="Dave", board_id=board.id, color="#ff9800"), db_session
    )
    assert chosen.color == "#ff9800"

    listed = await team_members.list_team_members(board_id=board.id, db=db_session)
    assert [item.name for item in listed] == ["Carol Davis", "Dave"]


@pytest.mark.asyncio
async def test_create_member_validation(db_session: Session):
    with pytest.raises(HTTPException) as exc:
        await team_members.create_team_member(schemas.TeamMemberCreate(name="   ", board_id="b"), db_session)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Name and board ID are required"

    with pytest.raises(HTTPException) as exc:
        await team_members.create_team_member(schemas.TeamMemberCreate(name="Eve", board_id="missing"), db_session)
    assert exc.value.status_code == 404


def test_deleting_member_removes_assignments(client):
    board = client.post("/api/boards", json={"title": "Board"}).json()
    card = client.post("/api/cards", json={"title": "Task", "listId": board["lists"][0]["id"]}).json()
    member = client.post("/api/team-members", json={"name": "Alice", "boardId": board["id"]}).json()
    client.post(f"/api/cards/{card['id']}/assignments", json={"teamMemberId": member["id"]})

    response = client.put(f"/api/team-members/{member['id']}", json={"name": "Alice J.", "color": "#000000"})
    assert response.json()["name"] == "Alice J."
    assert response.json()["color"] == "#000000"

    assert client.delete(f"/api/team-members/{member['id']}").json() == {"success": True}
    assert client.get(f"/api/cards/{card['id']}").json()["assignees"] == []
    assert client.get("/api/team-members", params={"boardId": board["id"]}).json() == []

    response = client.get("/api/team-members")
    assert response.status_code == 400
    assert response.json() == {"error": "Board ID is required"}
