from kanbanify.database import Base


def test_migration_status_reports_counts(client):
    board = client.post("/api/boards", json={"title": "Board"}).json()
    client.post("/api/cards", json={"title": "Card", "listId": board["lists"][0]["id"]})

    response = client.get("/api/setup/migration")
    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["stats"] == {"boards": 1, "lists": 4, "cards": 1}


def test_migration_status_without_tables(client, db_session):
    Base.metadata.drop_all(bind=db_session.get_bind())

    response = client.get("/api/setup/migration")
    assert response.status_code == 503
    assert response.json()["error"] == "Database tables not found"
