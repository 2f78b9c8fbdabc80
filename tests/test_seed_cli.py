import pytest
from sqlalchemy.orm import Session, sessionmaker

import kanbanify.database as database
import kanbanify.models as models
from kanbanify import cli
from kanbanify.seed import populate_access_codes, seed_database


def test_seed_creates_demo_board(db_session: Session):
    db_session.add(models.Board(title="Leftover", background="#000000"))
    db_session.commit()

    result = seed_database(db_session)

    boards = db_session.query(models.Board).all()
    assert [board.title for board in boards] == ["Website Redesign"]
    assert [member.name for member in result.team_members] == [
        "Alice Johnson",
        "Bob Smith",
        "Carol Davis",
        "David Wilson",
        "Eve Brown",
    ]
    assert [(item.title, item.position) for item in result.board.lists] == [
        ("To Do", 1000),
        ("In Progress", 2000),
        ("Review", 3000),
        ("Done", 4000),
    ]
    assert db_session.query(models.Card).count() == 5
    assert db_session.query(models.CardAssignment).count() == 7
    assert db_session.query(models.ChecklistItem).count() == 15

    todo = result.board.lists[0]
    assert [(card.title, card.position) for card in todo.cards] == [
        ("Design new landing page", 1000),
        ("Update documentation", 2000),
    ]
    assert [item.content for item in todo.cards[0].checklist][:2] == ["Create wireframes", "Design mockups"]


def test_populate_access_codes_only_fills_missing(db_session: Session):
    seed_database(db_session)
    db_session.add(models.Board(title="Coded", background="#000000", access_code="keepme"))
    db_session.commit()

    assert populate_access_codes(db_session) == 1
    codes = {board.title: board.access_code for board in db_session.query(models.Board).all()}
    assert codes["Coded"] == "keepme"
    assert len(codes["Website Redesign"]) == 16

    assert populate_access_codes(db_session) == 0


@pytest.fixture
def cli_database(db_session: Session, monkeypatch):
    bind = db_session.get_bind()
    monkeypatch.setattr(database, "SessionLocal", sessionmaker(autocommit=False, autoflush=False, bind=bind))
    monkeypatch.setattr(database, "init_db", lambda: database.Base.metadata.create_all(bind=bind))


def test_cli_seed_and_status(cli_database, capsys):
    assert cli.main(["seed"]) == 0
    assert "Database seeded successfully!" in capsys.readouterr().out

    assert cli.main(["db-status"]) == 0
    out = capsys.readouterr().out
    assert "boards: 1" in out
    assert "cards: 5" in out

    assert cli.main(["populate-access-codes"]) == 0
    assert "Populated access codes for 1 boards" in capsys.readouterr().out


def test_cli_without_command_prints_help(capsys):
    assert cli.main([]) == 1
    assert "usage: kanbanify" in capsys.readouterr().out
