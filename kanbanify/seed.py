"""Demo data and maintenance tasks run from the command line."""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from kanbanify.models import (
    Board,
    BoardAccess,
    BoardList,
    Card,
    CardAssignment,
    CardLabel,
    CardPriority,
    ChecklistItem,
    Label,
    TeamMember,
)
from kanbanify.positions import POSITION_GAP, dense_positions
from kanbanify.utils.identifiers import generate_access_code

logger = logging.getLogger(__name__)

DEMO_MEMBERS = (
    ("Alice Johnson", "#e91e63"),
    ("Bob Smith", "#2196f3"),
    ("Carol Davis", "#4caf50"),
    ("David Wilson", "#ff9800"),
    ("Eve Brown", "#9c27b0"),
)

DEMO_LISTS = ("To Do", "In Progress", "Review", "Done")

# (list index, title, description, due date, priority, member indexes, checklist)
DEMO_CARDS = (
    (
        0,
        "Design new landing page",
        "Create wireframes and mockups for the new homepage",
        datetime(2024, 1, 15, tzinfo=timezone.utc),
        CardPriority.HIGH,
        (0, 1),
        (
            ("Create wireframes", True),
            ("Design mockups", True),
            ("Review with stakeholders", False),
            ("Finalize design system", False),
        ),
    ),
    (
        0,
        "Update documentation",
        "Review and update API documentation",
        datetime(2024, 1, 20, tzinfo=timezone.utc),
        CardPriority.MEDIUM,
        (2,),
        (
            ("Review existing docs", True),
            ("Update API endpoints", False),
            ("Add examples", False),
        ),
    ),
    (
        1,
        "Implement user authentication",
        "Set up OAuth and session management",
        datetime(2024, 1, 18, tzinfo=timezone.utc),
        CardPriority.HIGH,
        (3,),
        (
            ("Set up OAuth provider", True),
            ("Implement login flow", True),
            ("Add session management", True),
            ("Write unit tests", False),
            ("Update user interface", False),
        ),
    ),
    (
        2,
        "Code review for payment system",
        "Review pull request for Stripe integration",
        datetime(2024, 1, 16, tzinfo=timezone.utc),
        CardPriority.HIGH,
        (0, 4),
        (),
    ),
    (
        3,
        "Set up CI/CD pipeline",
        "Configure GitHub Actions for automated testing",
        datetime(2024, 1, 10, tzinfo=timezone.utc),
        CardPriority.MEDIUM,
        (3,),
        (
            ("Configure GitHub Actions", True),
            ("Set up automated testing", True),
            ("Configure deployment pipeline", True),
        ),
    ),
)


@dataclass
class SeedResult:
    board: Board
    team_members: List[TeamMember]
    lists: List[BoardList]
    cards: List[Card]


def clear_database(db: Session) -> None:
    """Delete every row, children first."""
    for model in (CardAssignment, CardLabel, ChecklistItem, Card, BoardList, Label, TeamMember, BoardAccess, Board):
        db.query(model).delete(synchronize_session=False)
    db.commit()


def seed_database(db: Session) -> SeedResult:
    """Replace the database contents with the "Website Redesign" demo board."""
    clear_database(db)

    board = Board(
        title="Website Redesign",
        description="Complete redesign of the company website",
        background="#0079bf",
    )
    db.add(board)

    team_members = [TeamMember(name=name, color=color, board=board) for name, color in DEMO_MEMBERS]
    lists = [
        BoardList(title=title, position=position, board=board)
        for title, position in dense_positions(DEMO_LISTS)
    ]

    cards = []
    positions_used = {}
    for list_index, title, description, due_date, priority, member_indexes, checklist in DEMO_CARDS:
        position = positions_used.get(list_index, 0) + POSITION_GAP
        positions_used[list_index] = position
        card = Card(
            title=title,
            description=description,
            position=position,
            due_date=due_date,
            priority=priority,
            list=lists[list_index],
        )
        for member_index in member_indexes:
            card.assignees.append(CardAssignment(team_member=team_members[member_index]))
        for index, (content, completed) in enumerate(checklist):
            card.checklist.append(ChecklistItem(content=content, completed=completed, position=(index + 1) * POSITION_GAP))
        cards.append(card)

    db.commit()

    logger.info(
        "Seeded 1 board, %d team members, %d lists, %d cards",
        len(team_members),
        len(lists),
        len(cards),
    )
    return SeedResult(board=board, team_members=team_members, lists=lists, cards=cards)


def populate_access_codes(db: Session) -> int:
    """Give every board without an access code a fresh one. Returns how many changed."""
    boards = db.query(Board).filter(Board.access_code.is_(None)).all()
    logger.info("Found %d boards without access codes", len(boards))

    for board in boards:
        board.access_code = generate_access_code()
        logger.info('Updated board "%s" with access code: %s', board.title, board.access_code)

    db.commit()
    return len(boards)
