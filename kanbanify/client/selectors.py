"""Read-only projections over the store's flattened board state."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

from kanbanify.models.card import CardPriority, CardStatus
from kanbanify.positions import sort_key
from kanbanify.schemas import CardOut, ListOut

EVENT_DURATION = timedelta(hours=1)
UNKNOWN_LIST_TITLE = "Unknown List"
UNKNOWN_LIST_COLOR = "#f1f5f9"


def ordered_lists(lists: Iterable[ListOut]) -> List[ListOut]:
    return sorted(lists, key=lambda item: sort_key(item.position, item.created_at, item.id))


def cards_for_list(cards: Iterable[CardOut], list_id: str) -> List[CardOut]:
    """Cards of one list in display order."""
    return sorted(
        (card for card in cards if card.list_id == list_id),
        key=lambda card: sort_key(card.position, card.created_at, card.id),
    )


@dataclass
class CalendarEvent:
    id: str
    title: str
    start: datetime
    end: datetime
    card: CardOut
    list_title: str
    list_color: str
    priority: CardPriority


def calendar_events(cards: Iterable[CardOut], lists: Iterable[ListOut]) -> List[CalendarEvent]:
    """One event per card with a due date, lasting an hour from the due time."""
    lists_by_id = {item.id: item for item in lists}
    events = []
    for card in cards:
        if card.due_date is None:
            continue
        board_list = lists_by_id.get(card.list_id)
        events.append(
            CalendarEvent(
                id=card.id,
                title=card.title,
                start=card.due_date,
                end=card.due_date + EVENT_DURATION,
                card=card,
                list_title=board_list.title if board_list else UNKNOWN_LIST_TITLE,
                list_color=(board_list.color if board_list and board_list.color else UNKNOWN_LIST_COLOR),
                priority=card.priority,
            )
        )
    events.sort(key=lambda event: _as_utc(event.start))
    return events


@dataclass
class CalendarSummary:
    total: int
    overdue: int
    completed: int
    upcoming: int
    by_priority: Dict[CardPriority, int]


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def calendar_summary(events: Iterable[CalendarEvent], now: Optional[datetime] = None) -> CalendarSummary:
    """Count events as overdue, completed or upcoming relative to ``now``.

    Completed cards are never overdue.
    """
    current = _as_utc(now or datetime.now(timezone.utc))
    by_priority = {priority: 0 for priority in CardPriority}
    total = overdue = completed = upcoming = 0

    for event in events:
        total += 1
        by_priority[event.priority] += 1
        if event.card.status == CardStatus.COMPLETED:
            completed += 1
        elif _as_utc(event.start) < current:
            overdue += 1
        else:
            upcoming += 1

    return CalendarSummary(
        total=total,
        overdue=overdue,
        completed=completed,
        upcoming=upcoming,
        by_priority=by_priority,
    )
