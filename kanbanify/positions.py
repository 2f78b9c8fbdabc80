"""Gap-based integer ordering for sibling collections.

Lists within a board, cards within a list and checklist items within a card
all carry an integer ``position``. New items are appended one gap past the
current maximum so that single moves rarely force the rest of the collection
to be renumbered. Ascending position is display order; equal positions fall
back to creation order, then id.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple

POSITION_GAP = 1000


def next_position(existing: Iterable[Optional[int]]) -> int:
    """Position for an item appended after ``existing``.

    ``None`` entries (rows that never got a position) are ignored, so an empty
    or all-``None`` collection starts at ``POSITION_GAP``.
    """
    highest = max((value for value in existing if value is not None), default=0)
    return highest + POSITION_GAP


def position_for_slot(sibling_positions: Sequence[int], index: int) -> int:
    """Position for an item dropped at ``index`` among ``sibling_positions``.

    ``sibling_positions`` must be in display order and must not contain the
    item being moved. The moved item takes the position of whatever currently
    occupies the slot; dropping past the end appends.
    """
    if index < 0:
        index = 0
    if index < len(sibling_positions):
        return sibling_positions[index]
    return next_position(sibling_positions)


def dense_positions(ids: Sequence[str]) -> List[Tuple[str, int]]:
    """Renumber ``ids`` in the given order as 1000, 2000, 3000, ..."""
    return [(item_id, (index + 1) * POSITION_GAP) for index, item_id in enumerate(ids)]


def sort_key(position: int, created_at: Any = None, item_id: str = "") -> Tuple[int, str, str]:
    created = created_at.isoformat() if hasattr(created_at, "isoformat") else str(created_at or "")
    return position, created, item_id
