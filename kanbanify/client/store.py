"""Client-side board store.

The store keeps a working copy of the boards the client has loaded plus a
flattened view of the selected board (``lists``, ``cards``, ``team_members``
and ``labels`` as top-level collections, cards tagged with their list id).

Edits to cards, checklist items, assignments and card labels are optimistic:

1. snapshot the piece of state about to change,
2. apply the change locally and notify subscribers,
3. send the request,
4. on success swap in the server's copy when the endpoint returns one,
5. on failure put the snapshot back and set ``state.error``.

Moving a card is the exception: a failed move re-fetches the whole board
instead of restoring a local snapshot.

Entities held in state are never mutated in place. Every change replaces the
affected object (``model_copy``) so snapshots stay valid.
"""

import asyncio
import itertools
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, TypeVar, Union

import httpx

from kanbanify.client.access import is_admin_session
from kanbanify.client.api import ApiClient, ApiError
from kanbanify.client.storage import CURRENT_BOARD_KEY, LocalStorage
from kanbanify.config import settings
from kanbanify.positions import dense_positions, next_position, position_for_slot, sort_key
from kanbanify.schemas import (
    AssignmentOut,
    BoardOut,
    CardCreate,
    CardLabelOut,
    CardOut,
    CardUpdate,
    ChecklistItemOut,
    ChecklistItemUpdate,
    LabelOut,
    ListOut,
    TeamMemberOut,
)

logger = logging.getLogger(__name__)

SnapshotT = TypeVar("SnapshotT")
Listener = Callable[["BoardState"], None]

NETWORK_ERRORS = (ApiError, httpx.HTTPError)

# optimistic checklist items are told apart even when created in the same millisecond
_temp_ids = itertools.count(1)


@dataclass
class BoardState:
    boards: List[BoardOut] = field(default_factory=list)
    current_board: Optional[BoardOut] = None
    lists: List[ListOut] = field(default_factory=list)
    cards: List[CardOut] = field(default_factory=list)
    team_members: List[TeamMemberOut] = field(default_factory=list)
    labels: List[LabelOut] = field(default_factory=list)
    is_loading: bool = False
    error: Optional[str] = None


EDGE_KEYS = {"assignees": "team_member_id", "labels": "label_id"}


@dataclass
class EdgeSnapshot:
    """One card edge as it was before an optimistic change; ``edge`` is None when absent."""

    card_id: str
    field_name: str
    key: str
    index: Optional[int]
    edge: Any


def _error_message(error: Exception, fallback: str) -> str:
    if isinstance(error, ApiError) and error.message:
        return error.message
    return fallback


def _payload(model: Any) -> Dict[str, Any]:
    return model.model_dump(by_alias=True, exclude_unset=True, mode="json")


def _index_of(items: List[Any], item_id: str) -> int:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    return -1


class BoardStore:
    """State container with actions and a subscription mechanism."""

    def __init__(self, api: ApiClient, storage: LocalStorage):
        self.api = api
        self.storage = storage
        self.state = BoardState()
        self._listeners: List[Listener] = []

    # Subscription

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every state change. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    # Utility actions

    def set_error(self, error: Optional[str]) -> None:
        self.state.error = error
        self._notify()

    def set_loading(self, loading: bool) -> None:
        self.state.is_loading = loading
        self._notify()

    def _fail(self, error: Exception, fallback: str) -> None:
        self.state.error = _error_message(error, fallback)
        logger.warning("%s: %s", fallback, error)
        self._notify()

    async def _optimistic(
        self,
        *,
        capture: Callable[[], Optional[SnapshotT]],
        apply: Callable[[], None],
        send: Callable[[], Awaitable[Any]],
        revert: Callable[[SnapshotT], None],
        confirm: Optional[Callable[[Any], None]] = None,
        failure_message: str,
    ) -> bool:
        """Snapshot, apply, then confirm with the server response or revert."""
        snapshot = capture()
        apply()
        self._notify()

        try:
            response = await send()
        except NETWORK_ERRORS as error:
            if snapshot is not None:
                revert(snapshot)
            self._fail(error, failure_message)
            return False

        if confirm is not None:
            confirm(response)
            self._notify()
        return True

    # Selection and fetching

    def _select(self, board: BoardOut) -> None:
        self.state.current_board = board
        self.state.lists = list(board.lists)
        self.state.cards = [card for board_list in board.lists for card in board_list.cards]
        self.state.team_members = list(board.members)
        self.state.labels = list(board.labels)
        self.storage.set_item(CURRENT_BOARD_KEY, board.id)

    def _clear_selection(self) -> None:
        self.state.current_board = None
        self.state.lists = []
        self.state.cards = []
        self.state.team_members = []
        self.state.labels = []
        self.storage.remove_item(CURRENT_BOARD_KEY)

    def set_current_board(self, board_id: str) -> bool:
        """Select one of the loaded boards. Unknown ids leave state untouched."""
        for board in self.state.boards:
            if board.id == board_id:
                self._select(board)
                self._notify()
                return True
        return False

    def restore_current_board(self) -> Optional[BoardOut]:
        """Re-select the board remembered from a previous session.

        A remembered id that no longer matches a loaded board is forgotten and
        nothing is selected.
        """
        board_id = self.storage.get_item(CURRENT_BOARD_KEY)
        if not board_id:
            return None
        if self.set_current_board(board_id):
            return self.state.current_board
        logger.info("Remembered board %s is not available; clearing selection", board_id)
        self._clear_selection()
        self._notify()
        return None

    async def fetch_boards(self) -> None:
        self.set_loading(True)
        try:
            boards = await self.api.get("boards")
            self.state.boards = [BoardOut.model_validate(board) for board in boards]
            self.state.error = None
        except NETWORK_ERRORS as error:
            self.state.error = _error_message(error, "Failed to fetch boards")
        finally:
            self.state.is_loading = False
            self._notify()

    async def fetch_board(self, board_id: str) -> None:
        self.set_loading(True)
        try:
            board = BoardOut.model_validate(await self.api.get(f"boards/{board_id}"))
            self._select(board)
            self.state.error = None
        except NETWORK_ERRORS as error:
            self.state.error = _error_message(error, "Failed to fetch board")
        finally:
            self.state.is_loading = False
            self._notify()

    # Board actions

    async def create_board(self, board_data: Mapping[str, Any]) -> Optional[BoardOut]:
        self.set_loading(True)
        try:
            board = BoardOut.model_validate(await self.api.post("boards", json=dict(board_data)))
            self.state.boards.insert(0, board)
            self.state.error = None
            return board
        except NETWORK_ERRORS as error:
            self.state.error = _error_message(error, "Failed to create board")
            return None
        finally:
            self.state.is_loading = False
            self._notify()

    async def update_board(self, board_id: str, updates: Mapping[str, Any]) -> None:
        try:
            board = BoardOut.model_validate(await self.api.put(f"boards/{board_id}", json=dict(updates)))
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to update board")
            return

        index = _index_of(self.state.boards, board_id)
        if index != -1:
            self.state.boards[index] = board
        if self.state.current_board and self.state.current_board.id == board_id:
            self.state.current_board = board
        self._notify()

    async def delete_board(self, board_id: str, admin_password: Optional[str] = None) -> None:
        headers = {}
        if is_admin_session(self.storage):
            headers["x-admin-session"] = "true"
        if admin_password:
            headers["x-admin-password"] = admin_password

        try:
            await self.api.delete(f"boards/{board_id}", headers=headers)
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to delete board")
            return

        self.state.boards = [board for board in self.state.boards if board.id != board_id]
        if self.state.current_board and self.state.current_board.id == board_id:
            self._clear_selection()
        self._notify()

    # List actions

    async def create_list(self, list_data: Mapping[str, Any]) -> None:
        try:
            board_list = ListOut.model_validate(await self.api.post("lists", json=dict(list_data)))
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to create list")
            return
        self.state.lists = self.state.lists + [board_list]
        self._notify()

    async def update_list(self, list_id: str, updates: Mapping[str, Any]) -> None:
        try:
            board_list = ListOut.model_validate(await self.api.put(f"lists/{list_id}", json=dict(updates)))
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to update list")
            return
        index = _index_of(self.state.lists, list_id)
        if index != -1:
            self.state.lists[index] = board_list
        self._notify()

    async def delete_list(self, list_id: str) -> None:
        try:
            await self.api.delete(f"lists/{list_id}")
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to delete list")
            return
        self.state.lists = [board_list for board_list in self.state.lists if board_list.id != list_id]
        self.state.cards = [card for card in self.state.cards if card.list_id != list_id]
        self._notify()

    async def reorder_lists(self, list_ids: List[str]) -> bool:
        """Renumber the board's lists densely in the order of ``list_ids``."""
        renumbered = dict(dense_positions(list_ids))

        def capture() -> List[ListOut]:
            return list(self.state.lists)

        def apply() -> None:
            by_id = {board_list.id: board_list for board_list in self.state.lists}
            ordered = [
                by_id[list_id].model_copy(update={"position": renumbered[list_id]})
                for list_id in list_ids
                if list_id in by_id
            ]
            rest = [board_list for board_list in self.state.lists if board_list.id not in renumbered]
            self.state.lists = ordered + rest

        async def send() -> Any:
            return await asyncio.gather(
                *(self.api.put(f"lists/{list_id}", json={"position": position}) for list_id, position in renumbered.items())
            )

        def revert(snapshot: List[ListOut]) -> None:
            self.state.lists = snapshot

        return await self._optimistic(
            capture=capture,
            apply=apply,
            send=send,
            revert=revert,
            failure_message="Failed to reorder lists",
        )

    # Card actions

    async def create_card(self, card_data: Union[CardCreate, Mapping[str, Any]]) -> Optional[CardOut]:
        request = card_data if isinstance(card_data, CardCreate) else CardCreate.model_validate(card_data)
        try:
            card = CardOut.model_validate(await self.api.post("cards", json=_payload(request)))
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to create card")
            return None
        self.state.cards = self.state.cards + [card]
        self._notify()
        return card

    async def update_card(self, card_id: str, updates: Union[CardUpdate, Mapping[str, Any]]) -> bool:
        changes = updates if isinstance(updates, CardUpdate) else CardUpdate.model_validate(updates)
        fields = changes.model_dump(exclude_unset=True)

        def capture() -> Optional[CardOut]:
            index = _index_of(self.state.cards, card_id)
            return self.state.cards[index].model_copy(deep=True) if index != -1 else None

        def apply() -> None:
            index = _index_of(self.state.cards, card_id)
            if index != -1:
                self.state.cards[index] = self.state.cards[index].model_copy(update=fields)

        def confirm(response: Any) -> None:
            index = _index_of(self.state.cards, card_id)
            if index != -1:
                self.state.cards[index] = CardOut.model_validate(response)

        def revert(snapshot: CardOut) -> None:
            index = _index_of(self.state.cards, snapshot.id)
            if index != -1:
                self.state.cards[index] = snapshot

        return await self._optimistic(
            capture=capture,
            apply=apply,
            send=lambda: self.api.put(f"cards/{card_id}", json=_payload(changes)),
            confirm=confirm,
            revert=revert,
            failure_message="Failed to update card",
        )

    async def delete_card(self, card_id: str) -> None:
        try:
            await self.api.delete(f"cards/{card_id}")
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to delete card")
            return
        self.state.cards = [card for card in self.state.cards if card.id != card_id]
        self._notify()

    async def move_card(self, card_id: str, new_list_id: str, new_position: int) -> bool:
        """Move a card to ``new_list_id`` at ``new_position``.

        The list id and position change together, so a failure re-fetches the
        current board rather than restoring one field at a time.
        """
        index = _index_of(self.state.cards, card_id)
        if index != -1:
            self.state.cards[index] = self.state.cards[index].model_copy(
                update={"list_id": new_list_id, "position": new_position}
            )
            self._notify()

        try:
            response = await self.api.put(
                f"cards/{card_id}", json={"listId": new_list_id, "position": new_position}
            )
        except NETWORK_ERRORS as error:
            board = self.state.current_board
            if board is not None:
                await self.fetch_board(board.id)
            self._fail(error, "Failed to move card")
            return False

        index = _index_of(self.state.cards, card_id)
        if index != -1:
            self.state.cards[index] = CardOut.model_validate(response)
            self._notify()
        return True

    async def move_card_to(self, card_id: str, list_id: str, index: int) -> bool:
        """Drop a card into slot ``index`` of ``list_id`` (drag and drop)."""
        siblings = [
            card.position
            for card in sorted(
                (card for card in self.state.cards if card.list_id == list_id and card.id != card_id),
                key=lambda card: sort_key(card.position, card.created_at, card.id),
            )
        ]
        return await self.move_card(card_id, list_id, position_for_slot(siblings, index))

    # Team member actions

    async def create_team_member(self, member_data: Mapping[str, Any]) -> None:
        try:
            member = TeamMemberOut.model_validate(await self.api.post("team-members", json=dict(member_data)))
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to create team member")
            return
        self.state.team_members = self.state.team_members + [member]
        self._notify()

    async def update_team_member(self, member_id: str, updates: Mapping[str, Any]) -> None:
        try:
            member = TeamMemberOut.model_validate(await self.api.put(f"team-members/{member_id}", json=dict(updates)))
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to update team member")
            return
        index = _index_of(self.state.team_members, member_id)
        if index != -1:
            self.state.team_members[index] = member
        self._notify()

    async def delete_team_member(self, member_id: str) -> None:
        try:
            await self.api.delete(f"team-members/{member_id}")
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to delete team member")
            return
        self.state.team_members = [member for member in self.state.team_members if member.id != member_id]
        # assignments cascade on the server
        self.state.cards = [
            card.model_copy(update={"assignees": [a for a in card.assignees if a.team_member_id != member_id]})
            if any(a.team_member_id == member_id for a in card.assignees)
            else card
            for card in self.state.cards
        ]
        self._notify()

    # Assignment actions

    def _replace_card_field(self, card_id: str, field_name: str, value: list) -> None:
        index = _index_of(self.state.cards, card_id)
        if index != -1:
            self.state.cards[index] = self.state.cards[index].model_copy(update={field_name: value})

    def _card_field(self, card_id: str, field_name: str) -> list:
        index = _index_of(self.state.cards, card_id)
        return list(getattr(self.state.cards[index], field_name)) if index != -1 else []

    # Edge helpers touch one assignment or card label, keyed by the other end's id,
    # so calls in flight on the same card never undo each other.

    def _capture_edge(self, card_id: str, field_name: str, key: str) -> Optional[EdgeSnapshot]:
        if _index_of(self.state.cards, card_id) == -1:
            return None
        key_name = EDGE_KEYS[field_name]
        for index, edge in enumerate(self._card_field(card_id, field_name)):
            if getattr(edge, key_name) == key:
                return EdgeSnapshot(card_id, field_name, key, index, edge)
        return EdgeSnapshot(card_id, field_name, key, None, None)

    def _upsert_edge(self, card_id: str, field_name: str, edge: Any) -> None:
        key_name = EDGE_KEYS[field_name]
        key = getattr(edge, key_name)
        edges = self._card_field(card_id, field_name)
        for index, existing in enumerate(edges):
            if getattr(existing, key_name) == key:
                edges[index] = edge
                break
        else:
            edges.append(edge)
        self._replace_card_field(card_id, field_name, edges)

    def _drop_edge(self, card_id: str, field_name: str, key: str) -> None:
        key_name = EDGE_KEYS[field_name]
        edges = [edge for edge in self._card_field(card_id, field_name) if getattr(edge, key_name) != key]
        self._replace_card_field(card_id, field_name, edges)

    def _restore_edge(self, snapshot: EdgeSnapshot) -> None:
        """Put one edge back the way it was captured; absent edges are removed."""
        if snapshot.edge is None:
            self._drop_edge(snapshot.card_id, snapshot.field_name, snapshot.key)
            return
        key_name = EDGE_KEYS[snapshot.field_name]
        edges = self._card_field(snapshot.card_id, snapshot.field_name)
        for index, existing in enumerate(edges):
            if getattr(existing, key_name) == snapshot.key:
                edges[index] = snapshot.edge
                break
        else:
            edges.insert(min(snapshot.index, len(edges)), snapshot.edge)
        self._replace_card_field(snapshot.card_id, snapshot.field_name, edges)

    async def assign_member_to_card(self, card_id: str, member_id: str) -> bool:
        member = next((m for m in self.state.team_members if m.id == member_id), None)
        if member is None:
            return False

        def apply() -> None:
            if _index_of(self.state.cards, card_id) == -1:
                return
            self._upsert_edge(
                card_id,
                "assignees",
                AssignmentOut(
                    card_id=card_id,
                    team_member_id=member_id,
                    team_member=member,
                    assigned_at=datetime.now(timezone.utc),
                ),
            )

        def confirm(response: Any) -> None:
            self._upsert_edge(card_id, "assignees", AssignmentOut.model_validate(response))

        return await self._optimistic(
            capture=lambda: self._capture_edge(card_id, "assignees", member_id),
            apply=apply,
            send=lambda: self.api.post(f"cards/{card_id}/assignments", json={"teamMemberId": member_id}),
            confirm=confirm,
            revert=self._restore_edge,
            failure_message="Failed to assign member",
        )

    async def unassign_member_from_card(self, card_id: str, member_id: str) -> bool:
        return await self._optimistic(
            capture=lambda: self._capture_edge(card_id, "assignees", member_id),
            apply=lambda: self._drop_edge(card_id, "assignees", member_id),
            send=lambda: self.api.delete(f"cards/{card_id}/assignments", params={"teamMemberId": member_id}),
            revert=self._restore_edge,
            failure_message="Failed to unassign member",
        )

    # Label actions

    async def create_label(self, label_data: Mapping[str, Any]) -> None:
        try:
            label = LabelOut.model_validate(await self.api.post("labels", json=dict(label_data)))
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to create label")
            return
        self.state.labels = self.state.labels + [label]
        self._notify()

    async def update_label(self, label_id: str, updates: Mapping[str, Any]) -> None:
        try:
            label = LabelOut.model_validate(await self.api.put(f"labels/{label_id}", json=dict(updates)))
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to update label")
            return
        self.state.labels = [label if item.id == label_id else item for item in self.state.labels]
        self.state.cards = [
            card.model_copy(
                update={
                    "labels": [
                        edge.model_copy(update={"label": label}) if edge.label_id == label_id else edge
                        for edge in card.labels
                    ]
                }
            )
            if any(edge.label_id == label_id for edge in card.labels)
            else card
            for card in self.state.cards
        ]
        self._notify()

    async def delete_label(self, label_id: str) -> None:
        try:
            await self.api.delete(f"labels/{label_id}")
        except NETWORK_ERRORS as error:
            self._fail(error, "Failed to delete label")
            return
        self.state.labels = [label for label in self.state.labels if label.id != label_id]
        self.state.cards = [
            card.model_copy(update={"labels": [edge for edge in card.labels if edge.label_id != label_id]})
            if any(edge.label_id == label_id for edge in card.labels)
            else card
            for card in self.state.cards
        ]
        self._notify()

    async def add_label_to_card(self, card_id: str, label_id: str) -> bool:
        label = next((item for item in self.state.labels if item.id == label_id), None)
        if label is None:
            return False

        def apply() -> None:
            if _index_of(self.state.cards, card_id) == -1:
                return
            self._upsert_edge(card_id, "labels", CardLabelOut(card_id=card_id, label_id=label_id, label=label))

        def confirm(response: Any) -> None:
            self._upsert_edge(card_id, "labels", CardLabelOut.model_validate(response))

        return await self._optimistic(
            capture=lambda: self._capture_edge(card_id, "labels", label_id),
            apply=apply,
            send=lambda: self.api.post(f"cards/{card_id}/labels", json={"labelId": label_id}),
            confirm=confirm,
            revert=self._restore_edge,
            failure_message="Failed to add label",
        )

    async def remove_label_from_card(self, card_id: str, label_id: str) -> bool:
        return await self._optimistic(
            capture=lambda: self._capture_edge(card_id, "labels", label_id),
            apply=lambda: self._drop_edge(card_id, "labels", label_id),
            send=lambda: self.api.delete(f"cards/{card_id}/labels", params={"labelId": label_id}),
            revert=self._restore_edge,
            failure_message="Failed to remove label",
        )

    # Checklist actions

    def _find_checklist_item(self, item_id: str) -> Optional[tuple]:
        for card in self.state.cards:
            for index, item in enumerate(card.checklist):
                if item.id == item_id:
                    return card.id, index, item
        return None

    async def create_checklist_item(self, card_id: str, content: str, completed: bool = False) -> bool:
        temp_id = f"temp-{int(time.time() * 1000)}-{next(_temp_ids)}"

        def apply() -> None:
            if _index_of(self.state.cards, card_id) == -1:
                return
            checklist = self._card_field(card_id, "checklist")
            checklist.append(
                ChecklistItemOut(
                    id=temp_id,
                    content=content,
                    completed=completed,
                    card_id=card_id,
                    position=next_position(item.position for item in checklist),
                    created_at=datetime.now(timezone.utc),
                )
            )
            self._replace_card_field(card_id, "checklist", checklist)

        def confirm(response: Any) -> None:
            checklist = self._card_field(card_id, "checklist")
            index = _index_of(checklist, temp_id)
            if index != -1:
                checklist[index] = ChecklistItemOut.model_validate(response)
                self._replace_card_field(card_id, "checklist", checklist)

        def revert(optimistic_id: str) -> None:
            checklist = self._card_field(card_id, "checklist")
            index = _index_of(checklist, optimistic_id)
            if index != -1:
                del checklist[index]
                self._replace_card_field(card_id, "checklist", checklist)

        return await self._optimistic(
            capture=lambda: temp_id,
            apply=apply,
            send=lambda: self.api.post(
                "checklist", json={"content": content, "cardId": card_id, "completed": completed}
            ),
            confirm=confirm,
            revert=revert,
            failure_message="Failed to create checklist item",
        )

    async def update_checklist_item(
        self, item_id: str, updates: Union[ChecklistItemUpdate, Mapping[str, Any]]
    ) -> bool:
        changes = updates if isinstance(updates, ChecklistItemUpdate) else ChecklistItemUpdate.model_validate(updates)
        fields = changes.model_dump(exclude_unset=True)

        def replace(card_id: str, item: ChecklistItemOut) -> None:
            checklist = [item if existing.id == item.id else existing for existing in self._card_field(card_id, "checklist")]
            self._replace_card_field(card_id, "checklist", checklist)

        def capture() -> Optional[ChecklistItemOut]:
            found = self._find_checklist_item(item_id)
            return found[2].model_copy(deep=True) if found else None

        def apply() -> None:
            found = self._find_checklist_item(item_id)
            if found:
                replace(found[0], found[2].model_copy(update=fields))

        def confirm(response: Any) -> None:
            item = ChecklistItemOut.model_validate(response)
            replace(item.card_id, item)

        return await self._optimistic(
            capture=capture,
            apply=apply,
            send=lambda: self.api.put(f"checklist/{item_id}", json=_payload(changes)),
            confirm=confirm,
            revert=lambda snapshot: replace(snapshot.card_id, snapshot),
            failure_message="Failed to update checklist item",
        )

    async def delete_checklist_item(self, item_id: str) -> bool:
        def capture() -> Optional[tuple]:
            found = self._find_checklist_item(item_id)
            if not found:
                return None
            card_id, index, item = found
            return card_id, index, item.model_copy(deep=True)

        def apply() -> None:
            found = self._find_checklist_item(item_id)
            if found:
                card_id = found[0]
                checklist = [item for item in self._card_field(card_id, "checklist") if item.id != item_id]
                self._replace_card_field(card_id, "checklist", checklist)

        def revert(snapshot: tuple) -> None:
            card_id, index, item = snapshot
            checklist = self._card_field(card_id, "checklist")
            checklist.insert(min(index, len(checklist)), item)
            self._replace_card_field(card_id, "checklist", checklist)

        return await self._optimistic(
            capture=capture,
            apply=apply,
            send=lambda: self.api.delete(f"checklist/{item_id}"),
            revert=revert,
            failure_message="Failed to delete checklist item",
        )


_store: Optional[BoardStore] = None


def get_store() -> BoardStore:
    """Return the process-wide store, creating it on first use.

    It starts empty with no board selected and lives for the rest of the
    process.
    """
    global _store
    if _store is None:
        _store = BoardStore(ApiClient(settings.API_BASE_URL), LocalStorage(settings.CLIENT_STORAGE_PATH))
    return _store
