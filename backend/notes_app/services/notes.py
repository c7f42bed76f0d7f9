"""
Notes Service
"""
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List
import logging

from ..models import NoteCreate, NoteUpdate
from ..database import DocumentStore

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class NoteValidationError(Exception):
    """Required fields are missing from a create request"""


class NoteOwnershipError(Exception):
    """The caller does not own the note they are trying to change"""

    def __init__(self, note_id: str, user_id: str):
        self.note_id = note_id
        self.user_id = user_id
        super().__init__(f"User {user_id} does not own note {note_id}")


def is_owner(note: Dict[str, Any], user_id: str) -> bool:
    """Ownership check: the stored owner must equal the caller"""
    return note.get("userId") == user_id


class NoteService:
    """CRUD over notes scoped to their owner"""

    def __init__(
        self,
        store: DocumentStore,
        database_id: str,
        collection_id: str,
        clock: Callable[[], str] = utc_now_iso,
    ):
        self.store = store
        self.database_id = database_id
        self.collection_id = collection_id
        self.clock = clock

    async def create_note(self, user_id: str, note: NoteCreate) -> Dict[str, Any]:
        if not note.title or not note.description:
            raise NoteValidationError("Title and description are required.")

        now = self.clock()
        data = {
            "title": note.title,
            "content": note.content,
            "description": note.description,
            "userId": user_id,
            "createdAt": now,
            "updatedAt": now,
        }
        created = await self.store.create_document(
            self.database_id, self.collection_id, self.store.unique_id(), data
        )
        logger.info(f"Created note {created['id']} for user {user_id}")
        return created

    async def list_notes(self, user_id: str) -> List[Dict[str, Any]]:
        return await self.store.list_documents(
            self.database_id, self.collection_id, {"userId": user_id}
        )

    async def _get_owned_note(self, user_id: str, note_id: str) -> Dict[str, Any]:
        # Not atomic with the write that follows
        note = await self.store.get_document(self.database_id, self.collection_id, note_id)
        if not is_owner(note, user_id):
            raise NoteOwnershipError(note_id, user_id)
        return note

    async def update_note(self, user_id: str, note_id: str, note_update: NoteUpdate) -> Dict[str, Any]:
        await self._get_owned_note(user_id, note_id)

        update_data = {
            "title": note_update.title,
            "content": note_update.content,
            "description": note_update.description,
            "updatedAt": self.clock(),
        }
        return await self.store.update_document(
            self.database_id, self.collection_id, note_id, update_data
        )

    async def delete_note(self, user_id: str, note_id: str) -> None:
        await self._get_owned_note(user_id, note_id)
        await self.store.delete_document(self.database_id, self.collection_id, note_id)
        logger.info(f"Deleted note {note_id} for user {user_id}")
