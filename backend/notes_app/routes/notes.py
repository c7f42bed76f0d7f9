"""
Notes Routes
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import List, Optional
import logging

from ..config import settings
from ..models import Note, NoteCreate, NoteUpdate, NoteDeleted
from ..database import DocumentStore, get_document_store
from ..services.auth import require_auth
from ..services.notes import NoteService, NoteValidationError, NoteOwnershipError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/notes", tags=["Notes"])

FORBIDDEN_MESSAGE = "Forbidden: You do not own this note."


def get_note_service(store: DocumentStore = Depends(get_document_store)) -> NoteService:
    """Dependency building the notes service around the configured collection"""
    return NoteService(store, settings.database_id, settings.notes_collection_id)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/", response_model=Note, status_code=201, include_in_schema=False)
@router.post("", response_model=Note, status_code=201)
async def create_note(
    note: Optional[NoteCreate] = None,
    user_id: str = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
):
    """Create a new note owned by the caller"""
    try:
        return await service.create_note(user_id, note or NoteCreate())
    except NoteValidationError as e:
        return error_response(400, str(e))
    except Exception as e:
        logger.error(f"Error creating note: {e}")
        return error_response(500, "Failed to create note.")


@router.get("/", response_model=List[Note], include_in_schema=False)
@router.get("", response_model=List[Note])
async def get_notes(
    user_id: str = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
):
    """Get all notes of the caller"""
    try:
        return await service.list_notes(user_id)
    except Exception as e:
        logger.error(f"Error fetching notes: {e}")
        return error_response(400, "Failed to fetch notes.")


@router.put("/{note_id}", response_model=Note)
async def update_note(
    note_id: str,
    note_update: Optional[NoteUpdate] = None,
    user_id: str = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
):
    """Overwrite the title, content and description of a note"""
    try:
        return await service.update_note(user_id, note_id, note_update or NoteUpdate())
    except NoteOwnershipError as e:
        logger.warning(str(e))
        return error_response(403, FORBIDDEN_MESSAGE)
    except Exception as e:
        logger.error(f"Error updating note: {e}")
        return error_response(500, "Failed to update note.")


@router.delete("/{note_id}", response_model=NoteDeleted)
async def delete_note(
    note_id: str,
    user_id: str = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
):
    """Delete a note"""
    try:
        await service.delete_note(user_id, note_id)
    except NoteOwnershipError as e:
        logger.warning(str(e))
        return error_response(403, FORBIDDEN_MESSAGE)
    except Exception as e:
        logger.error(f"Error deleting note: {e}")
        return error_response(500, "Failed to delete note.")

    return NoteDeleted(message="Note deleted successfully.")
