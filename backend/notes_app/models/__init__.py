# Pydantic Models
from .note import Note, NoteBase, NoteCreate, NoteUpdate, NoteDeleted

__all__ = [
    "Note", "NoteBase", "NoteCreate", "NoteUpdate", "NoteDeleted",
]
