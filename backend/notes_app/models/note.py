"""
Note Models
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class NoteBase(BaseModel):
    """Note content fields, all optional on the wire"""
    title: Optional[str] = None
    content: Optional[str] = None
    description: Optional[str] = None


class NoteCreate(NoteBase):
    """Request for creating a note (title and description are checked by the service)"""
    pass


class NoteUpdate(NoteBase):
    """Request for updating a note; every field is overwritten, omitted ones are cleared"""
    pass


class Note(NoteBase):
    """Stored note as returned to clients"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")


class NoteDeleted(BaseModel):
    """Response for a successful delete"""
    message: str
