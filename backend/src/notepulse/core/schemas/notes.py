"""
Note management schemas.

Request bodies mirror what the app sends: the client generates note ids so
notes can be created offline and synced later. Tag and mention names are
kept exactly as typed (case-sensitive).
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# matches the tags/mentions name column
LabelName = Annotated[str, Field(max_length=100)]


class NoteCreate(BaseModel):
    """Note creation request schema."""

    id: str = Field(min_length=1, max_length=64, description="Client-generated note id")
    title: str = Field(min_length=1, max_length=200, description="Note title")
    content: str = Field(default="", description="Note content, may be empty")
    tags: Optional[List[LabelName]] = Field(default=None, description="Tag names")
    mentions: Optional[List[LabelName]] = Field(default=None, description="Mention names")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "V1StGXR8_Z5jdHi6B-myT",
                "title": "Standup",
                "content": "Ship the sync fix",
                "tags": ["work", "urgent"],
                "mentions": ["alice"],
            }
        }
    )


class NoteUpdate(BaseModel):
    """Note update request schema. Tags/mentions fully replace the old sets."""

    title: str = Field(min_length=1, max_length=200, description="Note title")
    content: str = Field(default="", description="Note content, may be empty")
    tags: Optional[List[LabelName]] = Field(default=None, description="Replacement tag names")
    mentions: Optional[List[LabelName]] = Field(default=None, description="Replacement mention names")


class NoteResponse(BaseModel):
    """Note with its tag and mention names."""

    id: str
    title: str
    content: str
    user_email: str = Field(alias="userEmail")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    tags: List[str] = Field(default_factory=list)
    mentions: List[str] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class TodayNoteResponse(NoteResponse):
    """Today's notes. Anything read back from the store is synced."""

    synced: bool = True


class NoteUpdateResponse(BaseModel):
    """Echo of an accepted update."""

    id: str
    title: str
    content: str
    tags: List[str] = Field(default_factory=list)
    mentions: List[str] = Field(default_factory=list)
