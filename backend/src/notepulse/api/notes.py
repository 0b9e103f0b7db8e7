"""Notes API endpoints."""

from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import NoteValidationError
from ..core.schemas.auth import AuthUser
from ..core.schemas.common import ErrorResponse
from ..core.schemas.notes import (
    NoteCreate,
    NoteResponse,
    NoteUpdate,
    NoteUpdateResponse,
    TodayNoteResponse,
)
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_user

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={401: {"model": ErrorResponse, "description": "Authentication required"}},
)


def caller_now(tz: Optional[str]) -> datetime:
    """Current time in the caller's timezone, or the server's local zone."""
    if not tz:
        return datetime.now().astimezone()
    try:
        return datetime.now(ZoneInfo(tz))
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise NoteValidationError(f"Unknown timezone: {tz}") from e


@router.get("/", response_model=List[NoteResponse])
async def list_notes(
    current_user: AuthUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """List all of the user's notes, newest first."""
    note_service = NoteService(session)
    return await note_service.list_notes(current_user)


@router.get("/today", response_model=List[TodayNoteResponse])
async def list_today(
    tz: Optional[str] = Query(None, description="IANA timezone of the caller, e.g. Europe/Rome"),
    current_user: AuthUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """List notes created today in the caller's timezone."""
    note_service = NoteService(session)
    return await note_service.list_today(current_user, caller_now(tz))


@router.post("/", response_model=NoteResponse, status_code=201)
async def create_note(
    request: NoteCreate,
    current_user: AuthUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(current_user, request)


@router.put("/{note_id}", response_model=NoteUpdateResponse)
async def update_note(
    note_id: str,
    request: NoteUpdate,
    current_user: AuthUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note; tags and mentions are replaced, not merged."""
    note_service = NoteService(session)
    return await note_service.update_note(current_user, note_id, request)


@router.delete("/{note_id}", status_code=204)
async def delete_note(
    note_id: str,
    current_user: AuthUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    await note_service.delete_note(current_user, note_id)
    return Response(status_code=204)


@router.get("/tags/", response_model=List[str])
async def get_tags(
    current_user: AuthUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Every tag the user has used, for suggestions."""
    note_service = NoteService(session)
    return await note_service.list_tags(current_user)


@router.get("/mentions/", response_model=List[str])
async def get_mentions(
    current_user: AuthUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Every mention the user has used, for suggestions."""
    note_service = NoteService(session)
    return await note_service.list_mentions(current_user)
