"""Notes CRUD — all queries scoped to the caller's tenant."""

from fastapi import APIRouter, status

from notehub.api.deps import Auth, Store
from notehub.models.base import MessageResponse
from notehub.models.note import NoteCreate, NoteRead, NoteUpdate
from notehub.services import notes

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=list[NoteRead])
async def list_notes(auth: Auth, storage: Store) -> list[NoteRead]:
    return [NoteRead.from_note(n) for n in await notes.list_notes(storage, auth)]


@router.get("/{note_id}", response_model=NoteRead)
async def get_note(note_id: str, auth: Auth, storage: Store) -> NoteRead:
    return NoteRead.from_note(await notes.get_note(storage, auth, note_id))


@router.post("", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
async def create_note(body: NoteCreate, auth: Auth, storage: Store) -> NoteRead:
    """Create a note. Free-plan tenants are capped at three notes."""
    return NoteRead.from_note(await notes.create_note(storage, auth, body))


@router.put("/{note_id}", response_model=NoteRead)
async def update_note(
    note_id: str,
    body: NoteUpdate,
    auth: Auth,
    storage: Store,
) -> NoteRead:
    return NoteRead.from_note(await notes.update_note(storage, auth, note_id, body))


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(note_id: str, auth: Auth, storage: Store) -> MessageResponse:
    await notes.delete_note(storage, auth, note_id)
    return MessageResponse(message="Note deleted successfully")
