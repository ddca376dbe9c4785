"""Note operations on behalf of an authenticated caller.

Every call passes the caller's tenant id down to storage; a note owned by
another tenant is reported exactly like a missing one.
"""

import logging

from notehub.core.config import get_settings
from notehub.core.errors import NotFound, PlanLimitExceeded
from notehub.models.note import Note, NoteCreate, NoteRecord, NoteUpdate
from notehub.models.tenant import TenantPlan
from notehub.services.identity import CurrentUser
from notehub.storage.base import Storage

logger = logging.getLogger(__name__)


async def list_notes(storage: Storage, caller: CurrentUser) -> list[Note]:
    return await storage.get_notes_by_tenant(caller.tenant_id)


async def get_note(storage: Storage, caller: CurrentUser, note_id: str) -> Note:
    note = await storage.get_note(note_id, caller.tenant_id)
    if note is None:
        raise NotFound("Note not found")
    return note


async def create_note(storage: Storage, caller: CurrentUser, data: NoteCreate) -> Note:
    # The count and the insert are separate calls: two concurrent creates
    # at limit - 1 can both succeed.
    if caller.plan == TenantPlan.FREE:
        limit = get_settings().free_plan_note_limit
        count = await storage.count_notes_by_tenant(caller.tenant_id)
        if count >= limit:
            logger.info("Note limit reached for tenant %s (%d notes)", caller.tenant.slug, count)
            raise PlanLimitExceeded(
                f"Note limit reached. Free plan allows maximum {limit} notes. "
                "Upgrade to Pro for unlimited notes."
            )

    return await storage.create_note(
        NoteRecord(
            title=data.title,
            body=data.body,
            tenant_id=caller.tenant_id,
            author_id=caller.id,
        )
    )


async def update_note(
    storage: Storage, caller: CurrentUser, note_id: str, updates: NoteUpdate
) -> Note:
    note = await storage.update_note(note_id, caller.tenant_id, updates)
    if note is None:
        raise NotFound("Note not found")
    return note


async def delete_note(storage: Storage, caller: CurrentUser, note_id: str) -> None:
    if not await storage.delete_note(note_id, caller.tenant_id):
        raise NotFound("Note not found")
