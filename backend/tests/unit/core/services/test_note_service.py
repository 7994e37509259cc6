"""Unit tests for NoteService."""

from uuid import uuid4

import pytest

from notevault.core.errors import ErrorKind, NoteVaultError
from notevault.core.schemas.notes import NoteCreate, NoteUpdate
from notevault.core.services.note_service import NoteService


@pytest.fixture
def service(test_session):
    return NoteService(test_session)


async def test_create_uses_caller_as_owner(service, test_account):
    request = NoteCreate.model_validate(
        {"title": "Mine", "content": "c", "ownerId": str(uuid4())}
    )

    note = await service.create_note(test_account.id, request)

    assert note.owner_id == test_account.id
    assert note.is_archived is False


async def test_create_sanitizes_tags(service, test_account):
    request = NoteCreate(title="t", content="c", tags=[" work ", "", "   ", "home"])

    note = await service.create_note(test_account.id, request)

    assert note.tags == ["work", "home"]


async def test_get_other_owners_note_looks_missing(service, test_account, other_account):
    note = await service.create_note(test_account.id, NoteCreate(title="t", content="c"))

    with pytest.raises(NoteVaultError) as exc_info:
        await service.get_note(note.id, other_account.id)
    assert exc_info.value.kind is ErrorKind.NOT_FOUND_OR_FORBIDDEN

    with pytest.raises(NoteVaultError) as missing_info:
        await service.get_note(uuid4(), other_account.id)
    assert missing_info.value.kind is ErrorKind.NOT_FOUND_OR_FORBIDDEN
    assert missing_info.value.message == exc_info.value.message


async def test_update_partial(service, test_account):
    note = await service.create_note(
        test_account.id, NoteCreate(title="t", content="c", tags=["a"])
    )

    updated = await service.update_note(
        note.id, test_account.id, NoteUpdate.model_validate({"isArchived": True})
    )

    assert updated.is_archived is True
    assert updated.title == "t"
    assert updated.content == "c"
    assert updated.tags == ["a"]
    assert updated.owner_id == test_account.id


async def test_update_tags_are_sanitized(service, test_account):
    note = await service.create_note(test_account.id, NoteCreate(title="t", content="c"))

    updated = await service.update_note(
        note.id, test_account.id, NoteUpdate(tags=["  x ", " "])
    )

    assert updated.tags == ["x"]


async def test_update_without_changes(service, test_account):
    note = await service.create_note(test_account.id, NoteCreate(title="t", content="c"))

    with pytest.raises(NoteVaultError) as exc_info:
        await service.update_note(note.id, test_account.id, NoteUpdate())

    assert exc_info.value.kind is ErrorKind.VALIDATION_ERROR


async def test_update_other_owner(service, test_account, other_account):
    note = await service.create_note(test_account.id, NoteCreate(title="t", content="c"))

    with pytest.raises(NoteVaultError) as exc_info:
        await service.update_note(note.id, other_account.id, NoteUpdate(title="x"))

    assert exc_info.value.kind is ErrorKind.NOT_FOUND_OR_FORBIDDEN
    assert (await service.get_note(note.id, test_account.id)).title == "t"


async def test_delete(service, test_account, other_account):
    note = await service.create_note(test_account.id, NoteCreate(title="t", content="c"))

    with pytest.raises(NoteVaultError):
        await service.delete_note(note.id, other_account.id)

    await service.delete_note(note.id, test_account.id)

    with pytest.raises(NoteVaultError) as exc_info:
        await service.get_note(note.id, test_account.id)
    assert exc_info.value.kind is ErrorKind.NOT_FOUND_OR_FORBIDDEN


async def test_list_notes_pagination(service, test_account):
    for i in range(3):
        await service.create_note(test_account.id, NoteCreate(title=f"n{i}", content="c"))

    result = await service.list_notes(test_account.id, page=2, limit=2)

    assert len(result.notes) == 1
    assert result.pagination.current_page == 2
    assert result.pagination.total_pages == 2
    assert result.pagination.total_notes == 3
    assert result.pagination.has_next is False
    assert result.pagination.has_prev is True


async def test_list_notes_empty(service, test_account):
    result = await service.list_notes(test_account.id)

    assert result.notes == []
    assert result.pagination.total_pages == 0
    assert result.pagination.has_next is False
    assert result.pagination.has_prev is False


async def test_available_tags(service, test_account):
    await service.create_note(test_account.id, NoteCreate(title="t", content="c", tags=["b", "a"]))
    assert await service.get_available_tags(test_account.id) == ["a", "b"]
