# pylint: disable=redefined-outer-name
# pylint: disable=unused-argument

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StorageError
from app.repositories import aliens as alien_repository


async def test_save_without_id_assigns_one_and_round_trips(db_session: AsyncSession):
    saved = await alien_repository.save_alien(
        db_session, name="Zorg", attributes={"planet": "Xenon"}
    )
    await db_session.commit()

    assert saved.id is not None
    found = await alien_repository.get_alien_by_id(db_session, saved.id)
    assert found is not None
    assert (found.id, found.name, found.attributes) == (
        saved.id,
        "Zorg",
        {"planet": "Xenon"},
    )


async def test_get_missing_id_returns_none(db_session: AsyncSession):
    assert await alien_repository.get_alien_by_id(db_session, 4242) is None


async def test_list_returns_every_alien_in_insertion_order(db_session: AsyncSession):
    assert await alien_repository.list_aliens(db_session) == []

    for name in ("Zorg", "Kang", "Kodos"):
        await alien_repository.save_alien(db_session, name=name)
    await db_session.commit()

    aliens = await alien_repository.list_aliens(db_session)
    assert [a.name for a in aliens] == ["Zorg", "Kang", "Kodos"]
    assert [a.id for a in aliens] == sorted(a.id for a in aliens)


async def test_save_with_existing_id_overwrites_all_fields(db_session: AsyncSession):
    original = await alien_repository.save_alien(
        db_session, name="Kang", attributes={"planet": "Rigel VII", "tech": "Java"}
    )
    await db_session.commit()

    updated = await alien_repository.save_alien(
        db_session, alien_id=original.id, name="Kodos", attributes={"tech": "Python"}
    )
    await db_session.commit()

    assert updated.id == original.id
    aliens = await alien_repository.list_aliens(db_session)
    assert len(aliens) == 1
    assert aliens[0].name == "Kodos"
    assert aliens[0].attributes == {"tech": "Python"}


async def test_save_with_existing_id_and_no_fields_clears_them(db_session: AsyncSession):
    original = await alien_repository.save_alien(
        db_session, name="Kang", attributes={"planet": "Rigel VII"}
    )
    await db_session.commit()

    updated = await alien_repository.save_alien(db_session, alien_id=original.id)
    await db_session.commit()

    assert updated.name is None
    assert updated.attributes == {}


async def test_save_with_unknown_id_inserts_a_new_row(db_session: AsyncSession):
    await alien_repository.save_alien(db_session, name="Zorg")
    await db_session.commit()
    before = len(await alien_repository.list_aliens(db_session))

    inserted = await alien_repository.save_alien(db_session, alien_id=999, name="Kang")
    await db_session.commit()

    assert len(await alien_repository.list_aliens(db_session)) == before + 1
    assert inserted.id != 999
    assert await alien_repository.get_alien_by_id(db_session, 999) is None


async def test_delete_removes_row_and_is_idempotent(db_session: AsyncSession):
    alien = await alien_repository.save_alien(db_session, name="Zorg")
    await db_session.commit()

    await alien_repository.delete_alien_by_id(db_session, alien.id)
    await db_session.commit()
    await alien_repository.delete_alien_by_id(db_session, alien.id)
    await db_session.commit()

    assert await alien_repository.get_alien_by_id(db_session, alien.id) is None
    assert await alien_repository.list_aliens(db_session) == []


async def test_delete_unknown_id_is_a_noop(db_session: AsyncSession):
    await alien_repository.save_alien(db_session, name="Zorg")
    await db_session.commit()

    await alien_repository.delete_alien_by_id(db_session, 31337)
    await db_session.commit()

    assert len(await alien_repository.list_aliens(db_session)) == 1


async def test_driver_failures_surface_as_storage_error(
    db_session: AsyncSession, monkeypatch: pytest.MonkeyPatch
):
    async def _unavailable(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is unavailable"))

    monkeypatch.setattr(db_session, "execute", _unavailable)

    with pytest.raises(StorageError) as exc_info:
        await alien_repository.delete_alien_by_id(db_session, 7)

    assert exc_info.value.operation == "delete_by_id"
    assert exc_info.value.alien_id == 7
    assert "database is unavailable" in exc_info.value.details["error"]
    assert isinstance(exc_info.value.__cause__, OperationalError)


async def test_ids_of_deleted_rows_are_never_reused(db_session: AsyncSession):
    await alien_repository.save_alien(db_session, name="Zorg")
    kang = await alien_repository.save_alien(db_session, name="Kang")
    await db_session.commit()
    kang_id = kang.id

    await alien_repository.delete_alien_by_id(db_session, kang_id)
    await db_session.commit()

    kodos = await alien_repository.save_alien(db_session, alien_id=kang_id, name="Kodos")
    await db_session.commit()

    assert kodos.id > kang_id
    assert await alien_repository.get_alien_by_id(db_session, kang_id) is None
