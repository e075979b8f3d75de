from __future__ import annotations

import pytest

from app.features.houseworks.domain import HouseworkCreate, HouseworkRecord, HouseworkUpdate
from app.infra.supabase import client as supabase_client
from app.infra.supabase.repositories import HouseworkSupabaseRepository, RepositoryFactory

from .fakes import FakeSupabaseClient, FakeSupabaseQuery

ROW = {
    "id": 3,
    "task_name": "Wash dishes",
    "term": "weekly",
    "point": "5",
    "created_at": "2024-10-04T10:00:00+00:00",
    "updated_at": "2024-10-04T10:00:00+00:00",
}


def make_repo(data=None, count=None) -> tuple[HouseworkSupabaseRepository, FakeSupabaseQuery, FakeSupabaseClient]:
    query = FakeSupabaseQuery(data=data, count=count)
    client = FakeSupabaseClient(query)
    return RepositoryFactory(client).houseworks, query, client


@pytest.mark.asyncio
async def test_find_by_id_hydrates_identity() -> None:
    repo, query, client = make_repo([ROW])

    record = await repo.find_by_id(3)

    assert client.tables == ["houseworks"]
    assert query.called("eq") == [(("id", 3), {})]
    assert record is not None
    assert record.id == 3
    assert record.created_at is not None
    assert record.attributes() == {"task_name": "Wash dishes", "term": "weekly", "point": "5"}


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none() -> None:
    repo, _, _ = make_repo([])

    assert await repo.find_by_id(1) is None


@pytest.mark.asyncio
async def test_create_sends_only_fillable_payload() -> None:
    repo, query, _ = make_repo([ROW])

    record = await repo.create(HouseworkCreate(**{"task_name": "Wash dishes", "owner": "x", "point": 5}))

    (args, _), = query.called("insert")
    assert args[0] == {"task_name": "Wash dishes", "term": None, "point": "5"}
    assert record.id == 3


@pytest.mark.asyncio
async def test_create_without_returned_row_raises() -> None:
    repo, _, _ = make_repo([])

    with pytest.raises(ValueError, match="Failed to create record"):
        await repo.create(HouseworkCreate(task_name="Nothing"))


@pytest.mark.asyncio
async def test_update_stamps_updated_at() -> None:
    repo, query, _ = make_repo([{**ROW, "point": "8"}])

    record = await repo.update(3, HouseworkUpdate(point="8"))

    (args, _), = query.called("update")
    assert args[0]["point"] == "8"
    assert "updated_at" in args[0]
    assert "task_name" not in args[0]
    assert record is not None and record.point == "8"


@pytest.mark.asyncio
async def test_update_missing_returns_none() -> None:
    repo, _, _ = make_repo([])

    assert await repo.update(3, HouseworkUpdate(point="8")) is None


@pytest.mark.asyncio
async def test_delete_reports_whether_rows_were_removed() -> None:
    repo, query, _ = make_repo([ROW])
    assert await repo.delete(3) is True

    query.data = []
    assert await repo.delete(3) is False


@pytest.mark.asyncio
async def test_filters_and_count_drop_unknown_keys() -> None:
    repo, query, _ = make_repo([ROW], count=1)

    records = await repo.find_by_filters({"term": "weekly", "owner": "x", "point": None})
    total = await repo.count({"owner": "x"})

    assert [r.id for r in records] == [3]
    assert query.called("eq") == [(("term", "weekly"), {})]
    assert query.called("is_") == [(("point", "null"), {})]
    assert total == 1


@pytest.mark.asyncio
async def test_save_new_record_picks_up_identity() -> None:
    repo, _, _ = make_repo([ROW])
    record = HouseworkRecord(task_name="Wash dishes", term="weekly", point="5")

    await repo.save(record)

    assert record.id == 3
    assert record.updated_at is not None


def test_client_requires_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    supabase_client.reset_supabase_client()
    monkeypatch.setattr(supabase_client.config, "SUPABASE_URL", None)
    monkeypatch.setattr(supabase_client.config, "SUPABASE_SERVICE_ROLE_KEY", None)

    with pytest.raises(ValueError):
        supabase_client.get_supabase_client()


@pytest.mark.asyncio
async def test_filtered_listing_passes_offset_and_text_values() -> None:
    repo, query, _ = make_repo([ROW])

    await repo.find_by_filters({"point": 5}, limit=10, offset=20)

    assert query.called("eq") == [(("point", "5"), {})]
    assert query.called("limit") == [((10,), {})]
    assert query.called("offset") == [((20,), {})]
