from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from src.lealtad_registry.lealtad_registry.companies.local_company_repository import LocalCompanyRepository
from src.lealtad_registry.lealtad_registry.core.exceptions import RecordNotFoundError, StoreError
from src.lealtad_registry.lealtad_registry.inspections.local_inspection_repository import LocalInspectionRepository
from src.lealtad_registry.lealtad_registry.inspections.model import InspectionRecord
from src.lealtad_registry.lealtad_registry.notifications.local_notification_repository import LocalNotificationRepository
from src.lealtad_registry.lealtad_registry.notifications.model import NotificationRecord
from src.lealtad_registry.lealtad_registry.store.bootstrap import seed_demo_data
from src.lealtad_registry.lealtad_registry.store.local_base import (
    COMPANIES_KEY,
    NOTIFICATIONS_KEY,
    LocalStore,
    next_id,
)


def _notif(ref="EXP-1"):
    return NotificationRecord(
        id=0,
        entry_date=date(2025, 7, 7),
        ref=ref,
        year=2025,
        area="LEALTAD COMERCIAL",
        department="Capital",
        type="AUDIENCIA",
        addressed_to="ACME",
        against="Juan",
        hearing_date=date(2025, 7, 10),
        notifier="Ponce",
    )


def test_missing_key_reads_empty(tmp_path):
    store = LocalStore(tmp_path / "data")
    assert store.read(NOTIFICATIONS_KEY) == []
    assert not store.has(NOTIFICATIONS_KEY)


def test_write_then_read(tmp_path):
    store = LocalStore(tmp_path)
    store.write(COMPANIES_KEY, ["Ñandú SRL"])
    assert store.has(COMPANIES_KEY)
    assert store.read(COMPANIES_KEY) == ["Ñandú SRL"]


def test_editing_discards_changes_on_error(tmp_path):
    store = LocalStore(tmp_path)
    store.write(COMPANIES_KEY, ["A"])
    with pytest.raises(RuntimeError):
        with store.editing(COMPANIES_KEY) as names:
            names.append("B")
            raise RuntimeError("boom")
    assert store.read(COMPANIES_KEY) == ["A"]


def test_corrupt_file_raises_store_error(tmp_path):
    (tmp_path / f"{NOTIFICATIONS_KEY}.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreError):
        LocalStore(tmp_path).read(NOTIFICATIONS_KEY)


def test_next_id():
    assert next_id([]) == 1
    assert next_id([{"id": 3}, {"id": 9}, {"id": None}]) == 10


def test_notification_repository_crud(tmp_path):
    repo = LocalNotificationRepository(LocalStore(tmp_path))
    first = repo.create(_notif("EXP-1"))
    second = repo.create(_notif("EXP-2"))
    assert (first.id, second.id) == (1, 2)

    repo.update(dataclasses.replace(first, notified_on=date(2025, 7, 8)))
    assert repo.list_all()[0].notified_on == date(2025, 7, 8)

    repo.delete(record_id=1)
    assert [n.id for n in repo.list_all()] == [2]
    assert repo.create(_notif("EXP-3")).id == 3

    with pytest.raises(RecordNotFoundError):
        repo.delete(record_id=1)


def test_inspection_repository_persists_flag(tmp_path):
    repo = LocalInspectionRepository(LocalStore(tmp_path))
    repo.create(
        InspectionRecord(
            id=0,
            inspection_date=date(2025, 7, 7),
            ref="",
            inspector1="Nieva",
            inspector2="",
            locality="Capital",
            legal_name="ACME",
            trade_name="",
            tax_id="",
            laws=("LEY 24240",),
            ex_officio=True,
        )
    )
    (saved,) = repo.list_all()
    assert saved.id == 1
    assert saved.ex_officio
    assert saved.laws == ("LEY 24240",)


def test_company_repository_sorted_without_duplicates(tmp_path):
    repo = LocalCompanyRepository(LocalStore(tmp_path))
    for name in ["Zeta", "Alfa", "Zeta"]:
        repo.add(name)
    assert repo.list_names() == ["Alfa", "Zeta"]


def test_seed_only_into_empty_store(tmp_path):
    store = LocalStore(tmp_path)
    assert seed_demo_data(store, today=date(2025, 7, 7))
    (row,) = store.read(NOTIFICATIONS_KEY)
    assert row["tipo"] == "AUDIENCIA"
    assert row["fechaAudiencia"] == "2025-07-12"
    assert store.read(COMPANIES_KEY) == ["Supermercado X"]

    assert not seed_demo_data(store, today=date(2025, 7, 7))
    assert len(store.read(NOTIFICATIONS_KEY)) == 1
