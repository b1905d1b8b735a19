from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from src.lealtad_registry.lealtad_registry.companies.service import CompanyService
from src.lealtad_registry.lealtad_registry.core.enums import NotifType
from src.lealtad_registry.lealtad_registry.core.exceptions import StoreError, ValidationError
from src.lealtad_registry.lealtad_registry.notifications import service as service_module
from src.lealtad_registry.lealtad_registry.notifications.service import NewNotification, NotificationService


class FakeNotificationsRepo:
    def __init__(self):
        self.rows = {}
        self.updated = []
        self.deleted = []

    def list_all(self):
        return list(self.rows.values())

    def create(self, record):
        saved = dataclasses.replace(record, id=len(self.rows) + 1)
        self.rows[saved.id] = saved
        return saved

    def update(self, record):
        self.updated.append(record)

    def delete(self, *, record_id):
        self.deleted.append(record_id)


class FakeCompaniesRepo:
    def __init__(self):
        self.names = []

    def list_names(self):
        return sorted(self.names)

    def add(self, name):
        if name not in self.names:
            self.names.append(name)


@pytest.fixture
def svc(monkeypatch):
    monkeypatch.setattr(service_module, "today_local", lambda: date(2025, 7, 7))
    repo = FakeNotificationsRepo()
    companies = FakeCompaniesRepo()
    return NotificationService(repo, CompanyService(companies)), repo, companies


def test_create_sets_entry_date_and_registers_company(svc):
    service, repo, companies = svc
    saved = service.create(
        NewNotification(
            ref=" EXP-001 ",
            against="Juan Perez",
            addressed_to="Supermercado X",
            hearing_date=date(2025, 7, 12),
        )
    )
    assert saved.id == 1
    assert saved.ref == "EXP-001"
    assert saved.entry_date == date(2025, 7, 7)
    assert saved.year == 2025
    assert companies.names == ["Supermercado X"]


@pytest.mark.parametrize(
    "field, message",
    [("ref", "Referencia"), ("against", "Contra"), ("addressed_to", "Dirigido a")],
)
def test_create_requires_fields(svc, field, message):
    service, repo, _ = svc
    data = NewNotification(ref="EXP-1", against="Juan", addressed_to="ACME", hearing_date=date(2025, 7, 10))
    with pytest.raises(ValidationError, match=message):
        service.create(dataclasses.replace(data, **{field: "  "}))
    assert repo.rows == {}


def test_audience_without_hearing_date_is_accepted(svc):
    service, repo, _ = svc
    saved = service.create(NewNotification(ref="EXP-1", against="Juan", addressed_to="ACME"))
    assert saved.type == NotifType.AUDIENCIA.value
    assert saved.hearing_date is None
    assert list(repo.rows) == [saved.id]


def test_other_types_do_not_need_hearing_date(svc):
    service, _, _ = svc
    saved = service.create(
        NewNotification(ref="EXP-1", against="Juan", addressed_to="ACME", type=NotifType.TRASLADO.value)
    )
    assert saved.hearing_date is None


def test_unknown_type_rejected(svc):
    service, _, _ = svc
    with pytest.raises(ValidationError):
        service.create(NewNotification(ref="EXP-1", against="Juan", addressed_to="ACME", type="CITACION"))


def test_update_validates_and_registers_company(svc):
    service, repo, companies = svc
    saved = service.create(
        NewNotification(ref="EXP-1", against="Juan", addressed_to="ACME", type=NotifType.TRASLADO.value)
    )
    service.update(dataclasses.replace(saved, addressed_to=" Farmacia Y "))
    assert repo.updated[-1].addressed_to == "Farmacia Y"
    assert "Farmacia Y" in companies.names

    with pytest.raises(ValidationError):
        service.update(dataclasses.replace(saved, ref=""))


def test_delete_rejects_invalid_id(svc):
    service, repo, _ = svc
    with pytest.raises(ValidationError):
        service.delete(record_id=0)
    service.delete(record_id=3)
    assert repo.deleted == [3]


class FailingCompaniesRepo(FakeCompaniesRepo):
    def add(self, name):
        raise StoreError("hoja de empresas no disponible")


def test_company_failure_does_not_fail_saved_notification(monkeypatch):
    monkeypatch.setattr(service_module, "today_local", lambda: date(2025, 7, 7))
    repo = FakeNotificationsRepo()
    service = NotificationService(repo, CompanyService(FailingCompaniesRepo()))

    saved = service.create(NewNotification(ref="EXP-1", against="Juan", addressed_to="ACME"))
    updated = service.update(dataclasses.replace(saved, addressed_to="Farmacia Y"))

    assert repo.rows[saved.id] == saved
    assert repo.updated == [updated]
