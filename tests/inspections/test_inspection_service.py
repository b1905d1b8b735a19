from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from src.lealtad_registry.lealtad_registry.companies.service import CompanyService
from src.lealtad_registry.lealtad_registry.core.exceptions import ValidationError
from src.lealtad_registry.lealtad_registry.inspections import service as service_module
from src.lealtad_registry.lealtad_registry.inspections.mapping import from_row, to_sheet_row
from src.lealtad_registry.lealtad_registry.inspections.service import InspectionService, NewInspection


class FakeInspectionsRepo:
    def __init__(self):
        self.rows = []

    def list_all(self):
        return list(self.rows)

    def create(self, record):
        saved = dataclasses.replace(record, id=len(self.rows) + 1)
        self.rows.append(saved)
        return saved


class FakeCompaniesRepo:
    def __init__(self):
        self.names = []

    def list_names(self):
        return list(self.names)

    def add(self, name):
        self.names.append(name)


@pytest.fixture
def service(monkeypatch):
    monkeypatch.setattr(service_module, "today_local", lambda: date(2025, 7, 7))
    return InspectionService(FakeInspectionsRepo(), CompanyService(FakeCompaniesRepo()))


def test_create_defaults_date_to_today(service):
    saved = service.create(NewInspection(legal_name="ACME SA", ex_officio=True))
    assert saved.id == 1
    assert saved.inspection_date == date(2025, 7, 7)
    assert saved.is_ex_officio


def test_legal_name_required(service):
    with pytest.raises(ValidationError):
        service.create(NewInspection(legal_name=""))


def test_tax_id_optional_but_validated(service):
    assert service.create(NewInspection(legal_name="ACME", tax_id="")).tax_id == ""
    assert service.create(NewInspection(legal_name="ACME", tax_id="20123456789")).tax_id == "20123456789"
    with pytest.raises(ValidationError):
        service.create(NewInspection(legal_name="ACME", tax_id="123"))


def test_next_id(service):
    service.create(NewInspection(legal_name="ACME"))
    assert service.next_id() == 2


@pytest.mark.parametrize(
    "row",
    [
        {"esActuacionDeOficio": True},
        {"esActuacionDeOficio": "SI"},
        {"DE OFICIO": "SI"},
        {"ES ACTUACION DE OFICIO": "si"},
        {"leyes": "LEY 24240, ACTUACIÓN DE OFICIO"},
    ],
)
def test_ex_officio_variants(row):
    assert from_row({"id": 1, "razonSocial": "ACME", **row}).is_ex_officio


def test_not_ex_officio():
    rec = from_row({"id": 1, "FECHA": "2025-07-07", "esActuacionDeOficio": "NO"})
    assert not rec.is_ex_officio
    assert rec.inspection_date == date(2025, 7, 7)
    assert to_sheet_row(rec)["esActuacionDeOficio"] == "NO"
