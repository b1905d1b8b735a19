import pytest

from src.lealtad_registry.lealtad_registry.core.constants import LEYES_OPTIONS
from src.lealtad_registry.lealtad_registry.core.exceptions import ValidationError
from src.lealtad_registry.lealtad_registry.laws.local_law_repository import LocalCustomLawRepository
from src.lealtad_registry.lealtad_registry.laws.service import LawCatalogService, normalize_law_label
from src.lealtad_registry.lealtad_registry.store.local_base import LocalStore


@pytest.fixture
def catalog(tmp_path):
    return LawCatalogService(LocalCustomLawRepository(LocalStore(tmp_path)))


def test_base_options_listed_sorted(catalog):
    assert catalog.list_all() == sorted(LEYES_OPTIONS)


def test_custom_label_is_normalized_and_listed(catalog):
    label = catalog.add_custom("  art. 10   ley 24240 ")
    assert label == "ART. 10 LEY 24240"
    assert "ART. 10 LEY 24240" in catalog.list_all()
    assert catalog.list_custom() == ["ART. 10 LEY 24240"]


def test_duplicates_and_base_options_not_stored_twice(catalog):
    catalog.add_custom("ART. 10 LEY 24240")
    catalog.add_custom("art. 10 ley 24240")
    catalog.add_custom("ley 24240")
    assert catalog.list_custom() == ["ART. 10 LEY 24240"]
    assert catalog.list_all().count("LEY 24240") == 1


def test_empty_label_rejected(catalog):
    with pytest.raises(ValidationError):
        catalog.add_custom("   ")


def test_normalize_law_label():
    assert normalize_law_label("art.  n° 5\tley 24240") == "ART. N° 5 LEY 24240"
