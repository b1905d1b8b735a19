from datetime import date, timedelta

import pytest

from src.lealtad_registry.lealtad_registry.deadlines.calculator.business_day_calculator import (
    BusinessDayCalculator,
    requires_short_deadline,
)
from src.lealtad_registry.lealtad_registry.deadlines.holidays import load_holidays


@pytest.fixture
def calc():
    return BusinessDayCalculator(load_holidays())


def test_standard_term_skips_weekends_and_independence_day(calc):
    # Mon 2025-07-07; Wed 9 July is a national holiday
    deadline = calc.compute(date(2025, 7, 7), ["LEY 24240"])
    assert deadline.business_days == 10
    assert deadline.due_date == date(2025, 7, 22)


def test_article_5_selects_short_term(calc):
    deadline = calc.compute(date(2025, 7, 7), ["ART. N° 5 LEY 24240", "ART. N° 42 CN"])
    assert deadline.business_days == 5
    assert deadline.due_date == date(2025, 7, 15)


def test_short_marker_without_n_degree():
    assert requires_short_deadline(["ART. 5 LEY 24240 + ART. 42 CN"])
    assert not requires_short_deadline(["ART. 4 LEY 24240", "ART. N° 42 CN"])
    assert not requires_short_deadline([])


def test_no_laws_uses_standard_term(calc):
    assert calc.compute(date(2025, 7, 7), []).business_days == 10


def test_start_on_weekend_counts_from_next_business_day(calc):
    # Sat 2025-07-05 -> Mon 7 is day 1
    assert calc.add_business_days(date(2025, 7, 5), 1) == date(2025, 7, 7)


def test_zero_days_returns_start(calc):
    assert calc.add_business_days(date(2025, 7, 5), 0) == date(2025, 7, 5)


def test_negative_days_rejected(calc):
    with pytest.raises(ValueError):
        calc.add_business_days(date(2025, 7, 7), -1)


def test_missing_start_uses_today(calc):
    deadline = calc.compute(None, [], today=date(2025, 7, 7))
    assert deadline.due_date == date(2025, 7, 22)


def test_due_date_is_business_day_and_walks_back_to_term(calc):
    start = date(2024, 12, 1)
    for offset in range(0, 400, 3):
        day = start + timedelta(days=offset)
        for laws in ([], ["ART. 5 LEY 24240"]):
            deadline = calc.compute(day, laws)
            assert calc.is_business_day(deadline.due_date)
            assert deadline.due_date > day
            assert calc.count_business_days(day, deadline.due_date) == deadline.business_days


def test_carnival_week_2025(calc):
    # Fri 2025-02-28 + 1 skips Mon 3 and Tue 4 March (carnival)
    assert calc.add_business_days(date(2025, 2, 28), 1) == date(2025, 3, 5)


def test_without_holidays_only_weekends_are_skipped():
    calc = BusinessDayCalculator()
    assert calc.add_business_days(date(2025, 7, 7), 10) == date(2025, 7, 21)
