from datetime import date

import pytest

from src.lealtad_registry.lealtad_registry.deadlines.holidays import load_holidays, parse_holiday_lines


def test_builtin_table_covers_2024_and_2025():
    holidays = load_holidays()
    assert date(2024, 5, 25) in holidays
    assert date(2025, 7, 9) in holidays
    assert date(2025, 12, 25) in holidays
    assert date(2025, 7, 10) not in holidays


def test_parse_lines_ignores_comments_and_blanks():
    text = """
    # feriados 2026
    2026-01-01
    2026-02-16   # carnaval

    2026-02-17
    """
    assert parse_holiday_lines(text) == frozenset(
        {date(2026, 1, 1), date(2026, 2, 16), date(2026, 2, 17)}
    )


def test_load_from_file(tmp_path):
    path = tmp_path / "feriados.txt"
    path.write_text("2026-05-25\n2026-07-09\n", encoding="utf-8")
    assert load_holidays(path) == frozenset({date(2026, 5, 25), date(2026, 7, 9)})


def test_invalid_line_raises():
    with pytest.raises(ValueError):
        parse_holiday_lines("25/05/2026")
