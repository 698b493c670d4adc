from datetime import date

from recordstore.utils.dates import canonicalize_date, parse_date_term

TODAY = date(2025, 3, 7)


def test_display_format_passes_through():
    assert canonicalize_date("15/08/2023", today=TODAY) == "15/08/2023"


def test_iso_date_is_reordered():
    assert canonicalize_date("2023-08-15", today=TODAY) == "15/08/2023"


def test_iso_datetime_drops_time_part():
    assert canonicalize_date("2023-08-15 16:00:00", today=TODAY) == "15/08/2023"
    assert canonicalize_date("2023-08-15T16:00:00Z", today=TODAY) == "15/08/2023"


def test_absent_or_unparseable_defaults_to_today():
    assert canonicalize_date(None, today=TODAY) == "07/03/2025"
    assert canonicalize_date("", today=TODAY) == "07/03/2025"
    assert canonicalize_date("next tuesday", today=TODAY) == "07/03/2025"
    assert canonicalize_date(20230815, today=TODAY) == "07/03/2025"


def test_impossible_calendar_dates_default_to_today():
    assert canonicalize_date("2023-02-30", today=TODAY) == "07/03/2025"
    assert canonicalize_date("31/13/2023", today=TODAY) == "07/03/2025"


def test_parse_date_term_does_not_default():
    assert parse_date_term("2023-08-15") == "15/08/2023"
    assert parse_date_term(" 15/08/2023 ") == "15/08/2023"
    assert parse_date_term("15-08-2023") is None
    assert parse_date_term(None) is None
