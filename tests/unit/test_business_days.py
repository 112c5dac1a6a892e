"""
Тесты для Business Days — рабочие дни с учётом праздников

Проверяемые инварианты:
1. Обе границы диапазона включены
2. end < start → 0
3. Праздники сравниваются по календарной дате (время суток не важно)
4. Праздник в выходной не уменьшает счёт повторно
5. Рабочая неделя MON_TO_FRI / MON_TO_SAT / CUSTOM
"""

import datetime as dt

import pytest

from src.core.domain import Holiday, WorkingWeek
from src.scheduling import (
    MON_TO_FRI_DAYS,
    MON_TO_SAT_DAYS,
    calculate_business_days,
    calculate_business_days_excluding_holidays,
    calculate_end_date,
    get_working_days,
    to_calendar_date,
)

# Songkran 2025: вс 13 апреля, пн 14, вт 15
SONGKRAN = ["2025-04-13", "2025-04-14", "2025-04-15"]


# =============================================================================
# ТЕСТЫ: нормализация дат
# =============================================================================


class TestToCalendarDate:
    """Тесты для to_calendar_date"""

    def test_date_passthrough(self):
        assert to_calendar_date(dt.date(2025, 9, 1)) == dt.date(2025, 9, 1)

    def test_datetime_drops_time(self):
        assert to_calendar_date(dt.datetime(2025, 9, 1, 23, 59)) == dt.date(2025, 9, 1)

    @pytest.mark.parametrize("value", ["2025-09-01", "2025-09-01T00:00:00Z", " 2025-09-01 "])
    def test_iso_strings(self, value):
        assert to_calendar_date(value) == dt.date(2025, 9, 1)

    def test_holiday(self):
        assert to_calendar_date(Holiday(date="2025-05-01", name="Labour Day")) == dt.date(2025, 5, 1)

    @pytest.mark.parametrize(
        "value",
        ["2025-09-01 09:30", "2025-09-01T23:59:59+07:00", "2025-09-01T00:00:00.000Z"],
    )
    def test_full_iso_datetimes(self, value):
        assert to_calendar_date(value) == dt.date(2025, 9, 1)

    @pytest.mark.parametrize(
        "value",
        ["01/09/2025", "2025-04-14garbage", "2025-04-14 junk", "2025-02-30", ""],
    )
    def test_invalid_string(self, value):
        """Хвост после даты не отбрасывается молча"""
        with pytest.raises(ValueError):
            to_calendar_date(value)

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Unsupported date value"):
            to_calendar_date(20250901)


# =============================================================================
# ТЕСТЫ: рабочая неделя
# =============================================================================


class TestGetWorkingDays:
    """Тесты для get_working_days"""

    def test_default_mon_to_fri(self):
        assert get_working_days() == MON_TO_FRI_DAYS == frozenset({0, 1, 2, 3, 4})

    def test_mon_to_sat(self):
        assert get_working_days("MON_TO_SAT") == MON_TO_SAT_DAYS

    def test_custom(self):
        assert get_working_days(WorkingWeek.CUSTOM, ["MON", "wed", "FRI"]) == frozenset({0, 2, 4})

    def test_custom_without_days_is_empty(self):
        assert get_working_days(WorkingWeek.CUSTOM) == frozenset()

    def test_unknown_day_code(self):
        with pytest.raises(ValueError, match="Unknown working day code"):
            get_working_days(WorkingWeek.CUSTOM, ["MON", "FUNDAY"])

    def test_unknown_working_week(self):
        with pytest.raises(ValueError):
            get_working_days("FOUR_DAY")


# =============================================================================
# ТЕСТЫ: подсчёт рабочих дней
# =============================================================================


class TestCalculateBusinessDays:
    """Тесты для calculate_business_days"""

    def test_single_week(self):
        """пн 1 сентября 2025 — пт 5 сентября 2025"""
        assert calculate_business_days(dt.date(2025, 9, 1), dt.date(2025, 9, 5)) == 5

    def test_two_weeks_skip_weekend(self):
        assert calculate_business_days(dt.date(2025, 9, 1), dt.date(2025, 9, 14)) == 10

    def test_same_day(self):
        assert calculate_business_days(dt.date(2025, 9, 1), dt.date(2025, 9, 1)) == 1
        assert calculate_business_days(dt.date(2025, 9, 6), dt.date(2025, 9, 6)) == 0

    def test_end_before_start(self):
        assert calculate_business_days(dt.date(2025, 9, 5), dt.date(2025, 9, 1)) == 0

    def test_mixed_input_types(self):
        """datetime и ISO-строка дают тот же результат"""
        assert calculate_business_days(dt.datetime(2025, 9, 1, 18, 0), "2025-09-05T09:00:00") == 5

    def test_mon_to_sat(self):
        result = calculate_business_days(
            "2025-09-01", "2025-09-07", working_days=get_working_days("MON_TO_SAT")
        )
        assert result == 6

    def test_custom_week(self):
        result = calculate_business_days(
            "2025-09-01", "2025-09-14", working_days=get_working_days("CUSTOM", ["MON", "WED"])
        )
        assert result == 4


class TestCalculateBusinessDaysExcludingHolidays:
    """Тесты для calculate_business_days_excluding_holidays"""

    def test_songkran_week(self):
        """пн 14 — пт 18 апреля 2025, праздники 13 (вс), 14, 15 → 3"""
        result = calculate_business_days_excluding_holidays("2025-04-14", "2025-04-18", SONGKRAN)
        assert result == 3

    def test_holiday_models(self):
        holidays = [Holiday(date=d, name="Songkran") for d in SONGKRAN]
        result = calculate_business_days_excluding_holidays(
            dt.date(2025, 4, 14), dt.date(2025, 4, 18), holidays
        )
        assert result == 3

    def test_holiday_time_of_day_ignored(self):
        """Праздник с временем в UTC совпадает по календарной дате"""
        holidays = ["2025-04-14T00:00:00Z", dt.datetime(2025, 4, 15, 17, 0)]
        result = calculate_business_days_excluding_holidays(
            dt.datetime(2025, 4, 14, 9, 0), dt.date(2025, 4, 18), holidays
        )
        assert result == 3

    def test_duplicate_holidays_counted_once(self):
        result = calculate_business_days_excluding_holidays(
            "2025-04-14", "2025-04-18", ["2025-04-14", "2025-04-14"]
        )
        assert result == 4

    def test_holidays_outside_range_ignored(self):
        result = calculate_business_days_excluding_holidays(
            "2025-09-01", "2025-09-05", ["2025-01-01", "2025-12-31"]
        )
        assert result == 5

    def test_never_exceeds_plain_count(self):
        start, end = dt.date(2025, 1, 1), dt.date(2025, 12, 31)
        plain = calculate_business_days(start, end)
        with_holidays = calculate_business_days_excluding_holidays(start, end, SONGKRAN)
        assert with_holidays == plain - 2

    def test_end_before_start(self):
        assert calculate_business_days_excluding_holidays("2025-04-18", "2025-04-14", SONGKRAN) == 0


# =============================================================================
# ТЕСТЫ: дата окончания
# =============================================================================


class TestCalculateEndDate:
    """Тесты для calculate_end_date"""

    def test_within_week(self):
        assert calculate_end_date(dt.date(2025, 9, 1), 5) == dt.date(2025, 9, 5)

    def test_skips_weekend(self):
        """пт 5 сентября + 2 рабочих дня → пн 8 сентября"""
        assert calculate_end_date(dt.date(2025, 9, 5), 2) == dt.date(2025, 9, 8)

    def test_start_on_weekend(self):
        """Выходной старт не считается рабочим днём"""
        assert calculate_end_date(dt.date(2025, 9, 6), 1) == dt.date(2025, 9, 8)

    def test_skips_holidays(self):
        assert calculate_end_date("2025-04-14", 3, SONGKRAN) == dt.date(2025, 4, 18)

    @pytest.mark.parametrize("business_days", [0, -3])
    def test_non_positive_days_return_start(self, business_days):
        assert calculate_end_date("2025-09-06", business_days) == dt.date(2025, 9, 6)

    def test_custom_week(self):
        week = get_working_days("CUSTOM", ["MON", "WED"])
        assert calculate_end_date("2025-09-01", 3, working_days=week) == dt.date(2025, 9, 8)

    def test_empty_week_rejected(self):
        with pytest.raises(ValueError, match="no working days"):
            calculate_end_date("2025-09-01", 1, working_days=())

    def test_consistent_with_business_day_count(self):
        for n in range(1, 30):
            end = calculate_end_date("2025-04-10", n, SONGKRAN)
            assert calculate_business_days_excluding_holidays("2025-04-10", end, SONGKRAN) == n
