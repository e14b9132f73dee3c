from __future__ import annotations

from datetime import date

import pytest

from src.hr_timesheet.hr_timesheet.attendance.model import AttendanceRecord
from src.hr_timesheet.hr_timesheet.core.enums import ExplainStatus
from src.hr_timesheet.hr_timesheet.core.exceptions import StorageError, ValidationError
from src.hr_timesheet.hr_timesheet.timesheet.calculator.base import WorkedHoursCalculator
from src.hr_timesheet.hr_timesheet.timesheet.service import TimesheetService


def _rec(work_date: date, *, check_in=None, check_out=None, note=None, attendance_id=1) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=attendance_id,
        employee_code="NV001",
        work_date=work_date,
        shift_code="HC1",
        shift_time="08:00-18:00",
        check_in=check_in,
        check_out=check_out,
        explain_status=ExplainStatus.PENDING,
        note=note,
    )


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def list_range(self, *, employee_code: str, start_date: date, end_date: date):
        self.last_args = {"employee_code": employee_code, "start_date": start_date, "end_date": end_date}
        return [r for r in self._rows if start_date <= r.work_date <= end_date]


class BrokenAttendanceRepo:
    def list_range(self, **kwargs):
        raise StorageError("Lost connection to MySQL server during query")


def test_scenario_one_punched_day_in_three_day_range():
    repo = FakeAttendanceRepo([_rec(date(2025, 12, 24), check_in="07:58", check_out="18:06")])
    svc = TimesheetService(repo)

    data = svc.summarize("NV001", "2025-12-23", "2025-12-25").to_dict()
    rows = data["rows"]

    assert len(rows) == 4
    assert rows[0]["time"] == "Tổng"
    assert rows[0]["ccc"] == 9
    assert [r["time"] for r in rows[1:]] == ["T3 - 23", "T4 - 24", "T5 - 25"]
    assert [r["ccc"] for r in rows[1:]] == ["-", 9, "-"]
    assert data["cards"]["tongCong"] == "9"
    assert repo.last_args == {
        "employee_code": "NV001",
        "start_date": date(2025, 12, 23),
        "end_date": date(2025, 12, 25),
    }


@pytest.mark.parametrize(
    "start,end,expected_days",
    [
        ("2025-12-23", "2025-12-23", 1),
        ("2025-12-23", "2026-01-22", 31),
        ("2024-02-01", "2024-03-01", 30),
        ("2025-02-01", "2025-03-01", 29),
    ],
)
def test_one_row_per_calendar_day_plus_total(start, end, expected_days):
    svc = TimesheetService(FakeAttendanceRepo([_rec(date(2025, 12, 24), check_in="08:00", check_out="17:00")]))

    summary = svc.summarize("NV001", start, end)

    assert len(summary.days) == expected_days
    assert len(summary.rows) == expected_days + 1


def test_half_punched_day_has_unset_hours():
    repo = FakeAttendanceRepo(
        [
            _rec(date(2025, 12, 23), check_in="07:58"),
            _rec(date(2025, 12, 24), check_out="18:06"),
            _rec(date(2025, 12, 25), check_in="", check_out="18:00"),
        ]
    )

    data = TimesheetService(repo).summarize("NV001", "2025-12-23", "2025-12-25").to_dict()

    assert [r["ccc"] for r in data["rows"]] == ["-", "-", "-", "-"]
    assert data["cards"]["tongCong"] == "0"


def test_total_sums_every_punched_day():
    repo = FakeAttendanceRepo(
        [
            _rec(date(2025, 12, 22), check_in="08:00", check_out="17:00", attendance_id=1),
            _rec(date(2025, 12, 23), check_in="08:00", check_out="17:00", attendance_id=2),
            _rec(date(2025, 12, 27), check_in="08:00", check_out="12:00", attendance_id=3),
        ]
    )

    summary = TimesheetService(repo).summarize("NV001", "2025-12-22", "2025-12-28")

    assert summary.total_row.ccc == 27
    assert summary.cards.to_dict()["tongCong"] == "27"


def test_weekday_labels_for_sunday_and_saturday():
    summary = TimesheetService(FakeAttendanceRepo([])).summarize("NV001", "2025-12-27", "2025-12-28")
    labels = [d.time for d in summary.days]

    assert labels[0].startswith("T7")
    assert labels[1].startswith("CN")
    assert labels == ["T7 - 27", "CN - 28"]


def test_note_is_carried_over_and_categories_are_unset():
    repo = FakeAttendanceRepo([_rec(date(2025, 12, 24), note="Quên chấm công ra")])

    rows = TimesheetService(repo).summarize("NV001", "2025-12-24", "2025-12-25").to_dict()["rows"]

    assert rows[1]["note"] == "Quên chấm công ra"
    assert rows[2]["note"] == ""
    for key in ("ot", "truc", "ca3", "bhxh", "hl", "khl", "phep"):
        assert rows[1][key] == "-"
        assert rows[0][key] == "-"


def test_cards_are_placeholders():
    cards = TimesheetService(FakeAttendanceRepo([])).summarize("NV001", "2025-12-23", "2025-12-25").to_dict()["cards"]

    assert cards == {
        "tongCong": "0",
        "congChuan": "27,25",
        "congTon": "--",
        "phepKhaDung": "0",
        "phepDaDung": "0",
    }


def test_inverted_range_yields_only_total_row():
    summary = TimesheetService(FakeAttendanceRepo([])).summarize("NV001", "2025-12-25", "2025-12-23")

    assert summary.days == []
    assert [r.to_dict()["time"] for r in summary.rows] == ["Tổng"]


@pytest.mark.parametrize(
    "args",
    [
        ("", "2025-12-23", "2025-12-25"),
        ("NV001", None, "2025-12-25"),
        ("NV001", "2025-12-23", None),
        ("NV001", "23-12-2025", "2025-12-25"),
    ],
)
def test_missing_or_malformed_params_are_rejected(args):
    with pytest.raises(ValidationError):
        TimesheetService(FakeAttendanceRepo([])).summarize(*args)


def test_storage_error_propagates():
    with pytest.raises(StorageError, match="Lost connection"):
        TimesheetService(BrokenAttendanceRepo()).summarize("NV001", "2025-12-23", "2025-12-25")


def test_custom_calculator_and_decimal_comma():
    class HalfDayCalculator(WorkedHoursCalculator):
        def worked_hours(self, record):
            return 4.5 if record else None

    repo = FakeAttendanceRepo([_rec(date(2025, 12, 24)), _rec(date(2025, 12, 25), attendance_id=2)])
    svc = TimesheetService(repo, calculator=HalfDayCalculator())

    data = svc.summarize("NV001", "2025-12-23", "2025-12-25").to_dict()

    assert data["rows"][0]["ccc"] == 9.0
    assert data["cards"]["tongCong"] == "9"

    one_day = svc.summarize("NV001", "2025-12-24", "2025-12-24").to_dict()
    assert one_day["cards"]["tongCong"] == "4,5"


def test_period_ending_on_last_calendar_date():
    summary = TimesheetService(FakeAttendanceRepo([])).summarize("NV001", "9999-12-30", "9999-12-31")

    assert [d.time for d in summary.days] == ["T5 - 30", "T6 - 31"]
    assert summary.to_dict()["rows"][0]["ccc"] == "-"
