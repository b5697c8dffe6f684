from __future__ import annotations

from datetime import date

import pytest

from ngo_attendance.participants.model import Participant
from ngo_attendance.reports.service import ReportService, percent
from ngo_attendance.sessions.model import Session


def make_session(attendance=None, **overrides) -> Session:
    fields = {
        "id": "s1",
        "name": "Weekly  youth meetup",
        "date": date(2026, 5, 2),
        "start_time": "09:00",
        "end_time": "10:00",
        "location": "Room 4",
        "attendance": attendance or {},
    }
    fields.update(overrides)
    return Session(**fields)


def test_present_and_absent_sections():
    participants = [Participant(id="1", name="Ann"), Participant(id="2", name="Bo")]
    session = make_session({"1": True})

    report = ReportService().render(session, participants)

    assert "Present (1)\n- Ann" in report
    assert "Absent (1)\n- Bo" in report
    assert "Attendance Rate: 50.0%" in report


def test_full_template():
    participants = [
        Participant(id="1", name="Ann", email="ann@example.org", phone="555-0100"),
        Participant(id="2", name="Bo", phone="555-0101"),
        Participant(id="3", name="Cy", email="cy@example.org"),
    ]
    session = make_session({"1": True, "2": False}, description="Bring snacks")

    report = ReportService().render(session, participants)

    assert report == (
        "NGO ATTENDANCE REPORT\n"
        "=====================\n"
        "\n"
        "Session: Weekly  youth meetup\n"
        "Date: 2026-05-02\n"
        "Time: 09:00 - 10:00\n"
        "Location: Room 4\n"
        "Description: Bring snacks\n"
        "\n"
        "ATTENDANCE SUMMARY\n"
        "------------------\n"
        "Total Participants: 3\n"
        "Present: 1\n"
        "Absent: 2\n"
        "Attendance Rate: 33.3%\n"
        "\n"
        "Present (1)\n"
        "- Ann (ann@example.org) - 555-0100\n"
        "\n"
        "Absent (2)\n"
        "- Bo - 555-0101\n"
        "- Cy (cy@example.org)"
    )


def test_no_description_leaves_blank_line():
    report = ReportService().render(make_session(), [Participant(id="1", name="Ann")])

    assert "Location: Room 4\n\n\nATTENDANCE SUMMARY" in report
    assert "Description:" not in report


def test_zero_participants_rate_is_zero():
    svc = ReportService()
    session = make_session({"ghost": True})

    summary = svc.summarize(session, [])
    report = svc.render(session, [])

    assert summary.rate == 0
    assert "Attendance Rate: 0%" in report
    assert report.endswith("Absent (0)")


def test_dangling_attendance_entries_are_not_counted():
    participants = [Participant(id="2", name="Bo")]
    session = make_session({"1": True, "2": True})

    summary = ReportService().summarize(session, participants)

    assert summary.present_count == 1
    assert summary.absent_count == 0
    assert summary.rate == 100.0


def test_explicit_false_counts_as_absent():
    participants = [Participant(id="1", name="Ann"), Participant(id="2", name="Bo")]
    summary = ReportService().summarize(make_session({"1": False}), participants)

    assert summary.present == ()
    assert [p.name for p in summary.absent] == ["Ann", "Bo"]
    assert summary.rate == 0.0


def test_rate_rounds_to_one_decimal():
    participants = [Participant(id=str(i), name=f"P{i}") for i in range(3)]
    summary = ReportService().summarize(make_session({"0": True, "1": True}), participants)

    assert summary.rate == 66.7


def test_filename_collapses_whitespace():
    assert ReportService().filename(make_session()) == "attendance-Weekly-youth-meetup-2026-05-02.txt"


def test_rate_rounds_half_up_in_report():
    participants = [Participant(id=str(i), name=f"P{i}") for i in range(16)]
    svc = ReportService()
    session = make_session({"0": True})

    assert svc.summarize(session, participants).rate == 6.3
    assert "Attendance Rate: 6.3%" in svc.render(session, participants)


@pytest.mark.parametrize(
    "part, whole, places, expected",
    [
        (1, 8, 0, 13.0),
        (1, 16, 1, 6.3),
        (1, 3, 1, 33.3),
        (3, 8, 0, 38.0),
        (0, 0, 1, 0.0),
    ],
)
def test_percent_rounds_halves_up(part, whole, places, expected):
    assert percent(part, whole, places=places) == expected
