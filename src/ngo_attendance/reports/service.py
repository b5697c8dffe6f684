from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from ..core.constants import REPORT_TITLE
from ..participants.model import Participant
from ..sessions.model import Session
from .model import AttendanceSummary

_WHITESPACE = re.compile(r"\s+")


def percent(part: int, whole: int, *, places: int = 1) -> float:
    """Share of `whole` as a percentage, halves rounded up; 0 when `whole` is 0."""
    if not whole:
        return 0.0
    exact = Decimal(part) * 100 / Decimal(whole)
    return float(exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


class ReportService:
    """Attendance summary and plain-text export. Pure; no storage access."""

    def summarize(self, session: Session, participants: Sequence[Participant]) -> AttendanceSummary:
        # Only roster members count; entries for deleted participants are ignored.
        present = tuple(p for p in participants if session.is_present(p.id))
        absent = tuple(p for p in participants if not session.is_present(p.id))
        total = len(participants)
        rate = percent(len(present), total)
        return AttendanceSummary(total=total, present=present, absent=absent, rate=rate)

    def render(self, session: Session, participants: Sequence[Participant]) -> str:
        summary = self.summarize(session, participants)
        rate = f"{summary.rate:.1f}" if summary.total else "0"

        lines = [
            REPORT_TITLE,
            "=" * len(REPORT_TITLE),
            "",
            f"Session: {session.name}",
            f"Date: {session.date.isoformat()}",
            f"Time: {session.start_time} - {session.end_time}",
            f"Location: {session.location}",
            f"Description: {session.description}" if session.description else "",
            "",
            "ATTENDANCE SUMMARY",
            "------------------",
            f"Total Participants: {summary.total}",
            f"Present: {summary.present_count}",
            f"Absent: {summary.absent_count}",
            f"Attendance Rate: {rate}%",
            "",
            f"Present ({summary.present_count})",
            "\n".join(self._line(p) for p in summary.present),
            "",
            f"Absent ({summary.absent_count})",
            "\n".join(self._line(p) for p in summary.absent),
        ]
        return "\n".join(lines).strip()

    def filename(self, session: Session) -> str:
        return f"attendance-{_WHITESPACE.sub('-', session.name)}-{session.date.isoformat()}.txt"

    @staticmethod
    def _line(p: Participant) -> str:
        line = f"- {p.name}"
        if p.email:
            line += f" ({p.email})"
        if p.phone:
            line += f" - {p.phone}"
        return line
