from __future__ import annotations

from flask import Flask, jsonify
from flask import session as user_session

from ..common.http import api_errors, form_data, json_ok
from ..container import Container
from ..core.constants import DEFAULT_END_TIME, DEFAULT_START_TIME
from ..core.exceptions import NotFoundError
from ..participants.controller import participant_to_json
from ..reports.service import percent
from .model import Session

OPEN_SESSION_KEY = "open_session_id"


def session_to_json(s: Session) -> dict:
    return {
        "id": s.id,
        "name": s.name,
        "date": s.date.isoformat(),
        "start_time": s.start_time,
        "end_time": s.end_time,
        "location": s.location,
        "description": s.description,
        "attendance": dict(s.attendance),
    }


def register(app: Flask, container: Container) -> None:
    def _session_fields(data: dict) -> dict:
        return {
            "name": data.get("name", ""),
            "date": data.get("date", ""),
            "start_time": data.get("start_time") or DEFAULT_START_TIME,
            "end_time": data.get("end_time") or DEFAULT_END_TIME,
            "location": data.get("location", ""),
            "description": data.get("description"),
        }

    @app.route("/api/sessions", methods=["GET"], endpoint="sessions_list")
    def sessions_list():
        participants = container.participant_service.list()
        out = []
        for s in container.session_service.list():
            summary = container.report_service.summarize(s, participants)
            out.append(
                {
                    **session_to_json(s),
                    "present_count": summary.present_count,
                    "total_count": summary.total,
                    # Cards show a whole percentage; the report keeps one decimal.
                    "attendance_rate": int(percent(summary.present_count, summary.total, places=0)),
                }
            )
        return jsonify({"success": True, "sessions": out, "open_session_id": user_session.get(OPEN_SESSION_KEY)})

    @app.route("/api/sessions", methods=["POST"], endpoint="sessions_add")
    @api_errors("System error while adding session")
    def sessions_add():
        s = container.session_service.add(**_session_fields(form_data()))
        return json_ok(container.warnings, "Session added", 201, session=session_to_json(s))

    @app.route("/api/sessions/<session_id>", methods=["PUT"], endpoint="sessions_update")
    @api_errors("System error while updating session")
    def sessions_update(session_id: str):
        s = container.session_service.update(session_id, **_session_fields(form_data()))
        return json_ok(container.warnings, "Session updated", session=session_to_json(s))

    @app.route("/api/sessions/<session_id>", methods=["DELETE"], endpoint="sessions_delete")
    @api_errors("System error while deleting session")
    def sessions_delete(session_id: str):
        container.session_service.remove(session_id)
        if user_session.get(OPEN_SESSION_KEY) == session_id:
            user_session.pop(OPEN_SESSION_KEY, None)
        return json_ok(container.warnings, "Session deleted")

    @app.route("/api/sessions/<session_id>/open", methods=["POST"], endpoint="attendance_open")
    @api_errors("System error while opening attendance")
    def attendance_open(session_id: str):
        s = container.session_service.get(session_id)
        user_session[OPEN_SESSION_KEY] = s.id
        return json_ok(container.warnings, "Attendance opened", session=session_to_json(s))

    @app.route("/api/attendance/close", methods=["POST"], endpoint="attendance_close")
    def attendance_close():
        user_session.pop(OPEN_SESSION_KEY, None)
        return jsonify({"success": True, "message": "Attendance closed"})

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_sheet")
    @api_errors("System error while loading attendance")
    def attendance_sheet():
        session_id = user_session.get(OPEN_SESSION_KEY)
        if not session_id:
            return jsonify({"success": True, "session": None, "participants": []})

        try:
            s = container.session_service.get(session_id)
        except NotFoundError:
            user_session.pop(OPEN_SESSION_KEY, None)
            raise

        rows = [
            {**participant_to_json(p), "present": s.is_present(p.id)}
            for p in container.participant_service.list()
        ]
        return jsonify({"success": True, "session": session_to_json(s), "participants": rows})

    @app.route(
        "/api/sessions/<session_id>/attendance/<participant_id>",
        methods=["POST"],
        endpoint="attendance_toggle",
    )
    @api_errors("System error while marking attendance")
    def attendance_toggle(session_id: str, participant_id: str):
        present = container.session_service.toggle_attendance(session_id, participant_id)
        return json_ok(container.warnings, "Attendance updated", participant_id=participant_id, present=present)

    @app.route("/api/sessions/<session_id>/report.txt", methods=["GET"], endpoint="session_report")
    @api_errors("System error while exporting report")
    def session_report(session_id: str):
        s = container.session_service.get(session_id)
        text = container.report_service.render(s, container.participant_service.list())
        filename = container.report_service.filename(s)
        return app.response_class(
            text.encode("utf-8"),
            mimetype="text/plain",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
