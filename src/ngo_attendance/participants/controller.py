from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, form_data, json_ok
from ..container import Container
from .model import Participant


def participant_to_json(p: Participant) -> dict:
    return {"id": p.id, "name": p.name, "email": p.email, "phone": p.phone}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/participants", methods=["GET"], endpoint="participants_list")
    def participants_list():
        participants = container.participant_service.list()
        return jsonify({"success": True, "participants": [participant_to_json(p) for p in participants]})

    @app.route("/api/participants", methods=["POST"], endpoint="participants_add")
    @api_errors("System error while adding participant")
    def participants_add():
        data = form_data()
        p = container.participant_service.add(
            data.get("name", ""),
            email=data.get("email"),
            phone=data.get("phone"),
        )
        return json_ok(container.warnings, "Participant added", 201, participant=participant_to_json(p))

    @app.route("/api/participants/<participant_id>", methods=["PUT"], endpoint="participants_update")
    @api_errors("System error while updating participant")
    def participants_update(participant_id: str):
        data = form_data()
        p = container.participant_service.update(
            participant_id,
            data.get("name", ""),
            email=data.get("email"),
            phone=data.get("phone"),
        )
        return json_ok(container.warnings, "Participant updated", participant=participant_to_json(p))

    @app.route("/api/participants/<participant_id>", methods=["DELETE"], endpoint="participants_delete")
    @api_errors("System error while deleting participant")
    def participants_delete(participant_id: str):
        container.participant_service.remove(participant_id)
        return json_ok(container.warnings, "Participant deleted")
