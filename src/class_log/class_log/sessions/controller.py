from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import pick, require_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/sessions/open", methods=["POST"], endpoint="open_session")
    def open_session():
        data = require_object(request.get_json(silent=True) or {})
        session = container.session_service.open_session(
            owner_email=pick(data, "owner_email", "ownerEmail", "email"),
            activity_id=pick(data, "activity_id", "activityId", "aula_id"),
            subject=pick(data, "subject", "subject_name", "disciplina"),
            weekday=pick(data, "weekday", "dia"),
            date=pick(data, "date", "data"),
            start_time=pick(data, "start_time", "startTime", "horario_inicio"),
        )
        return jsonify({"session_key": session.session_key}), 201

    @app.route("/sessions/close", methods=["PUT"], endpoint="close_session")
    def close_session():
        data = require_object(request.get_json(silent=True) or {})
        session = container.session_service.close_session(
            owner_email=pick(data, "owner_email", "ownerEmail", "email"),
            activity_id=pick(data, "activity_id", "activityId", "aula_id"),
            end_time=pick(data, "end_time", "endTime", "horario_fim"),
            date=pick(data, "date", "data"),
            status=pick(data, "status"),
        )
        return jsonify({"session": session.to_dict()}), 200

    @app.route("/sessions/open", methods=["GET"], endpoint="list_open_sessions")
    def list_open_sessions():
        owner_email = pick(request.args, "owner_email", "ownerEmail", "email")
        sessions = container.session_service.list_open(owner_email)
        return jsonify([s.to_dict() for s in sessions]), 200
