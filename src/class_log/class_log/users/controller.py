from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import pick
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="welcome")
    def welcome():
        return jsonify({"message": "Bem-vindo à API"}), 200

    @app.route("/schedule", methods=["GET"], endpoint="schedule")
    def schedule():
        email = pick(request.args, "email", "owner_email", "ownerEmail")
        entries = container.identity_service.get_schedule(email)
        return jsonify([e.to_dict() for e in entries]), 200
