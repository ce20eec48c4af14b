from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, send_file

from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/report", methods=["GET"], endpoint="session_report")
    def session_report():
        try:
            report = container.report_service.build_report()
        except Exception as e:
            logger.exception("Generate report error")
            return jsonify({"message": "Erro ao gerar relatório", "error": str(e)}), 500

        return send_file(
            io.BytesIO(report.content),
            mimetype=report.mimetype,
            as_attachment=True,
            download_name=report.filename,
        )
