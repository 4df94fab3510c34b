from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="api_settings_get")
    @json_endpoint
    def api_settings_get():
        return jsonify({"success": True, "settings": container.settings_service.get().to_dict()})

    @app.route("/api/settings", methods=["PUT"], endpoint="api_settings_save")
    @json_endpoint
    def api_settings_save():
        data = json_body()
        settings = container.settings_service.save(
            rate=data.get("rate"),
            rate_over=data.get("rate_over"),
            rate_weekend=data.get("rate_weekend"),
            threshold=data.get("threshold"),
        )
        return jsonify({"success": True, "settings": settings.to_dict(), "message": "Settings saved"})
