from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, json_endpoint, parse_date_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/entries", methods=["GET"], endpoint="api_entries_list")
    @json_endpoint
    def api_entries_list():
        start = request.args.get("start")
        end = request.args.get("end")
        if start and end:
            entries = container.entry_service.list_range(
                start=parse_date_arg(start, field_name="start"),
                end=parse_date_arg(end, field_name="end"),
            )
        else:
            entries = container.entry_service.list_all()
        return jsonify({"success": True, "entries": [e.to_dict() for e in entries]})

    @app.route("/api/entries", methods=["POST"], endpoint="api_entries_create")
    @json_endpoint
    def api_entries_create():
        data = json_body()
        entry_id = container.entry_service.log_entry(
            work_date=data.get("date"),
            hours=data.get("hours"),
            activity=data.get("activity"),
        )
        return jsonify({"success": True, "entry_id": entry_id, "message": "Entry added"}), 201

    @app.route("/api/entries/today-8h", methods=["POST"], endpoint="api_entries_today_8h")
    @json_endpoint
    def api_entries_today_8h():
        entry_id = container.entry_service.log_standard_day()
        return jsonify({"success": True, "entry_id": entry_id, "message": "8h added for today"}), 201

    @app.route("/api/entries/<entry_id>", methods=["PATCH"], endpoint="api_entries_update")
    @json_endpoint
    def api_entries_update(entry_id: str):
        data = json_body()
        entry = container.entry_service.update(
            entry_id,
            hours=data.get("hours"),
            activity=data.get("activity"),
            rate=data.get("rate"),
            rate_over=data.get("rate_over"),
            rate_weekend=data.get("rate_weekend"),
        )
        return jsonify({"success": True, "entry": entry.to_dict()})

    @app.route("/api/entries/<entry_id>", methods=["DELETE"], endpoint="api_entries_delete")
    @json_endpoint
    def api_entries_delete(entry_id: str):
        container.entry_service.delete(entry_id)
        return jsonify({"success": True, "message": "Entry deleted"})
