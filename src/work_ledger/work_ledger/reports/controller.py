from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.http import json_endpoint, parse_date_arg, parse_int_arg
from ..core.exceptions import ValidationError
from ..container import Container
from .service import CSV_FIELDS, ReportData


def register(app: Flask, container: Container) -> None:
    def _month_args() -> tuple[int, int]:
        today = today_local()
        year = parse_int_arg(request.args.get("year") or str(today.year), field_name="year")
        month = parse_int_arg(request.args.get("month") or str(today.month), field_name="month")
        if not 1 <= month <= 12:
            raise ValidationError("month must be between 1 and 12")
        return year, month

    def _write_report_csv(*, data: ReportData, filename: str):
        """Write report rows to CSV response."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/days/<day>", methods=["GET"], endpoint="api_day")
    @json_endpoint
    def api_day(day: str):
        totals = container.report_service.day(parse_date_arg(day))
        return jsonify({"success": True, "day": totals.to_dict()})

    @app.route("/api/reports/week", methods=["GET"], endpoint="api_report_week")
    @json_endpoint
    def api_report_week():
        anchor_s = request.args.get("date")
        anchor = parse_date_arg(anchor_s) if anchor_s else today_local()
        report = container.report_service.week_report(anchor)
        return jsonify({"success": True, "report": report.to_dict()})

    @app.route("/api/reports/month", methods=["GET"], endpoint="api_report_month")
    @json_endpoint
    def api_report_month():
        year, month = _month_args()
        report = container.report_service.month_report(year, month)
        return jsonify({"success": True, "report": report.to_dict()})

    @app.route("/api/reports/month.csv", methods=["GET"], endpoint="api_report_month_csv")
    @json_endpoint
    def api_report_month_csv():
        year, month = _month_args()
        report = container.report_service.month_report(year, month)
        filename = f"worklog_{year}{month:02d}.csv"
        return _write_report_csv(data=report, filename=filename)
