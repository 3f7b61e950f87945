from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_iso
from ..container import Container
from ..core.enums import Shift
from ..core.exceptions import ValidationError
from .model import AttendanceRecord


def _shift(value) -> Shift:
    try:
        return Shift(value)
    except ValueError:
        raise ValidationError("Shift must be morning, evening or night") from None


def _record(data: dict) -> AttendanceRecord:
    try:
        return AttendanceRecord.from_dict({"id": "", **data})
    except (AttributeError, KeyError, TypeError, ValueError):
        raise ValidationError("Malformed attendance record") from None


def register(app: Flask, container: Container) -> None:
    svc = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_sheet")
    def attendance_sheet():
        date = request.args.get("date") or today_iso()
        site_id = request.args.get("site_id", "")
        if not site_id:
            raise ValidationError("Select a site")
        rows = svc.sheet_for(date, site_id)
        return jsonify({"success": True, "date": date, "site_id": site_id, "records": [r.to_dict() for r in rows]})

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_save")
    def attendance_save():
        record = svc.save_record(_record(request.get_json(silent=True) or {}))
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/attendance/cycle", methods=["POST"], endpoint="attendance_cycle")
    def attendance_cycle():
        data = request.get_json(silent=True) or {}
        record = svc.cycle_shift(data.get("guard_id", ""), data.get("date", ""), _shift(data.get("shift")))
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/attendance/food", methods=["POST"], endpoint="attendance_food")
    def attendance_food():
        data = request.get_json(silent=True) or {}
        record = svc.toggle_food(data.get("guard_id", ""), data.get("date", ""), _shift(data.get("shift")))
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/attendance/overtime", methods=["POST"], endpoint="attendance_overtime")
    def attendance_overtime():
        data = request.get_json(silent=True) or {}
        record = svc.set_overtime(data.get("guard_id", ""), data.get("date", ""), data.get("hours", 0))
        return jsonify({"success": True, "record": record.to_dict()})
