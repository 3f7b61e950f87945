from __future__ import annotations

from dataclasses import replace

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import GuardStatus
from ..core.exceptions import NotFoundError, ValidationError

_EDITABLE = (
    "name",
    "code",
    "phone",
    "national_id",
    "site_id",
    "salary_per_shift",
    "food_cost_per_shift",
    "uniform_deduction",
    "joining_date",
    "status",
)


def _status(value) -> GuardStatus:
    try:
        return GuardStatus(value or GuardStatus.ACTIVE.value)
    except ValueError:
        raise ValidationError("Guard status must be Active or Inactive") from None


def register(app: Flask, container: Container) -> None:
    svc = container.guard_service

    @app.route("/api/guards", methods=["GET"], endpoint="guards_list")
    def guards_list():
        rows = [{**row.guard.to_dict(), "site_name": row.site_name} for row in svc.list_with_site_names()]
        return jsonify({"success": True, "guards": rows})

    @app.route("/api/guards", methods=["POST"], endpoint="guards_create")
    def guards_create():
        data = request.get_json(silent=True) or {}
        fields = {k: data[k] for k in _EDITABLE if k in data}
        fields["status"] = _status(fields.get("status"))
        guard = svc.create_guard(**{"name": "", **fields})
        return jsonify({"success": True, "guard": guard.to_dict()}), 201

    @app.route("/api/guards/<guard_id>", methods=["PUT"], endpoint="guards_update")
    def guards_update(guard_id: str):
        current = svc.get(guard_id)
        if not current:
            raise NotFoundError("Guard not found")
        data = request.get_json(silent=True) or {}
        fields = {k: data[k] for k in _EDITABLE if k in data}
        if "status" in fields:
            fields["status"] = _status(fields["status"])
        guard = svc.update_guard(replace(current, **fields))
        return jsonify({"success": True, "guard": guard.to_dict()})

    @app.route("/api/guards/<guard_id>", methods=["DELETE"], endpoint="guards_delete")
    def guards_delete(guard_id: str):
        svc.delete_guard(guard_id)
        return jsonify({"success": True})
