from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import ExpenseType


def register(app: Flask, container: Container) -> None:
    svc = container.expense_service
    guards = container.guard_service

    @app.route("/api/expenses", methods=["GET"], endpoint="expenses_list")
    def expenses_list():
        rows = [{**e.to_dict(), "guard_name": guards.guard_name(e.guard_id)} for e in svc.list_expenses()]
        return jsonify({"success": True, "expenses": rows})

    @app.route("/api/expenses", methods=["POST"], endpoint="expenses_create")
    def expenses_create():
        data = request.get_json(silent=True) or {}
        expense = svc.record_expense(
            guard_id=data.get("guard_id", ""),
            amount=data.get("amount"),
            date=data.get("date"),
            reason=data.get("reason", ""),
            type=data.get("type") or ExpenseType.ADVANCE.value,
        )
        return jsonify({"success": True, "expense": expense.to_dict()}), 201

    @app.route("/api/expenses/<expense_id>", methods=["DELETE"], endpoint="expenses_delete")
    def expenses_delete(expense_id: str):
        svc.delete_expense(expense_id)
        return jsonify({"success": True})
