from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from .export import salary_report_csv


def register(app: Flask, container: Container) -> None:
    svc = container.payroll_service

    @app.route("/api/payroll/<month>", methods=["GET"], endpoint="payroll_report")
    def payroll_report(month: str):
        report = svc.salary_report(month)
        return jsonify(
            {
                "success": True,
                "month": report.month,
                "slips": [s.to_dict() for s in report.slips],
                "totals": report.totals.to_dict(),
            }
        )

    @app.route("/api/payroll/<month>/export.csv", methods=["GET"], endpoint="payroll_export")
    def payroll_export(month: str):
        report = svc.salary_report(month)
        return app.response_class(
            salary_report_csv(report),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=salary_{report.month}.csv"},
        )
