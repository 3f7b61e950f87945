from __future__ import annotations

import csv
import io

from .model import SalaryReport

SALARY_CSV_FIELDS = [
    "guard_name",
    "total_shifts",
    "gross_salary",
    "total_advance",
    "total_food_cost",
    "uniform_deduction",
    "net_salary",
]


def salary_report_csv(report: SalaryReport) -> bytes:
    """Salary report as CSV with a trailing TOTAL row.

    Encoded utf-8-sig so spreadsheet apps pick up the encoding.
    """
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=SALARY_CSV_FIELDS, extrasaction="ignore")
    writer.writeheader()
    for slip in report.slips:
        writer.writerow(slip.to_dict())
    writer.writerow({"guard_name": "TOTAL", **report.totals.to_dict()})
    return out.getvalue().encode("utf-8-sig")
