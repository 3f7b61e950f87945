from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.aggregator import AttendanceAggregator
from .attendance.service import AttendanceService
from .attendance.store_attendance_repository import StoreAttendanceRepository
from .dashboard.service import DashboardService
from .database.bootstrap import initialize_store
from .database.connection import DatabaseConnection, StoreConfig
from .database.record_store import RecordStore
from .expenses.service import ExpenseService
from .expenses.store_expense_repository import StoreExpenseRepository
from .guards.service import GuardService
from .guards.store_guard_repository import StoreGuardRepository
from .invoices.model import BankDetails, InvoiceCompany
from .invoices.service import InvoiceService
from .invoices.store_invoice_repository import StoreInvoiceRepository
from .payroll.service import PayrollService
from .sites.service import SiteService
from .sites.store_site_repository import StoreSiteRepository


@dataclass(frozen=True)
class Container:
    store: RecordStore

    sites_repo: StoreSiteRepository
    guards_repo: StoreGuardRepository
    attendance_repo: StoreAttendanceRepository
    expenses_repo: StoreExpenseRepository
    invoices_repo: StoreInvoiceRepository

    site_service: SiteService
    guard_service: GuardService
    attendance_service: AttendanceService
    attendance_aggregator: AttendanceAggregator
    expense_service: ExpenseService
    payroll_service: PayrollService
    invoice_service: InvoiceService
    dashboard_service: DashboardService


def build_container(
    *,
    store_path: str,
    seed_demo: bool = True,
    company: Optional[dict] = None,
    bank_details: Optional[dict] = None,
) -> Container:
    store = RecordStore(DatabaseConnection(StoreConfig(path=store_path)))
    initialize_store(store, seed_demo=seed_demo)

    sites_repo = StoreSiteRepository(store)
    guards_repo = StoreGuardRepository(store)
    attendance_repo = StoreAttendanceRepository(store)
    expenses_repo = StoreExpenseRepository(store)
    invoices_repo = StoreInvoiceRepository(store)

    aggregator = AttendanceAggregator(attendance_repo)

    site_service = SiteService(sites_repo)
    guard_service = GuardService(guards_repo, sites_repo)
    attendance_service = AttendanceService(attendance_repo, guards_repo)
    expense_service = ExpenseService(expenses_repo)
    payroll_service = PayrollService(guards_repo, aggregator, expenses_repo)
    invoice_service = InvoiceService(
        invoices_repo,
        company=InvoiceCompany.from_dict(company or {}),
        bank_details=BankDetails.from_dict(bank_details or {}),
    )
    dashboard_service = DashboardService(guards_repo, sites_repo, aggregator, expenses_repo)

    return Container(
        store=store,
        sites_repo=sites_repo,
        guards_repo=guards_repo,
        attendance_repo=attendance_repo,
        expenses_repo=expenses_repo,
        invoices_repo=invoices_repo,
        site_service=site_service,
        guard_service=guard_service,
        attendance_service=attendance_service,
        attendance_aggregator=aggregator,
        expense_service=expense_service,
        payroll_service=payroll_service,
        invoice_service=invoice_service,
        dashboard_service=dashboard_service,
    )
