"""Guard Manager package.

Offline record-keeper for a security-guard staffing business, organized by
feature modules (sites, guards, attendance, expenses, payroll, invoices) with a
thin Flask controller layer over service/repository layers.
"""
