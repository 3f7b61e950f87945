"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SITES_KEY = "gmp_sites"
GUARDS_KEY = "gmp_guards"
ATTENDANCE_KEY = "gmp_attendance"
EXPENSES_KEY = "gmp_expenses"
INVOICES_KEY = "gmp_invoices"
INIT_KEY = "gmp_init"

COLLECTION_KEYS = (SITES_KEY, GUARDS_KEY, ATTENDANCE_KEY, EXPENSES_KEY, INVOICES_KEY)

SCHEMA_VERSION = 1

UNASSIGNED_SITE = "Unassigned"
UNKNOWN_GUARD = "Unknown"

MAX_OVERTIME_HOURS = 12

DEFAULT_LINE_DESCRIPTION = "Security Guard"
DEFAULT_LINE_GUARDS = 1
DEFAULT_LINE_DAYS = 26
DEFAULT_LINE_RATE = 0

INVOICE_NUMBER_MIN = 1000
INVOICE_NUMBER_MAX = 9999
