import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Single-file local store
STORE_PATH = os.getenv("STORE_PATH", "instance/guard_manager.sqlite3")

DEBUG = True

# Insert demo sites/guards the first time a store file is initialized
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

# Letterhead and bank defaults for new invoices
COMPANY = {
    "name": os.getenv("COMPANY_NAME", ""),
    "address": os.getenv("COMPANY_ADDRESS", ""),
    "phone": os.getenv("COMPANY_PHONE", ""),
    "email": os.getenv("COMPANY_EMAIL", ""),
    "tax_id": os.getenv("COMPANY_TAX_ID", ""),
}
BANK_DETAILS = {
    "bank_name": os.getenv("BANK_NAME", ""),
    "account_name": os.getenv("BANK_ACCOUNT_NAME", ""),
    "account_number": os.getenv("BANK_ACCOUNT_NUMBER", ""),
    "ifsc": os.getenv("BANK_IFSC", ""),
}
