SECRET_KEY = "test-secret"

STORE_PATH = ":memory:"

DEBUG = False
TESTING = True

SEED_DEMO_DATA = True

COMPANY = {"name": "Test Security Services", "address": "", "phone": "", "email": "", "tax_id": ""}
BANK_DETAILS = {"bank_name": "", "account_name": "", "account_number": "", "ifsc": ""}
