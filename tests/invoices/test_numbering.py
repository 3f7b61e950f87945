import random
import re
from datetime import date, datetime

from guard_manager.invoices.formatting import format_inr
from guard_manager.invoices.numbering import fiscal_year, generate_invoice_number


def test_fiscal_year_before_april_belongs_to_previous_year():
    assert fiscal_year(date(2025, 3, 31)) == "2024-25"
    assert fiscal_year(date(2025, 1, 1)) == "2024-25"


def test_fiscal_year_from_april_starts_new_year():
    assert fiscal_year(date(2025, 4, 1)) == "2025-26"
    assert fiscal_year(datetime(2025, 12, 31, 23, 59)) == "2025-26"


def test_fiscal_year_suffix_is_zero_padded():
    assert fiscal_year(date(2099, 4, 1)) == "2099-00"
    assert fiscal_year(date(2008, 6, 1)) == "2008-09"


def test_invoice_number_format():
    rng = random.Random(7)
    for _ in range(50):
        number = generate_invoice_number(date(2025, 5, 2), rng)
        m = re.fullmatch(r"INV/2025-26/(\d{4})", number)
        assert m
        assert 1000 <= int(m.group(1)) <= 9999


def test_format_inr_uses_lakh_grouping():
    assert format_inr(0) == "0.00"
    assert format_inr(999) == "999.00"
    assert format_inr(100000) == "1,00,000.00"
    assert format_inr(1234567.5) == "12,34,567.50"
    assert format_inr(-25000) == "-25,000.00"
