"""Currency amounts in words, Indian numbering (Crore, Lakh, Thousand)."""
from __future__ import annotations

import math

ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000


def two_digits(n: int) -> str:
    if n < 20:
        return ONES[n]
    return TENS[n // 10] + (f" {ONES[n % 10]}" if n % 10 else "")


def three_digits(n: int) -> str:
    if n >= 100:
        rest = n % 100
        return f"{ONES[n // 100]} Hundred" + (f" {two_digits(rest)}" if rest else "")
    return two_digits(n)


def amount_to_words(amount: float) -> str:
    """Spell out the whole-rupee part of ``amount``; paise are dropped.

    >>> amount_to_words(1234567)
    'Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven Rupees Only'
    """
    if amount < 0:
        raise ValueError("amount must not be negative")

    n = int(math.floor(amount))
    if n == 0:
        return "Zero Rupees Only"

    parts = []
    crores = n // CRORE
    if crores:
        # Amounts of 1000 crore and above keep counting in crores.
        parts.append(f"{_group(crores)} Crore")
    lakhs = (n % CRORE) // LAKH
    if lakhs:
        parts.append(f"{three_digits(lakhs)} Lakh")
    thousands = (n % LAKH) // THOUSAND
    if thousands:
        parts.append(f"{three_digits(thousands)} Thousand")
    rest = n % THOUSAND
    if rest:
        parts.append(three_digits(rest))

    return " ".join(parts) + " Rupees Only"


def _group(n: int) -> str:
    if n < 1000:
        return three_digits(n)
    # Recurse so a crore count of 1000+ still reads correctly.
    return amount_to_words(n)[: -len(" Rupees Only")]
