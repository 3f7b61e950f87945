import pytest

from guard_manager.invoices.words import amount_to_words


@pytest.mark.parametrize(
    "amount, words",
    [
        (0, "Zero Rupees Only"),
        (7, "Seven Rupees Only"),
        (15, "Fifteen Rupees Only"),
        (40, "Forty Rupees Only"),
        (100, "One Hundred Rupees Only"),
        (1000, "One Thousand Rupees Only"),
        (100000, "One Lakh Rupees Only"),
        (1234567, "Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven Rupees Only"),
        (10000000, "One Crore Rupees Only"),
        (20500019, "Two Crore Five Lakh Nineteen Rupees Only"),
    ],
)
def test_amount_to_words_indian_grouping(amount, words):
    assert amount_to_words(amount) == words


def test_paise_are_dropped():
    assert amount_to_words(1999.99) == "One Thousand Nine Hundred Ninety Nine Rupees Only"
    assert amount_to_words(0.75) == "Zero Rupees Only"


def test_thousand_crore_and_above_still_reads():
    assert amount_to_words(12_340_000_000) == "One Thousand Two Hundred Thirty Four Crore Rupees Only"


def test_negative_amount_is_refused():
    with pytest.raises(ValueError):
        amount_to_words(-1)
