from core.utils import format_price, slugify, truncate


def test_format_price():
    assert format_price(1250) == "$12.50"
    assert format_price(0) == "$0.00"
    assert format_price(123456) == "$1,234.56"
    assert format_price(-50) == "-$0.50"
    assert format_price(None) == "$0.00"
    assert format_price(300, currency="€") == "€3.00"


def test_slugify_and_truncate():
    assert slugify("  The Blue Bar!  ") == "the-blue-bar"
    assert truncate("Malbec Reserva", 6) == "Malbec..."
    assert truncate("IPA", 6) == "IPA"
