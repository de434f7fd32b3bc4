"""Assorted utility helpers."""
import re


def format_price(cents, currency="$"):
    """Format an amount in minor units (cents) for display."""
    try:
        value = int(cents)
    except (TypeError, ValueError):
        value = 0
    sign = "-" if value < 0 else ""
    return f"{sign}{currency}{abs(value) / 100:,.2f}"


def truncate(text, length):
    if len(text) <= length:
        return text
    return text[:length] + "..."


def slugify(text):
    text = re.sub(r"[^\w\s-]", "", text.lower().strip())
    text = re.sub(r"[\s_-]+", "-", text)
    return text.strip("-")
