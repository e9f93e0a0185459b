# 📄 File: app/shared/utils/formatters.py

# 🧭 Purpose (Layman Explanation):
# This file provides formatting tools that make data look nice and consistent,
# like turning plan prices stored in cents into "$29.99" and city names into URL slugs.

# 🧪 Purpose (Technical Summary):
# Data formatting utilities for currency amounts held as integer cents and URL slugs

# 🔗 Dependencies:
# - decimal: Precise decimal formatting
# - re: Regular expression utilities

# 🔄 Connected Modules / Calls From:
# Used by: billing and admin API schemas, plan model, directory city management

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

DEFAULT_CURRENCY = "USD"

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "CA$",
}


def cents_to_decimal(amount_cents: int) -> Decimal:
    """Convert an integer amount of cents to a two-place Decimal."""
    return (Decimal(amount_cents) / Decimal(100)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_price(amount_cents: Optional[int], currency: str = DEFAULT_CURRENCY) -> str:
    """
    Format a price stored in cents for display.

    Args:
        amount_cents: Amount in cents, ``None`` renders as zero
        currency: ISO currency code

    Returns:
        Formatted currency string, e.g. ``$29.99``
    """
    value = cents_to_decimal(amount_cents or 0)
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def generate_slug(text: str, max_length: int = 80) -> str:
    """
    Generate URL-friendly slug from text.

    Args:
        text: Text to convert to slug
        max_length: Maximum slug length

    Returns:
        URL-friendly slug (lowercase ASCII words joined by single hyphens)
    """
    if not text:
        return ""

    slug = text.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"[-\s]+", "-", slug)
    slug = slug.strip("-")

    if len(slug) > max_length:
        slug = slug[:max_length].rstrip("-")

    return slug
