# 📄 File: app/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# This file contains checks that make sure data is correct before it is stored,
# like making sure a city's web address part ("slug") only uses safe characters.
# 🧪 Purpose (Technical Summary):
# Reusable validation functions returning ValidationResult objects, shared by
# pydantic schemas and domain services for slugs and website URLs.
# 🔗 Dependencies:
# re, typing, urllib.parse
# 🔄 Connected Modules / Calls From:
# Directory schemas and services

import re
from typing import List, Optional
from urllib.parse import urlparse

SLUG_PATTERN = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')
SLUG_MAX_LENGTH = 80


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool, errors: List[str] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: str):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False


def validate_slug(slug: Optional[str]) -> ValidationResult:
    """
    Validate that a slug is URL-safe.

    A slug is lowercase ASCII letters and digits in groups separated by single hyphens.
    """
    result = ValidationResult(True)

    if not slug:
        result.add_error("Slug is required")
        return result

    if len(slug) > SLUG_MAX_LENGTH:
        result.add_error(f"Slug must be at most {SLUG_MAX_LENGTH} characters")

    if not SLUG_PATTERN.match(slug):
        result.add_error("Slug may only contain lowercase letters, digits and single hyphens")

    return result


def validate_website(url: Optional[str]) -> ValidationResult:
    """Validate an optional website URL; blank values are accepted."""
    result = ValidationResult(True)
    if not url:
        return result

    parsed = urlparse(url if "://" in url else f"https://{url}")
    if parsed.scheme not in ("http", "https") or not parsed.netloc or "." not in parsed.netloc:
        result.add_error("Website must be a valid http(s) URL")
    return result
