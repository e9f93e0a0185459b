# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'app' folder as the CigarMap backend and records its name and version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version and package metadata
# for the CigarMap FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)

"""
CigarMap Application - Cigar Lounge Directory

Backend API for finding cigar lounges by city, onboarding lounge owners,
the owner dashboard, the admin back-office and subscription billing.
"""

__version__ = "1.0.0"
__title__ = "CigarMap Backend API"
__description__ = "Cigar lounge directory with owner onboarding"
__author__ = "CigarMap Team"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
]
