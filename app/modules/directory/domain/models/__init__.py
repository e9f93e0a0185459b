# 📄 File: app/modules/directory/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the directory data models: cities and the lounges listed in them.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting City, Lounge and their enumerations.
# 🔗 Dependencies:
# city.py, lounge.py
# 🔄 Connected Modules / Calls From:
# Directory repositories, services and APIs; onboarding business persistence; billing overview

from .city import City
from .lounge import (
    OWNER_EDITABLE_FIELDS,
    Amenity,
    Lounge,
    LoungeStatus,
    LoungeType,
    SubscriptionStatus,
)

__all__ = [
    "OWNER_EDITABLE_FIELDS",
    "Amenity",
    "City",
    "Lounge",
    "LoungeStatus",
    "LoungeType",
    "SubscriptionStatus",
]
