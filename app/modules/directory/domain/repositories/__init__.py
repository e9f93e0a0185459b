# 📄 File: app/modules/directory/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the contracts for reading and writing cities and lounges.
# 🧪 Purpose (Technical Summary):
# Exports the abstract repository interfaces of the directory domain.
# 🔗 Dependencies:
# city_repository.py, lounge_repository.py
# 🔄 Connected Modules / Calls From:
# Infrastructure implementations, services, FastAPI dependency providers

from .city_repository import CityRepository
from .lounge_repository import LoungeRepository

__all__ = ["CityRepository", "LoungeRepository"]
