# 📄 File: app/modules/billing/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the contracts for reading plans, subscriptions and payments.
# 🧪 Purpose (Technical Summary):
# Exports the abstract repository interfaces of the billing domain.
# 🔗 Dependencies:
# plan_repository.py, payment_repository.py
# 🔄 Connected Modules / Calls From:
# Infrastructure implementations, billing service, FastAPI dependency providers

from .payment_repository import PaymentRepository, SubscriptionRepository
from .plan_repository import PlanRepository

__all__ = ["PaymentRepository", "PlanRepository", "SubscriptionRepository"]
