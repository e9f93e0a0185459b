# 📄 File: app/modules/billing/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Makes the billing data shapes (plans, subscriptions, payments) available to the rest of the app.
# 🧪 Purpose (Technical Summary):
# Billing domain model exports.
# 🔗 Dependencies:
# plan.py, payment.py
# 🔄 Connected Modules / Calls From:
# Billing repositories, services and APIs

from .payment import Payment, PaymentStatus, Subscription
from .plan import SubscriptionPlan

__all__ = [
    "Payment",
    "PaymentStatus",
    "Subscription",
    "SubscriptionPlan",
]
