# 📄 File: app/modules/billing/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Exposes the billing logic to the API layer.
# 🧪 Purpose (Technical Summary):
# Billing domain service exports.
# 🔗 Dependencies:
# billing_service.py
# 🔄 Connected Modules / Calls From:
# Billing presentation dependencies and routers

from .billing_service import (
    BillingOverview,
    BillingService,
    LoungeBilling,
    PaymentStats,
    PlanStats,
)

__all__ = ["BillingOverview", "BillingService", "LoungeBilling", "PaymentStats", "PlanStats"]
