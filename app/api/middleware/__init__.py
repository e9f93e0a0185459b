# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the layers every request passes through: the request diary and the friendly error replies.
# 🧪 Purpose (Technical Summary):
# Middleware package initialization with shared path-exclusion configuration.
# 🔗 Dependencies:
# logging.py, error_handling.py
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware and exception handler registration)

from typing import Dict, List

# Paths each middleware skips, matched by prefix
MIDDLEWARE_EXCLUDED_PATHS: Dict[str, List[str]] = {
    "logging": ["/api/v1/health", "/favicon.ico", "/docs", "/redoc", "/openapi.json"],
}


def should_exclude_path(middleware_name: str, path: str) -> bool:
    return any(path.startswith(prefix) for prefix in MIDDLEWARE_EXCLUDED_PATHS.get(middleware_name, []))
