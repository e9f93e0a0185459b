# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation): 
# This file marks the api folder as a Python package so the app can find its web endpoints and request layers.
# 🧪 Purpose (Technical Summary): 
# Package initialization for the API layer with version constants.
# 🔗 Dependencies: 
# None
# 🔄 Connected Modules / Calls From: 
# app.main.py

API_PREFIX = "/api"
CURRENT_VERSION = "v1"
SUPPORTED_VERSIONS = ["v1"]

DEFAULT_HEADERS = {
    "X-API-Version": CURRENT_VERSION,
    "X-App-Name": "CigarMap",
}
