# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation): 
# Organizes everything about the people using CigarMap: who is signed in, their profile, whether they are an admin, and the diary of what they did
# 🧪 Purpose (Technical Summary): 
# Package initialization for the user management module: Supabase-backed identity, profiles with roles and onboarding completion, and the activity audit trail
# 🔗 Dependencies: 
# FastAPI, SQLAlchemy, app.shared.core, pydantic, supabase, python-jose
# 🔄 Connected Modules / Calls From: 
# app.api.v1.router, onboarding, directory, billing and admin modules

"""
User Management Module

This module handles:
- Resolving the signed-in identity from a Supabase bearer token
- Profile reads, onboarding status and admin profile edits
- The append-only activity log used by every audited mutation

Architecture follows Domain-Driven Design:
- Domain: Profile and ActivityLog entities, repositories, services
- Infrastructure: SQLAlchemy persistence and the Supabase identity gateway
- Presentation: API endpoints and request/response schemas
"""

__version__ = "1.0.0"
__module_name__ = "user_management"
