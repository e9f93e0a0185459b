# 📄 File: app/shared/infrastructure/storage/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Sets up the file storage system that keeps owner avatars, lounge covers and
# gallery photos in Supabase Storage.
#
# 🧪 Purpose (Technical Summary):
# Exports the Object Store abstraction, its Supabase implementation and the
# storage path helpers.
#
# 🔗 Dependencies:
# - app/shared/infrastructure/storage/supabase_storage.py
#
# 🔄 Connected Modules / Calls From:
# - Onboarding submission service and its FastAPI dependencies

"""
Storage Infrastructure Package

Storage Organization:
- profiles bucket: avatars/{user_id}/{timestamp_ms}-{filename}
- businesses bucket: covers/{user_id}/... and images/{user_id}/...
"""

from .supabase_storage import (
    ObjectStore,
    STORAGE_CATEGORIES,
    SupabaseObjectStore,
    bucket_for_category,
    build_storage_path,
    validate_image_file,
    get_object_store,
)

__all__ = [
    "ObjectStore",
    "STORAGE_CATEGORIES",
    "SupabaseObjectStore",
    "bucket_for_category",
    "build_storage_path",
    "validate_image_file",
    "get_object_store",
]
