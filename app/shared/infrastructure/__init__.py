"""
Infrastructure layer package for CigarMap.
Provides database connections and Supabase-backed object storage.
"""
