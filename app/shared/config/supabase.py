"""
Supabase client configuration for authentication and storage services.
Handles Supabase initialization with proper error handling and connection management.
"""

import logging
from typing import Optional
from functools import lru_cache

from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions

from .settings import get_settings


logger = logging.getLogger(__name__)


class SupabaseManager:
    """
    Supabase client manager with lazy connection handling.

    Two clients are kept: an anon-key client used for auth calls made on behalf of
    the signed-in user, and a service-role client used for server-side storage writes.
    """

    def __init__(self):
        self._client: Optional[Client] = None
        self._service_client: Optional[Client] = None
        self.settings = get_settings()

    @property
    def client(self) -> Client:
        """Get or create the anon-key Supabase client with lazy initialization."""
        if self._client is None:
            self._client = self._create_client(self.settings.SUPABASE_ANON_KEY)
        return self._client

    @property
    def service_client(self) -> Client:
        """Get or create the service-role Supabase client."""
        if self._service_client is None:
            self._service_client = self._create_client(self.settings.SUPABASE_SERVICE_ROLE_KEY)
        return self._service_client

    def _create_client(self, key: str) -> Client:
        """Create Supabase client with proper configuration."""
        try:
            client_options = ClientOptions(
                schema="public",
                headers={
                    "User-Agent": f"CigarMap/{self.settings.APP_VERSION}",
                },
                auto_refresh_token=False,
                persist_session=False,
            )

            client = create_client(
                supabase_url=self.settings.SUPABASE_URL,
                supabase_key=key,
                options=client_options
            )

            logger.info("Supabase client initialized successfully")
            return client

        except Exception as e:
            logger.error(f"Failed to initialize Supabase client: {e}")
            raise ConnectionError(f"Supabase initialization failed: {e}")

    def get_auth_client(self):
        """Get Supabase auth client for authentication operations."""
        return self.client.auth

    def get_storage_client(self, bucket_name: str):
        """
        Get Supabase storage client for file operations.

        Args:
            bucket_name: Storage bucket name ('profiles' or 'businesses')
        """
        return self.service_client.storage.from_(bucket_name)

    def close(self):
        """Drop cached Supabase clients."""
        if self._client or self._service_client:
            self._client = None
            self._service_client = None
            logger.info("Supabase client connections closed")


@lru_cache()
def get_supabase_manager() -> SupabaseManager:
    """
    Get cached Supabase manager instance.

    Returns:
        SupabaseManager: Singleton Supabase manager
    """
    return SupabaseManager()


async def cleanup_supabase():
    """Cleanup Supabase connections on application shutdown."""
    if get_supabase_manager.cache_info().currsize:
        get_supabase_manager().close()
        get_supabase_manager.cache_clear()
        logger.info("Supabase cleanup completed")
