"""
AuthSession - Thin adapter over the hosted Supabase backend.

Provides:
- Current session lookup (present / absent)
- Sign in and sign out, returning an error message instead of raising
- Profile row lookup for the dashboard

Session contents are opaque apart from the user's id and email.
"""

import logging
from typing import Any, Optional

from supabase import create_client

from learntrack.config import Settings
from learntrack.schemas import Profile

logger = logging.getLogger(__name__)

PROFILES_TABLE = "profiles"


class AuthSession:
    """Wraps a Supabase client for the few calls the app makes."""

    def __init__(self, client: Any):
        """
        Args:
            client: supabase.Client (or any object with the same auth/table API)
        """
        self.client = client
        self._profiles: dict[str, Optional[Profile]] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthSession":
        """Create a client from settings; raises ConfigError if unconfigured."""
        url, key = settings.require_supabase()
        return cls(create_client(url, key))

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def get_current_session(self):
        """Current provider session, or None when signed out."""
        return self.client.auth.get_session()

    def is_signed_in(self) -> bool:
        return self.get_current_session() is not None

    def current_user(self):
        session = self.get_current_session()
        return session.user if session else None

    def sign_in(self, email: str, password: str) -> Optional[str]:
        """Sign in with email and password. Returns an error message on failure."""
        try:
            self.client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            logger.warning(f"Sign in failed for {email}: {e}")
            return str(e)
        self._profiles.clear()
        logger.info(f"Signed in as {email}")
        return None

    def sign_out(self) -> Optional[str]:
        """
        Sign out of the provider.

        Failures are logged and returned as a message; the session is left as
        it was and nothing is retried.
        """
        try:
            self.client.auth.sign_out()
        except Exception as e:
            logger.error(f"Error signing out: {e}")
            return str(e)
        self._profiles.clear()
        logger.info("Signed out")
        return None

    # -------------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------------

    def fetch_profile(self, user_id: str) -> Optional[Profile]:
        """
        Load the profile row for user_id, or None if there is none.

        Lookups are cached per user, including users without a row. Provider
        errors are logged, return None and are not cached.
        """
        if user_id in self._profiles:
            return self._profiles[user_id]

        try:
            response = (
                self.client.table(PROFILES_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error loading profile for user {user_id}: {e}")
            return None

        rows = response.data or []
        if rows:
            profile = Profile.model_validate(rows[0])
        else:
            logger.info(f"No profile row for user {user_id}")
            profile = None
        self._profiles[user_id] = profile
        return profile
