"""
Supabase-backed account directory.
Reads and writes auth.users through PostgREST using a service-role client.
"""
from typing import Optional

import httpx
import structlog
from supabase import Client, PostgrestAPIError, create_client

from utils.exceptions import AccountDirectoryError


logger = structlog.get_logger(__name__)


class SupabaseAccountDirectory:
    def __init__(self, client: Client, schema: str = "auth", table: str = "users"):
        """
        Args:
            client: Supabase client created with the service-role key
            schema: Schema holding the user table
            table: Table with id, email and encrypted_password columns
        """
        self.client = client
        self.schema = schema
        self.table = table

    @classmethod
    def from_credentials(cls, supabase_url: str, supabase_key: str, **kwargs) -> "SupabaseAccountDirectory":
        return cls(create_client(supabase_url, supabase_key), **kwargs)

    def _users(self):
        return self.client.schema(self.schema).table(self.table)

    def find_by_email(self, email: str) -> Optional[dict]:
        """
        Look up a single account by exact email match.

        Returns:
            dict with at least {'id', 'email'}, or None if no account matches

        Raises:
            AccountDirectoryError: The query failed or matched more than one row
        """
        try:
            response = self._users().select("id, email").eq("email", email).limit(2).execute()
        except PostgrestAPIError as e:
            raise AccountDirectoryError(f"User lookup failed: {e.message}") from e
        except httpx.HTTPError as e:
            raise AccountDirectoryError(f"User lookup failed: {e}") from e

        rows = response.data or []
        if not rows:
            return None
        if len(rows) > 1:
            raise AccountDirectoryError("User lookup matched more than one account")
        return rows[0]

    def update_credential_hash(self, user_id: str, password_hash: str) -> None:
        """
        Overwrite the stored password hash for an account.

        Raises:
            AccountDirectoryError: The update failed or no row was updated
        """
        try:
            response = self._users().update({"encrypted_password": password_hash}).eq("id", user_id).execute()
        except PostgrestAPIError as e:
            raise AccountDirectoryError(f"Password update failed: {e.message}") from e
        except httpx.HTTPError as e:
            raise AccountDirectoryError(f"Password update failed: {e}") from e

        if not response.data:
            raise AccountDirectoryError(f"No account updated for id {user_id}")
