"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
Every write that touches a single column (refresh token, password hash)
goes through a narrow update so the rest of the row is never rewritten.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .exceptions import UserAlreadyExistsError
from .models import User

USERS_TABLE = "users"


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    All methods return Pydantic models mapped from database rows.
    Update methods return the post-update row (PostgREST returns the
    updated representation), or None when no row matched.
    """

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_by_id(self, user_id: str) -> Optional[User]:
        result = self._db.table(USERS_TABLE).select("*").eq("id", user_id).execute()
        return self._map_optional(result.data)

    def get_by_username(self, username: str) -> Optional[User]:
        result = (
            self._db.table(USERS_TABLE)
            .select("*")
            .eq("username", username.lower())
            .execute()
        )
        return self._map_optional(result.data)

    def get_by_email(self, email: str) -> Optional[User]:
        result = self._db.table(USERS_TABLE).select("*").eq("email", email.lower()).execute()
        return self._map_optional(result.data)

    def find_by_username_or_email(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        """Return the first user matching either identifier."""
        if username:
            user = self.get_by_username(username)
            if user is not None:
                return user
        if email:
            return self.get_by_email(email)
        return None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, data: dict[str, Any]) -> User:
        """
        Insert a new user row.

        Raises:
            UserAlreadyExistsError: If the unique username/email constraint fires.
        """
        try:
            result = self._db.table(USERS_TABLE).insert(data).execute()
        except APIError as e:
            if self._is_unique_violation(e):
                raise UserAlreadyExistsError() from e
            raise
        return self._map_to_user(result.data[0])

    def update_profile(self, user_id: str, fields: dict[str, Any]) -> Optional[User]:
        """
        Update profile columns and return the latest row.

        Raises:
            UserAlreadyExistsError: If the new email collides with another user.
        """
        data = {**fields, "updated_at": self._now()}
        try:
            result = self._db.table(USERS_TABLE).update(data).eq("id", user_id).execute()
        except APIError as e:
            if self._is_unique_violation(e):
                raise UserAlreadyExistsError("Email is already in use") from e
            raise
        return self._map_optional(result.data)

    def update_password_hash(self, user_id: str, password_hash: str) -> None:
        self._db.table(USERS_TABLE).update(
            {"password_hash": password_hash, "updated_at": self._now()}
        ).eq("id", user_id).execute()

    # -------------------------------------------------------------------------
    # Refresh token
    # -------------------------------------------------------------------------

    def set_refresh_token(self, user_id: str, token: str) -> None:
        """Store the user's single active refresh token."""
        self._db.table(USERS_TABLE).update({"refresh_token": token}).eq("id", user_id).execute()

    def rotate_refresh_token(self, user_id: str, expected: str, new_token: str) -> bool:
        """
        Replace the stored refresh token only if it still equals `expected`.

        The comparison and the write are a single UPDATE ... WHERE, so two
        callers presenting the same token cannot both win.

        Returns:
            True if the row was updated, False if the stored token had moved on.
        """
        result = (
            self._db.table(USERS_TABLE)
            .update({"refresh_token": new_token})
            .eq("id", user_id)
            .eq("refresh_token", expected)
            .execute()
        )
        return bool(result.data)

    def clear_refresh_token(self, user_id: str) -> None:
        self._db.table(USERS_TABLE).update({"refresh_token": None}).eq("id", user_id).execute()

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_optional(self, rows: Any) -> Optional[User]:
        row = self._first(rows)
        if row is None:
            return None
        return self._map_to_user(row)

    def _map_to_user(self, data: dict[str, Any]) -> User:
        return User(
            id=str(data["id"]),
            username=data["username"],
            email=data["email"],
            fullname=data.get("fullname") or "",
            password_hash=data["password_hash"],
            avatar_url=data.get("avatar_url") or None,
            cover_image_url=data.get("cover_image_url") or None,
            refresh_token=data.get("refresh_token"),
            created_at=self._parse_datetime(data.get("created_at")),
            updated_at=self._parse_datetime(data.get("updated_at")),
        )

    @staticmethod
    def _parse_datetime(value: Any) -> Optional[datetime]:
        if value is None or isinstance(value, datetime):
            return value
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))

    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()
