"""
Password hashing with bcrypt.

Both operations run in a worker thread so the event loop keeps
serving other requests while bcrypt works.
"""

import asyncio

import bcrypt

MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """One-way hash and compare for user passwords."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        return await asyncio.to_thread(self._verify_sync, password, password_hash)

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def _verify_sync(password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
