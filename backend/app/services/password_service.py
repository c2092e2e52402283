"""
StaffDesk Backend — Password Hashing
======================================

What:  One-way, salted hashing of employee passwords with bcrypt.
Why:   The employee table must never hold a submitted plaintext password.
How:   bcrypt.gensalt(rounds) + bcrypt.hashpw; the hash embeds its own salt and
       cost, so verification needs only the stored string.

bcrypt is CPU-bound (tens of milliseconds at cost 10), so the async helpers
push the work onto Starlette's threadpool instead of blocking the event loop.
"""

from typing import Optional

import bcrypt
from starlette.concurrency import run_in_threadpool

from app.config import settings


class PasswordHasher:
    """bcrypt wrapper with a configurable cost factor."""

    def __init__(self, rounds: Optional[int] = None):
        self.rounds = rounds or settings.password_hash_rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False

    async def hash_async(self, password: str) -> str:
        return await run_in_threadpool(self.hash, password)


password_hasher = PasswordHasher()
