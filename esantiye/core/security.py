from __future__ import annotations

from typing import cast

from passlib.context import CryptContext

# Default: argon2 (bypasses bcrypt limits)
# Legacy verification order: argon2 > bcrypt_sha256 > bcrypt
_pwd = CryptContext(
    schemes=["argon2", "bcrypt_sha256", "bcrypt"],
    default="argon2",
    deprecated="auto",
)


def hash_password(raw: str) -> str:
    return cast(str, _pwd.hash(raw))


def verify_password(raw: str, hashed: str) -> bool:
    return cast(bool, _pwd.verify(raw, hashed))
