"""Password hashing backed by werkzeug's salted KDFs."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from boardapp.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Hashes with ``method`` (e.g. ``scrypt`` or ``pbkdf2:sha256``).

    Verification reads the method back from the stored hash, so changing
    ``method`` keeps older hashes valid.
    """

    def __init__(self, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return generate_password_hash(
            password, method=self._method, salt_length=self._salt_length
        )

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        return check_password_hash(hashed, password)
