"""Credential store for administrator accounts.

This module provides a minimal username/password authentication layer
backed by the admin_users table. Passwords are stored as salted PBKDF2
hashes and only a one-way comparison is exposed.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
from functools import lru_cache

from email_validator import EmailNotValidError, validate_email

from portfolio_api.data.db import Database
from portfolio_api.data.models import ADMIN_ROLE, AdminUser
from portfolio_api.errors import AlreadyExists, FieldError, InvalidCredentials, ValidationError

logger = logging.getLogger(__name__)

__all__ = ["CredentialStore", "hash_password", "verify_password"]

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the given password.

    The result is stored as ``<salt_hex>:<hash_hex>``.
    """
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}:{derived.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = stored_hash.split(":", 1)
    except ValueError:
        return False

    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        _PBKDF2_ITERATIONS,
    )
    return hmac.compare_digest(candidate, expected)


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    """Stand-in hash checked for unknown usernames so both failures cost one PBKDF2 run."""
    return hash_password("not-a-real-password")


def _user_to_dict(user: AdminUser) -> dict:
    """Public fields of an AdminUser; the password hash never leaves this module."""
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "role": user.role,
    }


class CredentialStore:
    """Lookup, verification and one-time creation of admin accounts."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def has_admin(self) -> bool:
        with self.database.session() as session:
            return session.query(AdminUser.id).first() is not None

    def get_user(self, user_id: str) -> dict | None:
        """Return public fields for ``user_id``, or None if it does not exist."""
        with self.database.session() as session:
            user = session.get(AdminUser, user_id)
            return _user_to_dict(user) if user else None

    def authenticate(self, username: str | None, password: str | None) -> dict:
        """Check a username/password pair.

        Returns:
            Public fields of the matching user.

        Raises:
            ValidationError: If either value is empty.
            InvalidCredentials: If the user is unknown or the password is
                wrong. Both cases raise the same error.
        """
        errors: list[FieldError] = []
        username_clean = (username or "").strip()
        if not username_clean:
            errors.append({"field": "username", "message": "El usuario es requerido"})
        if not password:
            errors.append({"field": "password", "message": "La contraseña es requerida"})
        if errors:
            raise ValidationError(errors)

        with self.database.session() as session:
            user = session.query(AdminUser).filter(AdminUser.username == username_clean).first()
            stored_hash = user.password_hash if user else _dummy_hash()
            if not verify_password(password, stored_hash) or user is None:
                logger.warning("Failed login attempt for %r", username_clean)
                raise InvalidCredentials()
            return _user_to_dict(user)

    def create_admin(self, username: str | None, email: str | None, password: str | None) -> dict:
        """Create the first administrator account.

        Raises:
            AlreadyExists: If any admin account already exists.
            ValidationError: If username, email or password are not acceptable.
        """
        if self.has_admin():
            raise AlreadyExists()

        username_clean = (username or "").strip()
        email_clean = (email or "").strip()
        errors: list[FieldError] = []
        if len(username_clean) < MIN_USERNAME_LENGTH:
            errors.append(
                {"field": "username", "message": "Usuario debe tener al menos 3 caracteres"}
            )
        try:
            email_clean = validate_email(email_clean, check_deliverability=False).normalized
        except EmailNotValidError:
            errors.append({"field": "email", "message": "Email inválido"})
        if len(password or "") < MIN_PASSWORD_LENGTH:
            errors.append(
                {"field": "password", "message": "Contraseña debe tener al menos 6 caracteres"}
            )
        if errors:
            raise ValidationError(errors)

        with self.database.session() as session:
            # Re-check inside the write transaction to narrow the setup race.
            if session.query(AdminUser.id).first() is not None:
                raise AlreadyExists()
            user = AdminUser(
                username=username_clean,
                email=email_clean,
                password_hash=hash_password(password),
                role=ADMIN_ROLE,
            )
            session.add(user)
            session.flush()
            logger.info("Created admin user %s", user.id)
            return _user_to_dict(user)
