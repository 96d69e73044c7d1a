"""Administrator account model used by the login and setup flows.

Passwords are stored as salted PBKDF2 hashes, never in plaintext.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.data.db import Base, new_id, utcnow

ADMIN_ROLE = "admin"


class AdminUser(Base):
    """Administrator account.

    Attributes:
        id: Generated hex identifier.
        username: Unique handle used for login.
        email: Contact address given at setup.
        password_hash: Salted hash of the user's password.
        role: Authorization role; only ``admin`` is issued.
        created_at: UTC timestamp when the account was created.
        updated_at: UTC timestamp of the last change.
    """

    __tablename__ = "admin_users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    username: Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default=ADMIN_ROLE)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
