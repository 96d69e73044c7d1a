"""Profile repository for the singleton public profile.

There is no id addressing: at most one profile is meant to exist. Reads
lazily create a default profile, writes upsert it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.data.db import Database
from portfolio_api.data.models import Profile
from portfolio_api.errors import ValidationError
from portfolio_api.services.repository import is_blank

logger = logging.getLogger(__name__)

__all__ = ["ProfileRepository"]

# Fields that can be updated on Profile
_PROFILE_FIELDS = (
    "name",
    "title",
    "subtitle",
    "bio",
    "description",
    "profile_image",
    "cv_url",
    "location",
    "social_links",
    "skills",
    "stats",
)


def _profile_to_dict(profile: Profile) -> dict[str, Any]:
    result: dict[str, Any] = {"id": profile.id}
    for field in _PROFILE_FIELDS:
        value = getattr(profile, field)
        result[field] = dict(value) if isinstance(value, dict) else value
    result["created_at"] = profile.created_at
    result["updated_at"] = profile.updated_at
    return result


class ProfileRepository:
    """Singleton access to the profile."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @staticmethod
    def _first(session: Session) -> Profile | None:
        # Oldest wins so concurrent first reads converge on the same row.
        return session.query(Profile).order_by(Profile.created_at, Profile.id).first()

    def get_or_create_singleton(self) -> dict[str, Any]:
        """Return the profile, creating the default one if none exists.

        Idempotent after the first call. Two concurrent first calls may both
        insert; every later read returns the oldest row.
        """
        with self.database.session() as session:
            profile = self._first(session)
            if profile is None:
                profile = Profile()
                session.add(profile)
                session.flush()
                logger.info("Created default profile %s", profile.id)
            return _profile_to_dict(profile)

    def upsert(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Create the profile from ``payload`` or replace the provided fields.

        Raises:
            ValidationError: If ``name`` would become empty.
        """
        changes = {field: payload[field] for field in _PROFILE_FIELDS if field in payload}
        if "name" in changes and is_blank(changes["name"]):
            raise ValidationError.single("name", "El nombre es requerido")

        with self.database.session() as session:
            profile = self._first(session)
            if profile is None:
                profile = Profile(**changes)
                session.add(profile)
                session.flush()
                logger.info("Created profile %s from update", profile.id)
            else:
                for field, value in changes.items():
                    setattr(profile, field, value)
                session.flush()
                logger.info("Updated profile %s", profile.id)
            return _profile_to_dict(profile)

    def count(self) -> int:
        with self.database.session() as session:
            return session.query(Profile).count()
