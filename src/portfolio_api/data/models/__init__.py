"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- AdminUser: Administrator accounts for the admin panel
- Profile: The singleton public profile
- Project: Showcased portfolio projects
- Experience: Work history entries
- Education: Academic history entries
- Certification: Professional certifications

All models inherit from the shared Base declarative class defined in data.db.
"""

from portfolio_api.data.db import Base
from portfolio_api.data.models.admin_user import ADMIN_ROLE, AdminUser
from portfolio_api.data.models.certification import NO_EXPIRATION, Certification
from portfolio_api.data.models.education import EDUCATION_STATUSES, Education
from portfolio_api.data.models.experience import EXPERIENCE_TYPES, Experience
from portfolio_api.data.models.profile import Profile
from portfolio_api.data.models.project import PROJECT_CATEGORIES, PROJECT_STATUSES, Project

__all__ = [
    "ADMIN_ROLE",
    "EDUCATION_STATUSES",
    "EXPERIENCE_TYPES",
    "NO_EXPIRATION",
    "PROJECT_CATEGORIES",
    "PROJECT_STATUSES",
    "AdminUser",
    "Base",
    "Certification",
    "Education",
    "Experience",
    "Profile",
    "Project",
]
