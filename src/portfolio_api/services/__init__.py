"""Services"""

from portfolio_api.services.auth import CredentialStore
from portfolio_api.services.certifications import CertificationRepository
from portfolio_api.services.education import EducationRepository
from portfolio_api.services.experiences import ExperienceRepository
from portfolio_api.services.profile import ProfileRepository
from portfolio_api.services.projects import ProjectRepository
from portfolio_api.services.tokens import Identity, TokenService

__all__ = [
    "CertificationRepository",
    "CredentialStore",
    "EducationRepository",
    "ExperienceRepository",
    "Identity",
    "ProfileRepository",
    "ProjectRepository",
    "TokenService",
]
