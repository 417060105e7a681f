"""Sign-in providers. The offline provider restores saved profiles from local storage."""

import re
from abc import ABC, abstractmethod
from typing import Optional

from astrax.exceptions import AuthError
from astrax.schemas.profile import Role, UserProfile
from astrax.storage.repositories import ProfileStore
from astrax.utils.logger import get_logger

logger = get_logger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

DEFAULT_STUDENT_EMAIL = "student@example.com"
DEFAULT_RECRUITER = UserProfile(
    name="TechFlow HR",
    email="hr@techflow.com",
    role="recruiter",
    company_name="TechFlow Solutions",
)


class AuthProvider(ABC):
    """Resolves a sign-in into a UserProfile."""

    @abstractmethod
    def sign_in(self, role: Role, email: Optional[str] = None) -> UserProfile:
        """Raises AuthError when sign-in is rejected."""
        ...


class OfflineAuthProvider(AuthProvider):
    """
    Local sign-in without a remote identity service.

    Students get their saved profile (email overridden by the one given) or a
    blank student profile. Recruiters get their saved recruiter profile or a
    nominal company account.
    """

    def __init__(self, profiles: ProfileStore) -> None:
        self._profiles = profiles

    def sign_in(self, role: Role, email: Optional[str] = None) -> UserProfile:
        if role not in ("student", "recruiter"):
            raise AuthError(f"Unknown role: {role}")
        email = (email or "").strip()
        if email and not _EMAIL_RE.match(email):
            raise AuthError(f"Invalid email address: {email}")

        saved = self._profiles.get_saved(role)
        if role == "recruiter":
            profile = saved or DEFAULT_RECRUITER.model_copy(deep=True)
            if email:
                profile = profile.model_copy(update={"email": email})
        elif saved is not None:
            profile = saved.model_copy(update={"email": email or saved.email})
        else:
            profile = UserProfile(
                email=email or DEFAULT_STUDENT_EMAIL,
                role="student",
                experience_level="Student",
            )
        logger.info("Signed in %s as %s", profile.email, role)
        return profile
