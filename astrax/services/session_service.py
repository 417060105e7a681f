"""Session lifecycle: sign-in, view routing, profile updates and sign-out."""

from typing import Literal, Optional

from astrax.schemas.profile import Role, UserProfile
from astrax.services.auth_service import AuthProvider
from astrax.storage.repositories import ProfileStore
from astrax.utils.logger import get_logger

logger = get_logger(__name__)

View = Literal["login", "resume-upload", "student-onboarding", "student-dashboard", "recruiter-dashboard"]


def next_view(profile: Optional[UserProfile]) -> View:
    """Where a user lands after sign-in or restore."""
    if profile is None:
        return "login"
    if profile.role == "recruiter":
        return "recruiter-dashboard"
    if not profile.skills:
        return "resume-upload"
    if not profile.name:
        return "student-onboarding"
    return "student-dashboard"


class SessionService:
    """Tracks the signed-in user and persists every change to the profile store."""

    def __init__(self, auth: AuthProvider, profiles: ProfileStore) -> None:
        self._auth = auth
        self._profiles = profiles
        self.current: Optional[UserProfile] = None

    def _persist(self, profile: UserProfile) -> UserProfile:
        self.current = profile
        self._profiles.set_current(profile)
        self._profiles.save(profile)
        return profile

    def login(self, role: Role, email: Optional[str] = None) -> View:
        profile = self._auth.sign_in(role, email)
        self.current = profile
        self._profiles.set_current(profile)
        return next_view(profile)

    def next_view(self) -> View:
        return next_view(self.current)

    def restore(self) -> View:
        """Resume a previous session from storage."""
        self.current = self._profiles.get_current()
        if self.current is not None:
            logger.info("Restored session for %s", self.current.email)
        return next_view(self.current)

    def apply_resume_analysis(self, analyzed: UserProfile) -> View:
        """
        Merge a profile extracted from a résumé into the current one. The
        existing name is kept when the résumé did not yield one.
        """
        base = self.current or UserProfile()
        update = analyzed.model_dump(exclude={"role"})
        update["name"] = analyzed.name or base.name
        update["email"] = analyzed.email or base.email
        merged = base.model_copy(update={**update, "role": "student"})
        self._persist(merged)
        return "student-onboarding"

    def complete_onboarding(self, profile: UserProfile) -> View:
        self._persist(profile)
        return next_view(profile)

    def update_profile(self, profile: UserProfile) -> UserProfile:
        return self._persist(profile)

    def logout(self) -> View:
        self.current = None
        self._profiles.clear_current()
        return "login"
