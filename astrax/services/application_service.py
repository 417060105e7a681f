"""Student applications: submit and list."""

from typing import List, Optional

from astrax.exceptions import AuthError
from astrax.ranking.relevance_scorer import match_posting
from astrax.schemas.application import Application
from astrax.schemas.internship import Internship
from astrax.schemas.profile import UserProfile
from astrax.storage.repositories import ApplicationStore
from astrax.utils.helpers import new_id, today_iso
from astrax.utils.logger import get_logger

logger = get_logger(__name__)


class ApplicationService:
    def __init__(self, applications: ApplicationStore) -> None:
        self._applications = applications

    def apply(
        self,
        profile: Optional[UserProfile],
        internship: Internship,
        resume_base64: Optional[str] = None,
    ) -> Application:
        """
        Submit an application. Only students may apply. The stored match score
        is the feed score when present, otherwise the heuristic score.
        """
        if profile is None or profile.role != "student":
            raise AuthError("Only students can apply to internships")
        if internship.match_score is not None:
            match_score = internship.match_score
        else:
            match_score = match_posting(profile, internship).score

        application = Application(
            id=new_id(),
            job_id=internship.id,
            student_id=profile.email,
            student_name=profile.name,
            student_email=profile.email,
            job_title=internship.title,
            company_name=internship.company,
            status="Pending",
            applied_date=today_iso(),
            match_score=match_score,
            resume_base64=resume_base64,
            resume_mime_type="application/pdf" if resume_base64 else None,
        )
        self._applications.add(application)
        logger.info("Application %s: %s -> %s (%s%%)", application.id, profile.email, internship.id, match_score)
        return application

    def my_applications(self, email: str) -> List[Application]:
        return self._applications.for_student(email)

    def has_applied(self, email: str, job_id: str) -> bool:
        return any(a.job_id == job_id for a in self._applications.for_student(email))
