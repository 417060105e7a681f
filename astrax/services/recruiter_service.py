"""Recruiter portal: company setup, listings, applicants and résumé downloads."""

import base64
import binascii
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from astrax.config import DEFAULT_LISTING_LOCATION
from astrax.exceptions import AuthError, InvalidArgumentError
from astrax.schemas.application import Application, ApplicationStatus
from astrax.schemas.internship import Internship, InternshipType, ListingStatus
from astrax.schemas.profile import UserProfile
from astrax.services.filter_service import filter_by_status
from astrax.storage.repositories import ApplicationStore, ListingStore
from astrax.utils.helpers import new_id, today_iso
from astrax.utils.logger import get_logger

logger = get_logger(__name__)


class ListingForm(BaseModel):
    """Recruiter input for posting or editing a listing."""

    title: str = Field(..., min_length=1, description="Job title")
    type: InternshipType = Field(default="Remote")
    stipend: str = Field(default="")
    description: str = Field(default="")
    status: ListingStatus = Field(default="Active")
    location: str = Field(default="", description="Empty uses the default listing location")
    required_skills: List[str] = Field(default_factory=list)


class DashboardStats(BaseModel):
    active_listings: int = 0
    total_applicants: int = 0


def _require_recruiter(profile: Optional[UserProfile]) -> UserProfile:
    if profile is None or profile.role != "recruiter":
        raise AuthError("Recruiter sign-in required")
    return profile


class RecruiterService:
    def __init__(self, listings: ListingStore, applications: ApplicationStore) -> None:
        self._listings = listings
        self._applications = applications

    def setup_company(
        self,
        profile: UserProfile,
        company_name: str,
        company_website: str = "",
        company_description: str = "",
    ) -> UserProfile:
        """Return the recruiter profile with company details filled in."""
        profile = _require_recruiter(profile)
        if not company_name or not company_name.strip():
            raise InvalidArgumentError("company_name is required")
        return profile.model_copy(
            update={
                "company_name": company_name.strip(),
                "company_website": company_website,
                "company_description": company_description,
            }
        )

    def post_listing(self, profile: UserProfile, form: ListingForm) -> Internship:
        """New Active listing for the recruiter's company, placed at the top of the feed."""
        profile = _require_recruiter(profile)
        if not profile.company_name:
            raise InvalidArgumentError("Set up the company before posting listings")
        listing = Internship(
            id=new_id(),
            title=form.title,
            company=profile.company_name,
            location=form.location or DEFAULT_LISTING_LOCATION,
            type=form.type,
            stipend=form.stipend,
            description=form.description,
            required_skills=[s.strip() for s in form.required_skills if s.strip()],
            posted_date=today_iso(),
            applicants=0,
            status="Active",
        )
        self._listings.add(listing)
        logger.info("Posted listing %s (%s) for %s", listing.id, listing.title, listing.company)
        return listing

    def edit_listing(self, listing_id: str, form: ListingForm) -> Internship:
        """Raises NotFoundError for an unknown id."""
        current = self._listings.get(listing_id)
        updated = current.model_copy(
            update={
                "title": form.title,
                "type": form.type,
                "stipend": form.stipend,
                "description": form.description,
                "status": form.status,
                "location": form.location or current.location,
                "required_skills": [s.strip() for s in form.required_skills if s.strip()],
            }
        )
        self._listings.update(updated)
        return updated

    def company_listings(self, company: str, status_filter: str = "All") -> List[Internship]:
        """Listings of one company with live applicant counts."""
        apps = self._applications.list_all()
        listings = [l for l in self._listings.list_all() if l.company == company]
        counted = [
            l.model_copy(update={"applicants": sum(1 for a in apps if a.job_id == l.id)}) for l in listings
        ]
        return filter_by_status(counted, status_filter)

    def applicants_for(self, job_id: str) -> List[Application]:
        return self._applications.for_job(job_id)

    def update_application_status(self, application_id: str, status: ApplicationStatus) -> Application:
        updated = self._applications.update_status(application_id, status)
        logger.info("Application %s -> %s", application_id, status)
        return updated

    def dashboard_stats(self, company: str) -> DashboardStats:
        listings = self.company_listings(company)
        return DashboardStats(
            active_listings=sum(1 for l in listings if l.status == "Active"),
            total_applicants=sum(l.applicants or 0 for l in listings),
        )

    def resume_download(self, application: Application) -> Tuple[bytes, str, str]:
        """
        Return (content, filename, mime_type). Uploaded PDFs are decoded as is;
        applications without one get a plain-text summary.
        """
        base_name = (application.student_name or "Candidate").replace(" ", "_")
        if application.resume_base64:
            try:
                data = base64.b64decode(application.resume_base64, validate=True)
            except (binascii.Error, ValueError) as e:
                raise InvalidArgumentError(f"Stored résumé for {application.id} is not valid base64") from e
            return data, f"{base_name}_Resume.pdf", application.resume_mime_type or "application/pdf"

        summary = (
            f"Candidate: {application.student_name}\n"
            f"Email: {application.student_email}\n"
            f"Applied for: {application.job_title} at {application.company_name}\n"
            f"Applied on: {application.applied_date}\n"
            f"Match score: {application.match_score}%\n"
            f"Status: {application.status}\n"
            "\nNo résumé file was uploaded with this application.\n"
        )
        return summary.encode("utf-8"), f"{base_name}_Summary.txt", "text/plain"


class ApplicationWatcher:
    """
    Counts applications submitted since a recruiter session started watching.

    Subscribes weakly: the store holds no strong reference to the watcher, so a
    closed session's watcher is dropped from the subscriber list once collected.
    """

    def __init__(self, applications: ApplicationStore) -> None:
        self.count = len(applications.list_all())
        self.new = 0
        self.unsubscribe = applications.on_applications_changed(self.on_change, weak=True)

    def on_change(self, apps: List[Application]) -> None:
        if len(apps) > self.count:
            self.new += len(apps) - self.count
        self.count = len(apps)

    def dismiss(self) -> None:
        self.new = 0
