"""
AstraX – Streamlit frontend.
No business logic in layout; scoring, filtering and persistence live in services.
"""

import base64
from typing import Dict, List, Optional

import streamlit as st

from astrax.agents.career_agent import generate_career_path
from astrax.agents.chat_agent import get_chat_response
from astrax.agents.match_agent import match_internships, merge_ranking
from astrax.config import (
    APPLICATION_STATUSES,
    INTERNSHIP_TYPES,
    LISTING_STATUS_FILTERS,
    LISTING_STATUSES,
    STORAGE_PATH,
    TYPE_FILTER_OPTIONS,
)
from astrax.cv_pipeline.cv_extractor import run_cv_pipeline
from astrax.exceptions import AstraxError
from astrax.ranking.feed_ranker import FeedFilters, apply_filters, compute_skill_gaps, rank_feed
from astrax.schemas.chat import ChatMessage
from astrax.schemas.internship import Internship
from astrax.services.application_service import ApplicationService
from astrax.services.auth_service import OfflineAuthProvider
from astrax.services.llm_client import get_llm_client, run_sync
from astrax.services.recruiter_service import ApplicationWatcher, ListingForm, RecruiterService
from astrax.services.session_service import SessionService
from astrax.storage.key_value_store import JsonFileKeyValueStore
from astrax.storage.repositories import ApplicationStore, ListingStore, ProfileStore
from astrax.utils.logger import get_logger

logger = get_logger(__name__)

STIPEND_OPTIONS = {"Any": 0, "₹10,000+": 10000, "₹15,000+": 15000, "₹20,000+": 20000}


@st.cache_resource
def _stores() -> Dict[str, object]:
    """Process-wide stores so every browser session sees the same listings and applications."""
    kv = JsonFileKeyValueStore(STORAGE_PATH)
    return {
        "profiles": ProfileStore(kv),
        "listings": ListingStore(kv),
        "applications": ApplicationStore(kv),
    }


def _session() -> SessionService:
    if "session" not in st.session_state:
        stores = _stores()
        session = SessionService(OfflineAuthProvider(stores["profiles"]), stores["profiles"])
        st.session_state["view"] = session.restore()
        st.session_state["session"] = session
    return st.session_state["session"]


def _go(view: str) -> None:
    st.session_state["view"] = view
    st.rerun()


def _logout() -> None:
    watcher = st.session_state.pop("application_watcher", None)
    if watcher:
        watcher.unsubscribe()
    st.session_state.pop("chat_history", None)
    st.session_state.pop("ranked_feed", None)
    _go(_session().logout())


def render_login() -> None:
    st.title("AstraX")
    st.markdown("*AI-matched internships for students, applicant tracking for recruiters.*")
    st.divider()
    role = st.radio("I am a", options=["student", "recruiter"], format_func=str.title, horizontal=True)
    email = st.text_input("Email (optional)", key="login_email")
    if st.button("Continue", type="primary"):
        try:
            _go(_session().login(role, email))
        except AstraxError as e:
            st.error(str(e))


def render_resume_upload() -> None:
    st.title("Upload your résumé")
    st.caption("PDF, DOCX or TXT. We extract your skills to match you with internships.")
    uploaded = st.file_uploader("Résumé", type=["pdf", "docx", "txt", "md"])
    if uploaded is not None and st.button("Analyze", type="primary"):
        with st.spinner("Analyzing résumé…"):
            profile = run_cv_pipeline(uploaded.getvalue(), uploaded.name, get_llm_client())
        if profile is None:
            st.error("Could not read any text from this file.")
            return
        if uploaded.name.lower().endswith(".pdf"):
            st.session_state["resume_base64"] = base64.b64encode(uploaded.getvalue()).decode("ascii")
        _go(_session().apply_resume_analysis(profile))
    if st.button("Skip and fill in manually"):
        _go("student-onboarding")


def render_onboarding() -> None:
    session = _session()
    profile = session.current
    st.title("Complete your profile")
    with st.form("onboarding"):
        name = st.text_input("Full name", value=profile.name)
        university = st.text_input("University", value=profile.university)
        phone = st.text_input("Phone", value=profile.phone)
        skills = st.text_input("Skills (comma separated)", value=", ".join(profile.skills))
        summary = st.text_area("Summary", value=profile.summary)
        submitted = st.form_submit_button("Save", type="primary")
    if submitted:
        updated = profile.model_copy(
            update={
                "name": name.strip(),
                "university": university.strip(),
                "phone": phone.strip(),
                "skills": [s.strip() for s in skills.split(",") if s.strip()],
                "summary": summary.strip(),
            }
        )
        _go(session.complete_onboarding(updated))


def _render_internship_card(job: Internship, applied: bool, apply_service: ApplicationService) -> None:
    session = _session()
    with st.container():
        st.markdown("---")
        col_a, col_b = st.columns([3, 1])
        with col_a:
            st.markdown(f"### {job.title}")
            st.caption(f"**Company:** {job.company} · **Location:** {job.location or '—'} · **{job.type}**")
            if job.required_skills:
                st.markdown(" ".join(f"`{s}`" for s in job.required_skills))
            if job.match_reason:
                st.caption(job.match_reason)
            if job.stipend:
                st.caption(f"Stipend: {job.stipend}")
        with col_b:
            st.metric("Match", f"{job.match_score or 0}%")
            if applied:
                st.caption("Applied")
            elif st.button("Apply", key=f"apply_{job.id}", type="primary"):
                try:
                    apply_service.apply(session.current, job, st.session_state.get("resume_base64"))
                    st.success("Application submitted")
                    st.rerun()
                except AstraxError as e:
                    st.error(str(e))
        if job.description:
            with st.expander("Description"):
                st.markdown(job.description)


def render_student_feed(listings: List[Internship], apply_service: ApplicationService) -> None:
    session = _session()
    profile = session.current
    st.subheader("Filters")
    fcol1, fcol2, fcol3, fcol4 = st.columns(4)
    with fcol1:
        search = st.text_input("Search", placeholder="Title or company", key="feed_search")
    with fcol2:
        type_filter = st.selectbox("Type", options=TYPE_FILTER_OPTIONS, key="feed_type")
    with fcol3:
        locations = ["All"] + sorted({l.location for l in listings if l.location})
        location = st.selectbox("Location", options=locations, key="feed_location")
    with fcol4:
        stipend_label = st.selectbox("Stipend", options=list(STIPEND_OPTIONS), key="feed_stipend")
    filters = FeedFilters(search=search, type=type_filter, location=location, min_stipend=STIPEND_OPTIONS[stipend_label])

    if st.button("Rank with AI", key="ai_rank"):
        with st.spinner("Ranking internships…"):
            ranked = run_sync(match_internships(profile, listings, get_llm_client()))
        st.session_state["ranked_feed"] = {"skills": list(profile.skills), "ranked": ranked}
    cached = st.session_state.get("ranked_feed")
    if cached and cached["skills"] != list(profile.skills):
        # profile edited since ranking
        st.session_state.pop("ranked_feed")
        cached = None
    if cached:
        feed = apply_filters(merge_ranking(profile, listings, cached["ranked"]), filters)
    else:
        feed = rank_feed(profile.skills, listings, filters)

    gaps = compute_skill_gaps(listings, profile.skills)
    if gaps:
        with st.expander("Skills in demand you don't list yet"):
            st.markdown(" ".join(f"`{g}`" for g in gaps))

    st.divider()
    st.markdown(f"**{len(feed)}** internships")
    applied_ids = {a.job_id for a in apply_service.my_applications(profile.email)}
    if not feed:
        st.info("No internships match these filters.")
    for job in feed:
        _render_internship_card(job, job.id in applied_ids, apply_service)


def render_my_applications(apply_service: ApplicationService) -> None:
    apps = apply_service.my_applications(_session().current.email)
    if not apps:
        st.info("You haven't applied anywhere yet.")
        return
    for app in apps:
        st.markdown(f"**{app.job_title}** · {app.company_name}")
        st.caption(f"Applied {app.applied_date} · Match {app.match_score}% · Status: **{app.status}**")


def render_career_tools() -> None:
    profile = _session().current
    st.subheader("Career roadmap")
    c1, c2 = st.columns(2)
    with c1:
        target_role = st.text_input("Target role", placeholder="e.g. Backend Engineer")
    with c2:
        target_company = st.text_input("Target company", placeholder="e.g. Google")
    if st.button("Generate roadmap") and target_role.strip():
        with st.spinner("Building your roadmap…"):
            roadmap = run_sync(generate_career_path(profile, target_role, target_company, get_llm_client()))
        if roadmap is None:
            st.error("Could not generate a roadmap right now. Try again later.")
        else:
            st.metric("Readiness", f"{roadmap.readiness_score}%")
            for step in roadmap.roadmap:
                st.markdown(f"**{step.month}**: {step.task}")
                if step.skills:
                    st.caption(", ".join(step.skills))
            if roadmap.next_immediate_step:
                st.info(roadmap.next_immediate_step)

    st.subheader("Career assistant")
    history: List[ChatMessage] = st.session_state.setdefault("chat_history", [])
    for msg in history:
        with st.chat_message("assistant" if msg.role == "model" else "user"):
            st.markdown(msg.text)
    prompt = st.chat_input("Ask about internships, skills or interviews")
    if prompt:
        reply = run_sync(get_chat_response(history, prompt, get_llm_client()))
        history.append(ChatMessage(role="user", text=prompt))
        history.append(ChatMessage(role="model", text=reply))
        st.rerun()


def render_student_dashboard() -> None:
    session = _session()
    stores = _stores()
    apply_service = ApplicationService(stores["applications"])
    listings = [l for l in stores["listings"].list_all() if l.status == "Active"]

    head, out = st.columns([5, 1])
    with head:
        st.title(f"Welcome, {session.current.name or 'student'}")
    with out:
        if st.button("Log out"):
            _logout()
    feed_tab, apps_tab, career_tab = st.tabs(["Internships", "My Applications", "Career"])
    with feed_tab:
        render_student_feed(listings, apply_service)
    with apps_tab:
        render_my_applications(apply_service)
    with career_tab:
        render_career_tools()


def _listing_form(prefix: str, current: Optional[Internship] = None) -> dict:
    title = st.text_input("Title", value=current.title if current else "", key=f"{prefix}_title")
    type_ = st.selectbox(
        "Type", INTERNSHIP_TYPES, index=INTERNSHIP_TYPES.index(current.type) if current else 0, key=f"{prefix}_type"
    )
    stipend = st.text_input("Stipend", value=current.stipend if current else "", key=f"{prefix}_stipend")
    location = st.text_input("Location", value=current.location if current else "", key=f"{prefix}_location")
    skills = st.text_input(
        "Required skills (comma separated)",
        value=", ".join(current.required_skills) if current else "",
        key=f"{prefix}_skills",
    )
    description = st.text_area("Description", value=current.description if current else "", key=f"{prefix}_desc")
    status = st.selectbox(
        "Status", LISTING_STATUSES, index=LISTING_STATUSES.index(current.status) if current else 0, key=f"{prefix}_status"
    )
    return dict(
        title=title.strip(),
        type=type_,
        stipend=stipend.strip(),
        location=location.strip(),
        required_skills=[s.strip() for s in skills.split(",") if s.strip()],
        description=description.strip(),
        status=status,
    )


def _application_watcher() -> ApplicationWatcher:
    """Flag new applications for this recruiter session instead of polling storage."""
    if "application_watcher" not in st.session_state:
        st.session_state["application_watcher"] = ApplicationWatcher(_stores()["applications"])
    return st.session_state["application_watcher"]


def render_recruiter_dashboard() -> None:
    session = _session()
    stores = _stores()
    recruiter = RecruiterService(stores["listings"], stores["applications"])
    profile = session.current
    watcher = _application_watcher()

    head, out = st.columns([5, 1])
    with head:
        st.title(profile.company_name or "Recruiter portal")
    with out:
        if st.button("Log out"):
            _logout()

    if watcher.new:
        st.success(f"{watcher.new} new application(s) since you last checked")
        if st.button("Dismiss"):
            watcher.dismiss()
            st.rerun()

    if not profile.company_name:
        st.subheader("Set up your company")
        with st.form("company"):
            name = st.text_input("Company name")
            website = st.text_input("Website")
            about = st.text_area("About")
            if st.form_submit_button("Save", type="primary"):
                try:
                    session.update_profile(recruiter.setup_company(profile, name, website, about))
                    st.rerun()
                except AstraxError as e:
                    st.error(str(e))
        return

    stats = recruiter.dashboard_stats(profile.company_name)
    m1, m2 = st.columns(2)
    m1.metric("Active listings", stats.active_listings)
    m2.metric("Total applicants", stats.total_applicants)

    listings_tab, post_tab = st.tabs(["Listings", "Post a listing"])
    with post_tab:
        form = _listing_form("new")
        if st.button("Post", type="primary", key="post_listing"):
            try:
                recruiter.post_listing(profile, ListingForm(**form))
                st.success("Listing posted")
                st.rerun()
            except (AstraxError, ValueError) as e:
                st.error(str(e))

    with listings_tab:
        status_filter = st.selectbox("Show", LISTING_STATUS_FILTERS, key="listing_status_filter")
        for listing in recruiter.company_listings(profile.company_name, status_filter):
            st.markdown("---")
            st.markdown(f"### {listing.title}")
            st.caption(f"{listing.status} · {listing.applicants or 0} applicant(s) · posted {listing.posted_date}")
            with st.expander("Edit"):
                edited = _listing_form(f"edit_{listing.id}", listing)
                if st.button("Save changes", key=f"save_{listing.id}"):
                    try:
                        recruiter.edit_listing(listing.id, ListingForm(**edited))
                        st.rerun()
                    except (AstraxError, ValueError) as e:
                        st.error(str(e))
            with st.expander("Applicants"):
                for app in recruiter.applicants_for(listing.id):
                    c1, c2, c3 = st.columns([3, 2, 2])
                    with c1:
                        st.markdown(f"**{app.student_name}** · {app.student_email}")
                        st.caption(f"Applied {app.applied_date} · Match {app.match_score}%")
                    with c2:
                        new_status = st.selectbox(
                            "Status",
                            APPLICATION_STATUSES,
                            index=APPLICATION_STATUSES.index(app.status),
                            key=f"status_{app.id}",
                        )
                        if new_status != app.status:
                            recruiter.update_application_status(app.id, new_status)
                            st.rerun()
                    with c3:
                        data, filename, mime = recruiter.resume_download(app)
                        st.download_button("Résumé", data=data, file_name=filename, mime=mime, key=f"cv_{app.id}")


VIEWS = {
    "login": render_login,
    "resume-upload": render_resume_upload,
    "student-onboarding": render_onboarding,
    "student-dashboard": render_student_dashboard,
    "recruiter-dashboard": render_recruiter_dashboard,
}


def render_layout() -> None:
    st.set_page_config(page_title="AstraX", layout="wide")
    _session()
    VIEWS.get(st.session_state.get("view"), render_login)()


if __name__ == "__main__":
    render_layout()
