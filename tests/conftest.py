"""
Pytest configuration and shared fixtures.
"""

from typing import List, Optional, Union

import pytest

from astrax.schemas.internship import Internship
from astrax.schemas.profile import UserProfile
from astrax.services.llm_client import LLMClient
from astrax.storage.key_value_store import InMemoryKeyValueStore
from astrax.storage.repositories import ApplicationStore, ListingStore, ProfileStore


class FakeLLMClient(LLMClient):
    """Replays scripted replies; an Exception entry is raised instead of returned."""

    def __init__(self, replies: Optional[List[Union[str, Exception]]] = None) -> None:
        self.replies = list(replies or [])
        self.calls: List[dict] = []

    async def complete(self, messages, json_mode=False) -> str:
        self.calls.append({"messages": messages, "json_mode": json_mode})
        if not self.replies:
            raise AssertionError("FakeLLMClient ran out of scripted replies")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def fake_llm():
    """Factory for scripted LLM clients."""
    return FakeLLMClient


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def profile_store(kv_store) -> ProfileStore:
    return ProfileStore(kv_store)


@pytest.fixture
def listing_store(kv_store) -> ListingStore:
    return ListingStore(kv_store)


@pytest.fixture
def application_store(kv_store) -> ApplicationStore:
    return ApplicationStore(kv_store)


@pytest.fixture
def student() -> UserProfile:
    """Student with a full-stack skill set."""
    return UserProfile(
        name="Asha Rao",
        email="asha@example.com",
        role="student",
        skills=["React", "Node.js", "MongoDB"],
        summary="CS undergrad building web apps",
        experience_level="Student",
    )


@pytest.fixture
def recruiter() -> UserProfile:
    return UserProfile(
        name="TechFlow HR",
        email="hr@techflow.com",
        role="recruiter",
        company_name="TechFlow Solutions",
    )


@pytest.fixture
def full_stack_posting() -> Internship:
    return Internship(
        id="3",
        title="Full Stack Engineer Intern",
        company="Innovate Hyderabad",
        location="Jubilee Hills, Hyderabad",
        type="Remote",
        stipend="₹20,000/mo",
        required_skills=["Node.js", "React", "MongoDB", "Express"],
    )


@pytest.fixture
def postings() -> List[Internship]:
    """Small mixed feed in a known order."""
    return [
        Internship(
            id="a",
            title="Data Analyst Intern",
            company="Insight Corp",
            location="Gachibowli, Hyderabad",
            type="On-site",
            stipend="₹30,000/mo",
            required_skills=["SQL", "Excel", "Python"],
        ),
        Internship(
            id="b",
            title="Frontend Developer Intern",
            company="TechFlow Solutions",
            location="Hitech City, Hyderabad",
            type="On-site",
            stipend="₹15,000/mo",
            required_skills=["React", "JavaScript"],
        ),
        Internship(
            id="c",
            title="Backend Engineer",
            company="CloudScale",
            location="Remote",
            type="Remote",
            stipend="Unpaid",
            required_skills=["Node.js", "Express"],
        ),
        Internship(
            id="d",
            title="Marketing Intern",
            company="BrandCo",
            location="Bengaluru",
            type="Hybrid",
            stipend="₹10,000/mo",
            required_skills=["SEO"],
        ),
    ]
