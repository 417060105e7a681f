"""Match Agent: LLM ranking of the internship feed against a student profile."""

import json
from typing import Any, Dict, List

from pydantic import ValidationError

from astrax.ranking.feed_ranker import score_feed, sort_by_score
from astrax.schemas.internship import Internship
from astrax.schemas.llm_result import LLMSuccess
from astrax.schemas.match import RankingEntry
from astrax.schemas.profile import UserProfile
from astrax.services.llm_client import LLMClient, request_json
from astrax.utils.logger import get_logger

logger = get_logger(__name__)

MATCH_SYSTEM_PROMPT = """Rank the provided internships based on the student's profile.
Response must be a JSON object containing a property "rankings" which is an array.
Example: { "rankings": [{"id": "1", "matchScore": 90, "matchReason": "Fit"}] }"""

PENDING_REASON = "Pending analysis..."
HEURISTIC_REASON = "Estimated from skill overlap"


def _brief(internships: List[Internship]) -> str:
    return json.dumps(
        [
            {
                "id": i.id,
                "title": i.title,
                "company": i.company,
                "requiredSkills": i.required_skills,
                "description": i.description,
            }
            for i in internships
        ],
        ensure_ascii=False,
    )


def _parse_rankings(data: Any) -> Dict[str, RankingEntry]:
    """Accept {"rankings": [...]} or a bare list; skip entries that do not validate."""
    items = data.get("rankings", []) if isinstance(data, dict) else data
    if not isinstance(items, list):
        return {}
    rankings: Dict[str, RankingEntry] = {}
    for item in items:
        try:
            entry = RankingEntry.model_validate(item)
        except ValidationError as e:
            logger.debug("Skipping ranking entry %r: %s", item, e)
            continue
        rankings.setdefault(entry.id, entry)
    return rankings


def heuristic_ranking(profile: UserProfile, internships: List[Internship]) -> List[Internship]:
    """Relevance-scorer ranking used when the LLM is unavailable."""
    scored = score_feed(profile.skills, internships)
    return sort_by_score([i.model_copy(update={"match_reason": HEURISTIC_REASON}) for i in scored])


async def match_internships(
    profile: UserProfile,
    internships: List[Internship],
    client: LLMClient,
) -> List[Internship]:
    """
    Score every internship for the profile, highest first.
    Internships the model leaves out get 0 and a pending reason. Any non-success
    LLM result falls back to heuristic_ranking.
    """
    if not internships:
        return []
    user_prompt = (
        f"Student Profile: Skills [{', '.join(profile.skills)}], Summary: {profile.summary}.\n\n"
        f"Internships: {_brief(internships)}\n\n"
        "Rank them and provide matchScore (0-100) and matchReason."
    )
    result = await request_json(client, MATCH_SYSTEM_PROMPT, user_prompt)
    if not isinstance(result, LLMSuccess):
        logger.warning("LLM ranking unavailable (%s); using heuristic scores", result.status)
        return heuristic_ranking(profile, internships)

    rankings = _parse_rankings(result.data)
    logger.info("LLM ranked %s of %s internships", len(rankings), len(internships))
    merged = []
    for internship in internships:
        entry = rankings.get(internship.id)
        merged.append(
            internship.model_copy(
                update={
                    "match_score": entry.match_score if entry else 0,
                    "match_reason": (entry.match_reason if entry else None) or PENDING_REASON,
                }
            )
        )
    return sort_by_score(merged)


def merge_ranking(
    profile: UserProfile,
    internships: List[Internship],
    ranked: List[Internship],
) -> List[Internship]:
    """
    Carry an earlier ranking onto the current feed, highest first.

    Listings present in ranked keep their score and reason but take the rest of
    their fields from internships. Listings posted since get heuristic scores,
    and listings no longer in the feed are dropped.
    """
    previous = {i.id: i for i in ranked}
    estimated = {i.id: i for i in heuristic_ranking(profile, [i for i in internships if i.id not in previous])}
    merged = []
    for internship in internships:
        prior = previous.get(internship.id)
        if prior is None:
            merged.append(estimated[internship.id])
        else:
            merged.append(
                internship.model_copy(update={"match_score": prior.match_score, "match_reason": prior.match_reason})
            )
    return sort_by_score(merged)
