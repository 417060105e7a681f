"""
Tests for feed scoring, filtering, sorting and skill gaps.
"""

import pytest

from astrax.exceptions import InvalidArgumentError
from astrax.ranking.feed_ranker import (
    FeedFilters,
    compute_skill_gaps,
    rank_feed,
    score_feed,
    sort_by_score,
)


class TestScoreFeed:
    def test_sets_match_scores(self, student, postings):
        scored = score_feed(student.skills, postings)
        assert [p.match_score for p in scored] == [0, 50, 50, 0]

    def test_returns_copies(self, student, postings):
        score_feed(student.skills, postings)
        assert all(p.match_score is None for p in postings)

    def test_rescoring_follows_profile_changes(self, postings):
        before = score_feed(["React"], postings)
        after = score_feed(["SQL", "Excel", "Python"], postings)
        assert before[0].match_score == 0
        assert after[0].match_score == 100

    def test_rejects_invalid_skills(self, postings):
        with pytest.raises(InvalidArgumentError):
            score_feed(None, postings)


class TestRankFeed:
    """Filter, then stable sort by score."""

    def test_sorted_descending_with_stable_ties(self, student, postings):
        ranked = rank_feed(student.skills, postings)
        assert [p.id for p in ranked] == ["b", "c", "a", "d"]

    def test_empty_profile_keeps_feed_order(self, postings):
        ranked = rank_feed([], postings)
        assert [p.id for p in ranked] == ["a", "b", "c", "d"]
        assert all(p.match_score == 0 for p in ranked)

    def test_type_filter(self, student, postings):
        ranked = rank_feed(student.skills, postings, FeedFilters(type="On-site"))
        assert [p.id for p in ranked] == ["b", "a"]

    def test_location_filter(self, student, postings):
        ranked = rank_feed(student.skills, postings, FeedFilters(location="Hyderabad"))
        assert {p.id for p in ranked} == {"a", "b"}

    def test_location_filter_is_case_sensitive(self, student, postings):
        assert rank_feed(student.skills, postings, FeedFilters(location="hyderabad")) == []

    def test_min_stipend_filter(self, student, postings):
        ranked = rank_feed(student.skills, postings, FeedFilters(min_stipend=15000))
        assert [p.id for p in ranked] == ["b", "a"]

    def test_search_is_case_insensitive(self, student, postings):
        ranked = rank_feed(student.skills, postings, FeedFilters(search="INTERN"))
        assert {p.id for p in ranked} == {"a", "b", "d"}

    def test_search_matches_company(self, student, postings):
        ranked = rank_feed(student.skills, postings, FeedFilters(search="techflow"))
        assert [p.id for p in ranked] == ["b"]

    def test_filters_combine(self, student, postings):
        filters = FeedFilters(search="intern", type="On-site", location="Hyderabad", min_stipend=20000)
        assert [p.id for p in rank_feed(student.skills, postings, filters)] == ["a"]

    def test_empty_feed(self, student):
        assert rank_feed(student.skills, []) == []

    def test_sort_treats_unscored_as_zero(self, postings):
        scored = [postings[0], postings[1].model_copy(update={"match_score": 10})]
        assert [p.id for p in sort_by_score(scored)] == ["b", "a"]


class TestSkillGaps:
    def test_missing_skills_in_first_seen_order(self, student, postings):
        assert compute_skill_gaps(postings, student.skills) == [
            "SQL",
            "Excel",
            "Python",
            "JavaScript",
            "Express",
            "SEO",
        ]

    def test_deduplicated_case_insensitively(self, student, postings):
        dup = postings[2].model_copy(update={"id": "e", "required_skills": ["express", "EXPRESS"]})
        gaps = compute_skill_gaps(postings + [dup], student.skills)
        assert gaps.count("Express") == 1
        assert "express" not in gaps

    def test_containment_covers(self, postings):
        assert "JavaScript" not in compute_skill_gaps(postings, ["java"])

    def test_no_gaps_when_all_covered(self, postings):
        skills = ["SQL", "Excel", "Python", "React", "JavaScript", "Node.js", "Express", "SEO"]
        assert compute_skill_gaps(postings, skills) == []
