"""
Tests for the heuristic relevance scorer.
"""

import pytest

from astrax.exceptions import InvalidArgumentError
from astrax.ranking.relevance_scorer import (
    is_covered,
    match_posting,
    normalize_skills,
    score,
    score_breakdown,
    title_keywords,
    validate_skill_list,
)
from astrax.schemas.internship import Internship
from astrax.schemas.profile import UserProfile


class TestTitleKeywords:
    """Title words used when a posting has no required skills."""

    def test_keeps_words_longer_than_three(self):
        assert title_keywords("Data Analyst Intern") == ["data", "analyst", "intern"]

    def test_drops_short_words(self):
        assert title_keywords("UI/UX and QA Lead") == ["ui/ux", "lead"]

    def test_empty_title(self):
        assert title_keywords("") == []


class TestNormalization:
    def test_lowercases_and_trims(self):
        assert normalize_skills(["  React ", "SQL"]) == ["react", "sql"]

    def test_blank_entries_dropped(self):
        assert normalize_skills(["", "   ", "Go"]) == ["go"]

    def test_containment_either_direction(self):
        assert is_covered("react native", ["react"])
        assert is_covered("js", ["node.js"])
        assert not is_covered("express", ["react", "mongodb"])


class TestScore:
    """Scoring properties."""

    def test_full_stack_scenario(self):
        """Three of four required skills covered gives 75."""
        assert score(
            ["React", "Node.js", "MongoDB"],
            "Full Stack Engineer Intern",
            ["Node.js", "React", "MongoDB", "Express"],
        ) == 75

    def test_empty_profile_scores_zero(self):
        assert score([], "Frontend Developer Intern", ["React"]) == 0

    def test_blank_only_profile_scores_zero(self):
        assert score(["", "  "], "Frontend Developer Intern", ["React"]) == 0

    def test_no_requirements_and_no_keywords(self):
        assert score(["Python"], "", []) == 0

    def test_exact_overlap_is_100(self):
        assert score(["SQL", "Excel"], "Ops", ["sql", "EXCEL"]) == 100

    def test_containment_counts(self):
        assert score(["react"], "Backend Engineer", ["React Native"]) == 100

    def test_title_fallback_without_match(self):
        assert score(["python", "sql"], "Data Analyst Intern", []) == 0

    def test_title_fallback_with_match(self):
        """One of three title keywords covered."""
        assert score(["data"], "Data Analyst Intern", []) == 33

    def test_title_bonus_clamped_at_100(self):
        result = score_breakdown(["python"], "Python Developer", ["Python"])
        assert result.matched == 1.5
        assert result.total == 1
        assert result.score == 100

    def test_title_bonus_only_once(self):
        result = score_breakdown(["python", "developer"], "Python Developer Role", ["Python", "Django"])
        assert result.matched == 1.5
        assert result.total == 2
        assert result.score == 75

    def test_half_rounds_up(self):
        """Title bonus alone against four required skills: 0.5 / 4 = 12.5 -> 13."""
        assert score(["engineer"], "Engineer Intern", ["Go", "Rust", "Scala", "Elixir"]) == 13

    def test_blank_required_skill_counts_and_matches(self):
        """A whitespace-only requirement is part of the total and covered by any skill."""
        result = score_breakdown(["python"], "Ops", ["Go", "  "])
        assert result.total == 2
        assert result.matched == 1
        assert result.score == 50

    def test_only_blank_required_skills(self):
        assert score(["sql"], "Ops", [""]) == 100

    def test_bonus_not_applied_without_required_skills(self):
        result = score_breakdown(["engineer"], "Engineer Intern", [])
        assert result.matched == 1
        assert result.total == 2
        assert result.score == 50

    @pytest.mark.parametrize(
        "skills,title,required",
        [
            (["a"], "alpha beta gamma delta", []),
            (["python", "python", "python"], "Python Python", ["python"]),
            (["x" * 50], "", ["x"]),
            (["r"], "Frontend Developer Intern", ["React", "Redux", "Router"]),
        ],
    )
    def test_bounded(self, skills, title, required):
        assert 0 <= score(skills, title, required) <= 100

    def test_deterministic(self):
        args = (["React", "Node.js"], "Full Stack Engineer Intern", ["Node.js", "React", "Express"])
        assert len({score(*args) for _ in range(5)}) == 1

    def test_does_not_mutate_inputs(self):
        skills = [" React "]
        required = ["React"]
        score(skills, "Frontend", required)
        assert skills == [" React "]
        assert required == ["React"]


class TestValidation:
    """Input validation happens at the match_posting boundary."""

    def test_none_skill_list_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_skill_list(None, "skills")

    def test_string_instead_of_list_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_skill_list("python", "skills")

    def test_non_string_items_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_skill_list(["python", 3], "skills")

    def test_tuple_accepted(self):
        assert validate_skill_list(("a", "b"), "skills") == ["a", "b"]

    def test_match_posting_requires_profile(self, full_stack_posting):
        with pytest.raises(InvalidArgumentError):
            match_posting(None, full_stack_posting)

    def test_match_posting_requires_posting(self, student):
        with pytest.raises(InvalidArgumentError):
            match_posting(student, None)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            validate_skill_list(None, "skills")

    def test_match_posting_scores(self, student, full_stack_posting):
        result = match_posting(student, full_stack_posting)
        assert result.score == 75
        assert result.matched == 3
        assert result.total == 4

    def test_match_posting_with_empty_skills(self, full_stack_posting):
        result = match_posting(UserProfile(name="New"), full_stack_posting)
        assert result.score == 0

    def test_match_posting_title_fallback(self, student):
        posting = Internship(id="x", title="React Developer", company="Acme")
        assert match_posting(student, posting).score == 50
