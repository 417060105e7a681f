"""Ranking: heuristic relevance scorer and feed ranking."""

from astrax.ranking.feed_ranker import FeedFilters, compute_skill_gaps, rank_feed, score_feed
from astrax.ranking.relevance_scorer import match_posting, score, title_keywords

__all__ = [
    "FeedFilters",
    "rank_feed",
    "score_feed",
    "compute_skill_gaps",
    "match_posting",
    "score",
    "title_keywords",
]
