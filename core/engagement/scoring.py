#!/usr/bin/env python3
"""
Engagement Scoring - Weighted score formula for candidate engagement.
"""

from typing import Dict

# Profile votes carry the most weight, then blog comments, profile comments
# and blog reactions.
ENGAGEMENT_WEIGHTS: Dict[str, float] = {
    'profile_vote': 3.0,
    'blog_reaction': 1.0,
    'blog_comment': 2.0,
    'profile_comment': 1.5,
}


def calculate_engagement_score(
    profile_votes: int,
    blog_reactions: int,
    blog_comments: int,
    profile_comments: int
) -> float:
    """
    Calculate the weighted engagement score for a candidate.

    Args:
        profile_votes: Number of votes cast on the candidate's profile.
        blog_reactions: Reactions summed over the candidate's blogs.
        blog_comments: Comments summed over the candidate's blogs.
        profile_comments: Comments left directly on the profile.

    Returns:
        3 * votes + 1 * reactions + 2 * blog comments + 1.5 * profile comments
    """
    return (
        profile_votes * ENGAGEMENT_WEIGHTS['profile_vote']
        + blog_reactions * ENGAGEMENT_WEIGHTS['blog_reaction']
        + blog_comments * ENGAGEMENT_WEIGHTS['blog_comment']
        + profile_comments * ENGAGEMENT_WEIGHTS['profile_comment']
    )
