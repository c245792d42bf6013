"""Business logic services."""

from .candidate_service import CandidateService
from .blog_service import BlogService
