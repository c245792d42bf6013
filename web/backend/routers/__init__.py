"""API route handlers."""

from .candidates import router as candidates_router
from .panel import router as panel_router
from .blogs import router as blogs_router
