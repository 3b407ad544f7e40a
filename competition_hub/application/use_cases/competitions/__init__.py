"""Use cases for managing competitions."""

from .manage_competitions import create_competition, list_all_competitions, update_competition
from .public_competitions import get_published_competition, list_published_competitions

__all__ = [
    "create_competition",
    "get_published_competition",
    "list_all_competitions",
    "list_published_competitions",
    "update_competition",
]
