"""Incremental search."""

from .engine import SEARCH_PROMPT, SearchCallback, SearchEngine, SearchState

__all__ = ["SEARCH_PROMPT", "SearchCallback", "SearchEngine", "SearchState"]
