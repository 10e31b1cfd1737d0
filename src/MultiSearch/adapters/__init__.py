"""Framework-agnostic adapters between user input and the search controller."""

from __future__ import annotations

from MultiSearch.adapters.search_input import FIELDS_MENU, SUGGESTIONS_MENU, SearchInput

__all__ = ["FIELDS_MENU", "SUGGESTIONS_MENU", "SearchInput"]
