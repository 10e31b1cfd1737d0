"""Text input behavior of a multi-search box, without any UI toolkit.

Handles the `Label:value` shorthand, both typed and pasted, and keeps the
typed text until it is submitted as a clause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from MultiSearch.core.models import ALL_FIELDS
from MultiSearch.core.query import SearchClause

if TYPE_CHECKING:
    from MultiSearch.services.search import MultiSearch

FIELDS_MENU = "fields"
SUGGESTIONS_MENU = "searchSuggestions"


class SearchInput:
    """Search box state bound to a `MultiSearch` controller."""

    def __init__(self, search: MultiSearch) -> None:
        self.search = search
        self.text = ""
        self.is_menu_open = False

    @property
    def shown_menu(self) -> str:
        """Menu to show: suggestions for a suggestion field, else fields."""
        return SUGGESTIONS_MENU if self.search.selected_field.show_suggestions else FIELDS_MENU

    @property
    def has_field(self) -> bool:
        return self.search.selected_field.name != ALL_FIELDS

    def type_text(self, text: str) -> None:
        """Replace the typed text."""
        self.text = text

    def key(self, char: str) -> None:
        """Handle one typed character.

        `:` after a field label selects that field instead of being typed.
        """
        if char == ":" and not self.has_field:
            descriptor = self.search.field_by_label(self.text)
            if descriptor is not None:
                self._select(descriptor.name)
                self.text = ""
                return
        self.text += char

    def paste(self, text: str) -> bool:
        """Handle pasted text.

        `Label:value` selects the field and keeps `value` as typed text.

        Returns:
            True if the paste was consumed as shorthand. Otherwise the caller
            should paste the text normally.
        """
        if ":" not in text:
            return False
        label, _, value = text.partition(":")
        descriptor = self.search.field_by_label(label)
        if descriptor is None:
            return False
        self._select(descriptor.name)
        self.text = value
        return True

    def backspace(self) -> None:
        """Delete one character; on empty text, go back to all fields."""
        if self.text:
            self.text = self.text[:-1]
        elif self.has_field:
            self.search.select_all_fields()
            self.is_menu_open = True

    def escape(self) -> None:
        """Close the menu; with an empty text and closed menu, reset the field."""
        if not self.text and self.has_field and not self.is_menu_open:
            self.search.select_all_fields()
            self.is_menu_open = True
        else:
            self.is_menu_open = False

    def submit(self) -> SearchClause | None:
        """Add the typed text as a clause for the selected field."""
        if not self.text:
            return None
        clause = self.search.add_clause(self.text)
        self.text = ""
        self.is_menu_open = False
        return clause

    def pick_suggestion(self, value: str) -> SearchClause:
        """Add a clause from a suggestion of the selected field."""
        clause = self.search.select_suggestion(value)
        self.text = ""
        self.is_menu_open = False
        return clause

    def clear(self) -> None:
        """Clear the text and the selected field."""
        self.text = ""
        self.search.select_all_fields()
        self.is_menu_open = True

    def _select(self, name: str) -> None:
        self.search.select_field(name)
        self.is_menu_open = self.search.selected_field.show_suggestions
