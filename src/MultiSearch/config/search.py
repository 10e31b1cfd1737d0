"""Search domain configuration: matching and clause behavior."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from MultiSearch.config.common import (
    expect_bool,
    expect_optional_str,
    expect_str,
    expect_str_list,
    get_section,
    reject_unknown_keys,
)
from MultiSearch.matchers.boolean import DEFAULT_FALSY_VALUES, DEFAULT_TRUTHY_VALUES
from MultiSearch.matchers.dispatch import MatchOptions


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated matching and clause options.

    Attributes:
        case_sensitive: Match strings without case folding.
        truthy_values: Query tokens matching True booleans.
        falsy_values: Query tokens matching False booleans.
        true_label: Suggestion shown for True booleans.
        false_label: Suggestion shown for False booleans.
        show_empty_categories: Keep categories left without records.
        override_existing_queries_with_same_field: Keep one clause per field,
            the newest one wins.
        global_search_replacement: Field searched instead of all fields when
            no field is selected.
    """

    case_sensitive: bool = False
    truthy_values: tuple[str, ...] = DEFAULT_TRUTHY_VALUES
    falsy_values: tuple[str, ...] = DEFAULT_FALSY_VALUES
    true_label: str = "Yes"
    false_label: str = "No"
    show_empty_categories: bool = False
    override_existing_queries_with_same_field: bool = False
    global_search_replacement: str | None = None

    def match_options(self) -> MatchOptions:
        """Options passed to the query matchers.

        Boolean tokens are folded like the queries they are compared with.
        """
        if self.case_sensitive:
            return MatchOptions(
                case_sensitive=True,
                truthy_values=self.truthy_values,
                falsy_values=self.falsy_values,
            )
        return MatchOptions(
            case_sensitive=False,
            truthy_values=tuple(token.casefold() for token in self.truthy_values),
            falsy_values=tuple(token.casefold() for token in self.falsy_values),
        )


_SEARCH_KEYS = tuple(field.name for field in fields(SearchConfig))


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    Every key is optional and falls back to the `SearchConfig` default.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If unknown keys are present.
    """
    section = get_section(raw, "search", required=False)
    reject_unknown_keys(section, _SEARCH_KEYS, "search")
    defaults = SearchConfig()
    return SearchConfig(
        case_sensitive=expect_bool(section.get("case_sensitive", defaults.case_sensitive), "search.case_sensitive"),
        truthy_values=_tokens(section, "truthy_values", defaults.truthy_values),
        falsy_values=_tokens(section, "falsy_values", defaults.falsy_values),
        true_label=expect_str(section.get("true_label", defaults.true_label), "search.true_label"),
        false_label=expect_str(section.get("false_label", defaults.false_label), "search.false_label"),
        show_empty_categories=expect_bool(
            section.get("show_empty_categories", defaults.show_empty_categories),
            "search.show_empty_categories",
        ),
        override_existing_queries_with_same_field=expect_bool(
            section.get(
                "override_existing_queries_with_same_field",
                defaults.override_existing_queries_with_same_field,
            ),
            "search.override_existing_queries_with_same_field",
        ),
        global_search_replacement=expect_optional_str(
            section.get("global_search_replacement"),
            "search.global_search_replacement",
        ),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    if not config.truthy_values:
        raise ValueError("search.truthy_values must not be empty")
    if not config.falsy_values:
        raise ValueError("search.falsy_values must not be empty")
    overlap = set(config.truthy_values) & set(config.falsy_values)
    if overlap:
        raise ValueError(f"search.truthy_values and search.falsy_values overlap: {sorted(overlap)}")
    if not config.true_label.strip() or not config.false_label.strip():
        raise ValueError("search.true_label and search.false_label must not be empty")
    if config.true_label == config.false_label:
        raise ValueError("search.true_label must differ from search.false_label")


def _tokens(section: Mapping[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Parse a boolean token list, dropping blanks and duplicates."""
    if key not in section:
        return default
    items = expect_str_list(section[key], f"search.{key}")
    return tuple(dict.fromkeys(item.strip() for item in items if item.strip()))
