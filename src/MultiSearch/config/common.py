from __future__ import annotations

"""Shared helpers for configuration loading and validation.

Every helper receives the full key path of the value (`search.true_label`,
`fields[2].name`) and puts it in the error message.
"""

from typing import Any, Iterable, Mapping


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Return a mapping section from root config.

    Raises:
        ValueError: If section is required but missing.
        TypeError: If section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    return expect_mapping(section, key)


def get_required_value(section: Mapping[str, Any], field: str, config_key: str) -> Any:
    """Return a required field value from a section.

    Raises:
        ValueError: If field is missing.
    """
    if field not in section:
        raise ValueError(f"Missing required config: {config_key}")
    return section[field]


def reject_unknown_keys(section: Mapping[str, Any], allowed: Iterable[str], config_key: str) -> None:
    """Fail on keys a section does not define, which are usually typos.

    Raises:
        ValueError: Listing the unknown keys.
    """
    unknown = {str(key) for key in section} - set(allowed)
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")


def expect_mapping(value: Any, config_key: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")
    return value


def expect_str(value: Any, config_key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_optional_str(value: Any, config_key: str) -> str | None:
    """Validate a string that may be null; blank strings become None."""
    if value is None:
        return None
    return expect_str(value, config_key).strip() or None


def expect_bool(value: Any, config_key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_list(value: Any, config_key: str) -> list[Any]:
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    return value


def expect_str_list(value: Any, config_key: str) -> list[str]:
    """Validate a list of strings.

    YAML reads bare `yes`, `on` or `1` as booleans or numbers, so such tokens
    must be quoted to be accepted here.
    """
    return [expect_str(item, f"{config_key}[{idx}]") for idx, item in enumerate(expect_list(value, config_key))]
