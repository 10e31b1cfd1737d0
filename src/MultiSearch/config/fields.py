"""Field declarations: searchable fields, suggestions and value coercion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from MultiSearch.config.common import (
    expect_bool,
    expect_list,
    expect_mapping,
    expect_str,
    expect_str_list,
    get_required_value,
    reject_unknown_keys,
)
from MultiSearch.core.models import ALL_FIELDS, FieldDescriptor

_ALLOWED_TYPES = {"auto", "date"}
_ALLOWED_KEYS = {"name", "label", "show_suggestions", "strict_suggestions", "suggestions", "type"}


@dataclass(frozen=True, slots=True)
class FieldsConfig:
    """Declared fields and the fields whose values are loaded as dates."""

    descriptors: tuple[FieldDescriptor, ...]
    date_fields: tuple[str, ...] = ()

    def names(self) -> tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self.descriptors)


def load_fields(raw: Mapping[str, Any]) -> FieldsConfig:
    """Load the `fields` list from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or unknown keys are present.
    """
    items = raw.get("fields")
    if items is None:
        raise ValueError("Missing required config: fields")

    descriptors: list[FieldDescriptor] = []
    date_fields: list[str] = []
    for idx, item in enumerate(expect_list(items, "fields")):
        config_key = f"fields[{idx}]"
        descriptor, field_type = parse_field(item, config_key)
        descriptors.append(descriptor)
        if field_type == "date":
            date_fields.append(descriptor.name)
    return FieldsConfig(descriptors=tuple(descriptors), date_fields=tuple(date_fields))


def parse_field(value: Any, config_key: str) -> tuple[FieldDescriptor, str]:
    """Parse one field mapping into a descriptor and its declared type.

    `label` defaults to the field name.

    Raises:
        TypeError: If the field shape or types are invalid.
        ValueError: If keys are unknown or the type is not supported.
    """
    value = expect_mapping(value, config_key)
    reject_unknown_keys(value, _ALLOWED_KEYS, config_key)

    name = expect_str(get_required_value(value, "name", f"{config_key}.name"), f"{config_key}.name").strip()
    label = expect_str(value.get("label", name), f"{config_key}.label").strip()
    suggestions = value.get("suggestions")
    field_type = expect_str(value.get("type", "auto"), f"{config_key}.type").strip().lower()
    if field_type not in _ALLOWED_TYPES:
        raise ValueError(f"{config_key}.type must be one of {sorted(_ALLOWED_TYPES)}")

    descriptor = FieldDescriptor(
        name=name,
        label=label,
        show_suggestions=expect_bool(value.get("show_suggestions", False), f"{config_key}.show_suggestions"),
        strict_suggestions=expect_bool(value.get("strict_suggestions", False), f"{config_key}.strict_suggestions"),
        suggestions=(
            tuple(expect_str_list(suggestions, f"{config_key}.suggestions")) if suggestions is not None else None
        ),
    )
    return descriptor, field_type


def check_fields(config: FieldsConfig) -> None:
    """Validate field constraints.

    Raises:
        ValueError: If names are empty, duplicated or reserved, or suggestion
            options are inconsistent.
    """
    if not config.descriptors:
        raise ValueError("fields must include at least one field")

    seen_names: set[str] = set()
    seen_labels: set[str] = set()
    for idx, descriptor in enumerate(config.descriptors):
        config_key = f"fields[{idx}]"
        if not descriptor.name:
            raise ValueError(f"{config_key}.name must not be empty")
        if descriptor.name == ALL_FIELDS:
            raise ValueError(f"{config_key}.name is reserved: {ALL_FIELDS}")
        if descriptor.name in seen_names:
            raise ValueError(f"{config_key}.name is duplicated: {descriptor.name}")
        seen_names.add(descriptor.name)

        label_key = descriptor.label.casefold()
        if label_key in seen_labels:
            raise ValueError(f"{config_key}.label is duplicated: {descriptor.label}")
        seen_labels.add(label_key)

        if descriptor.strict_suggestions and not descriptor.show_suggestions:
            raise ValueError(f"{config_key}.strict_suggestions requires {config_key}.show_suggestions=true")
        if descriptor.suggestions is not None and not descriptor.show_suggestions:
            raise ValueError(f"{config_key}.suggestions requires {config_key}.show_suggestions=true")
