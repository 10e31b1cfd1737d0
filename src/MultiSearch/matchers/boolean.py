from __future__ import annotations

from typing import Sequence

DEFAULT_TRUTHY_VALUES: tuple[str, ...] = ("true", "1", "on", "yes", "y", "t", "✓")
DEFAULT_FALSY_VALUES: tuple[str, ...] = ("false", "0", "off", "no", "n", "f", "x")


def is_boolean_query_match(
    value: bool,
    q: str,
    *,
    truthy_values: Sequence[str] | None = None,
    falsy_values: Sequence[str] | None = None,
) -> bool:
    """Check if a boolean value matches one of the configured tokens.

    Tokens are compared as-is; case folding is the caller's job.

    Args:
        value: Boolean to check.
        q: Query token, e.g. `yes` or `0`.
        truthy_values: Tokens accepted for True. Defaults to
            `DEFAULT_TRUTHY_VALUES`.
        falsy_values: Tokens accepted for False. Defaults to
            `DEFAULT_FALSY_VALUES`.

    Returns:
        True if the token belongs to the set matching `value`.
    """
    if value:
        return q in (truthy_values or DEFAULT_TRUTHY_VALUES)
    return q in (falsy_values or DEFAULT_FALSY_VALUES)
