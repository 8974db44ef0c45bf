from __future__ import annotations

import re
from collections.abc import Collection

_LEADING_NON_IDENTIFIER = re.compile(r"^(\d|\W)")


def clean_property_name(name: str) -> str:
    """Quote a member name unless it is usable as a bare identifier.

    Example:
        >>> clean_property_name("index")
        'index'
        >>> clean_property_name("if_seq_no.keyword")
        '"if_seq_no.keyword"'
    """
    if "." in name or "-" in name or _LEADING_NON_IDENTIFIER.match(name):
        return f'"{name}"'
    return name


def stability_comment(name: str, stable_names: Collection[str]) -> str:
    """Build the JSDoc stability block placed above an interface header."""
    if name in stable_names:
        level = "STABLE"
    elif name.endswith("Request") or name.endswith("Response"):
        level = "UNSTABLE"
    else:
        return ""
    lines = [
        "  /**",
        f"   * @description Stability: {level}",
        "   */",
    ]
    return "\n".join(lines) + "\n"
