"""Input validation helpers."""
from __future__ import annotations

import re

GO_KEYWORDS = frozenset(
    {
        "break", "case", "chan", "const", "continue", "default", "defer", "else",
        "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
        "map", "package", "range", "return", "select", "struct", "switch", "type",
        "var",
    }
)
_IDENTIFIER_RE = re.compile(r"^[^\W\d]\w*$")


def ensure_package_name(name: str) -> str:
    """Ensure ``name`` can appear in a Go package clause."""
    if not isinstance(name, str) or not name:
        raise ValueError("package name must be a non-empty string")
    if not _IDENTIFIER_RE.match(name) or name == "_" or name in GO_KEYWORDS:
        raise ValueError(f"invalid package name {name!r}")
    return name


__all__ = ["GO_KEYWORDS", "ensure_package_name"]
