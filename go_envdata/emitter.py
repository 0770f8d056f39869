#!/usr/bin/env python3
"""Render a Go source file that seeds environment variable defaults."""
from __future__ import annotations

import argparse
import json
import string
import sys
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from .config import Mode
from .utils.validation import ensure_package_name

TEMPLATE = string.Template(
    """\
// Package ${package} sets default values for environment variables.
// Usage: in any package that calls os.Getenv or references the environment, include:
//
//     import _ "full/path/to/${package}"
//
package ${package}

import "os"

var defaults = map[string]string{${entries}}

func init() {
\tsetDefaultEnv()
}

func setDefaultEnv() {
\tfor k, v := range defaults {
\t\tif os.Getenv(k) == "" {
\t\t\tos.Setenv(k, v)
\t\t}
\t}
}
"""
)

DEFAULTS_OPENING = "var defaults = map[string]string{"

_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}
_SHORT_UNESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "f": 0x0C,
    "n": 0x0A,
    "r": 0x0D,
    "t": 0x09,
    "v": 0x0B,
    "\\": 0x5C,
    '"': 0x22,
}
_HEX_DIGITS = frozenset(string.hexdigits)
_OCT_DIGITS = frozenset(string.octdigits)


def _escape_char(ch: str) -> str:
    if ch in _SHORT_ESCAPES:
        return _SHORT_ESCAPES[ch]
    code = ord(ch)
    if 0xDC80 <= code <= 0xDCFF:
        # os.environ decodes undecodable bytes with surrogateescape.
        return f"\\x{code - 0xDC00:02x}"
    if 0xD800 <= code <= 0xDFFF:
        raise ValueError(f"lone surrogate U+{code:04X} cannot be written as a Go string")
    if ch.isprintable():
        return ch
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(value: str) -> str:
    """Return ``value`` as a double-quoted Go string literal.

    Surrogate-escaped bytes (U+DC80..U+DCFF, as produced by ``os.environ``
    for undecodable input) become ``\\xNN``; any other lone surrogate has no
    byte representation and raises ``ValueError``.
    """
    return '"' + "".join(_escape_char(ch) for ch in value) + '"'


def _take_digits(body: str, start: int, count: int, allowed: frozenset) -> str:
    digits = body[start:start + count]
    if len(digits) != count or not all(ch in allowed for ch in digits):
        raise ValueError(f"malformed escape sequence at offset {start - 1}")
    return digits


def unquote(literal: str) -> str:
    """Parse one Go interpreted string literal back into a Python string."""
    if len(literal) < 2 or literal[0] != '"' or literal[-1] != '"':
        raise ValueError(f"not a quoted string literal: {literal!r}")
    body = literal[1:-1]
    out = bytearray()
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == '"' or ch == "\n":
            raise ValueError(f"unescaped {ch!r} inside string literal")
        if ch != "\\":
            out += ch.encode("utf-8", "surrogateescape")
            i += 1
            continue
        if i + 1 >= len(body):
            raise ValueError("string literal ends with a lone backslash")
        esc = body[i + 1]
        i += 2
        if esc in _SHORT_UNESCAPES:
            out.append(_SHORT_UNESCAPES[esc])
        elif esc == "x":
            out.append(int(_take_digits(body, i, 2, _HEX_DIGITS), 16))
            i += 2
        elif esc in _OCT_DIGITS:
            value = int(_take_digits(body, i - 1, 3, _OCT_DIGITS), 8)
            if value > 0xFF:
                raise ValueError(f"octal escape out of range at offset {i - 2}")
            out.append(value)
            i += 2
        elif esc in ("u", "U"):
            width = 4 if esc == "u" else 8
            code = int(_take_digits(body, i, width, _HEX_DIGITS), 16)
            if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                raise ValueError(f"invalid Unicode code point U+{code:04X}")
            out += chr(code).encode("utf-8")
            i += width
        else:
            raise ValueError(f"unknown escape sequence \\{esc}")
    return bytes(out).decode("utf-8", "surrogateescape")


def format_entry(name: str, value: str) -> str:
    return f"\t{quote(name)}: {quote(value)},"


def render_entries(snapshot: Mapping[str, str]) -> str:
    if not snapshot:
        return ""
    lines = sorted(format_entry(name, value) for name, value in snapshot.items())
    return "\n" + "\n".join(lines) + "\n"


def emit(mode: Union[Mode, str], package_name: str, snapshot: Mapping[str, str]) -> bytes:
    """Render the Go source for ``snapshot``.

    Entries are sorted by their rendered line so the output depends only on
    the inputs, never on the order the host enumerated them in. In dev mode
    the snapshot is discarded and the file only reads the live environment.
    """
    mode = Mode(mode)
    ensure_package_name(package_name)
    if mode is Mode.DEV:
        snapshot = {}
    source = TEMPLATE.substitute(package=package_name, entries=render_entries(snapshot))
    return source.encode("utf-8")


def _scan_literal(text: str, start: int) -> int:
    """Return the index just past the string literal starting at ``start``."""
    if start >= len(text) or text[start] != '"':
        raise ValueError(f"expected string literal at offset {start}")
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == '"':
            return i + 1
        if ch == "\n":
            break
        i += 1
    raise ValueError(f"unterminated string literal at offset {start}")


def _parse_entry_line(line: str) -> Tuple[str, str]:
    if not line.startswith("\t"):
        raise ValueError(f"malformed defaults entry: {line!r}")
    key_end = _scan_literal(line, 1)
    if line[key_end:key_end + 2] != ": ":
        raise ValueError(f"malformed defaults entry: {line!r}")
    value_end = _scan_literal(line, key_end + 2)
    if line[value_end:] != ",":
        raise ValueError(f"malformed defaults entry: {line!r}")
    return unquote(line[1:key_end]), unquote(line[key_end + 2:value_end])


def read_defaults(source: Union[bytes, str]) -> Dict[str, str]:
    """Extract the ``defaults`` map from a file produced by :func:`emit`."""
    text = source.decode("utf-8") if isinstance(source, bytes) else source
    lines = text.splitlines()
    for index, line in enumerate(lines):
        if not line.startswith(DEFAULTS_OPENING):
            continue
        rest = line[len(DEFAULTS_OPENING):]
        if rest == "}":
            return {}
        if rest:
            raise ValueError(f"malformed defaults declaration: {line!r}")
        defaults: Dict[str, str] = {}
        for entry in lines[index + 1:]:
            if entry == "}":
                return defaults
            name, value = _parse_entry_line(entry)
            defaults[name] = value
        raise ValueError("defaults map is not closed")
    raise ValueError("no defaults map found")


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print the defaults captured in a generated Go file as JSON")
    parser.add_argument("source", type=Path, help="Go file produced by go-envdata")
    args = parser.parse_args(argv)

    defaults = read_defaults(args.source.read_bytes())
    json.dump(defaults, sys.stdout, ensure_ascii=False, indent=2, sort_keys=True)
    print()
    return 0


__all__ = [
    "TEMPLATE",
    "emit",
    "format_entry",
    "quote",
    "read_defaults",
    "render_entries",
    "unquote",
]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
