"""Scalar handling: type inference, quoted scalars, keys and comments."""

from __future__ import annotations

import math
import re

from .errors import ParseError, StructuralError, UnterminatedScalarError

_INT_RE = re.compile(r"[-+]?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?", re.ASCII)

_NULLS = frozenset({"", "~", "null"})
_BOOLS = {"true": True, "false": False}
_YAML11_BOOLS = {"yes": True, "no": False, "on": True, "off": False}

QUOTES = ("'", '"')

_ESCAPES = {
    "\\": "\\",
    '"': '"',
    "/": "/",
    " ": " ",
    "\t": "\t",
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "N": "\x85",
    "_": "\xa0",
}
_HEX_ESCAPES = {"x": 2, "u": 4, "U": 8}


# ---------------------------------------------------------------------------
# Type inference
# ---------------------------------------------------------------------------

def infer_scalar(token: str, yaml11_booleans: bool = True) -> object:
    """Convert an unquoted token to None, bool, int, float or str.

    - ``null``, ``~`` or empty → None
    - ``true``/``false`` (and ``yes``/``no``/``on``/``off``) → bool
    - Optionally signed digits → int
    - Digits with one ``.`` and/or an exponent → float
    - Everything else → the token itself

    Numbers that int() refuses (over the interpreter's digit limit) or that
    overflow to an infinite float stay text.
    """
    token = token.strip()
    lowered = token.lower()
    if lowered in _NULLS:
        return None
    if lowered in _BOOLS:
        return _BOOLS[lowered]
    if yaml11_booleans and lowered in _YAML11_BOOLS:
        return _YAML11_BOOLS[lowered]
    if _INT_RE.fullmatch(token):
        try:
            return int(token)
        except ValueError:
            return token
    if _FLOAT_RE.fullmatch(token):
        number = float(token)
        return number if math.isfinite(number) else token
    return token


# ---------------------------------------------------------------------------
# Quoted scalars
# ---------------------------------------------------------------------------

def read_quoted(text: str, start: int, line: int | None = None) -> tuple[str, int]:
    """Read the quoted scalar opening at ``text[start]``.

    Returns the unescaped content and the index just past the closing quote.
    """
    quote = text[start]
    if quote == "'":
        return _read_single(text, start + 1, line)
    return _read_double(text, start + 1, line)


def _read_single(text: str, i: int, line: int | None) -> tuple[str, int]:
    out: list[str] = []
    while i < len(text):
        ch = text[i]
        if ch == "'":
            if text.startswith("''", i):
                out.append("'")
                i += 2
                continue
            return "".join(out), i + 1
        out.append(ch)
        i += 1
    raise UnterminatedScalarError("unterminated single-quoted scalar", line)


def _read_double(text: str, i: int, line: int | None) -> tuple[str, int]:
    out: list[str] = []
    while i < len(text):
        ch = text[i]
        if ch == '"':
            return "".join(out), i + 1
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= len(text):
            break
        code = text[i + 1]
        if code in _ESCAPES:
            out.append(_ESCAPES[code])
            i += 2
        elif code in _HEX_ESCAPES:
            width = _HEX_ESCAPES[code]
            digits = text[i + 2 : i + 2 + width]
            if len(digits) != width or not all(c in "0123456789abcdefABCDEF" for c in digits):
                raise ParseError(f"invalid escape sequence '\\{code}{digits}'", line)
            out.append(chr(int(digits, 16)))
            i += 2 + width
        else:
            raise ParseError(f"invalid escape sequence '\\{code}'", line)
    raise UnterminatedScalarError("unterminated double-quoted scalar", line)


def parse_quoted_token(text: str, line: int | None = None) -> str:
    """Parse a value that is a single quoted scalar, optionally followed by a comment."""
    value, end = read_quoted(text, 0, line)
    rest = text[end:].strip()
    if rest and not rest.startswith("#"):
        raise StructuralError(f"unexpected text after quoted scalar: {rest!r}", line)
    return value


# ---------------------------------------------------------------------------
# Comments and keys
# ---------------------------------------------------------------------------

def strip_plain_comment(text: str) -> str:
    """Drop a trailing ``# comment`` from an unquoted token."""
    for i, ch in enumerate(text):
        if ch == "#" and (i == 0 or text[i - 1] in " \t"):
            return text[:i].rstrip()
    return text.rstrip()


def split_key(content: str, line: int | None = None) -> tuple[str, str] | None:
    """Split ``key: value`` into its key and the raw value text.

    Returns None when *content* is not a mapping entry. Quoted keys are
    unquoted; plain keys are taken verbatim and stay strings.
    """
    if not content or content[0] in "[{#":
        return None

    if content[0] in QUOTES:
        key, end = read_quoted(content, 0, line)
        rest = content[end:].lstrip(" \t")
        if rest.startswith(":") and (len(rest) == 1 or rest[1] in " \t"):
            return key, rest[1:].strip()
        return None

    for i, ch in enumerate(content):
        if ch == "#" and i > 0 and content[i - 1] in " \t":
            return None
        if ch == ":" and (i + 1 == len(content) or content[i + 1] in " \t"):
            key = content[:i].rstrip()
            if not key:
                return None
            return key, content[i + 1 :].strip()
    return None


def is_sequence_item(content: str) -> bool:
    return content == "-" or content.startswith(("- ", "-\t"))
