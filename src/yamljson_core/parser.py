"""Block parser: indentation-structured lines → raw Python graph.

The output is made of dicts, lists and plain scalars; the converter passes it
through the normalizer afterwards.
"""

from __future__ import annotations

import re

from .errors import StructuralError
from .flow import parse_flow
from .options import DEFAULT_OPTIONS, ConverterOptions
from .reader import Line
from .scalars import (
    QUOTES,
    infer_scalar,
    is_sequence_item,
    parse_quoted_token,
    split_key,
    strip_plain_comment,
)

# |, >, with chomping (+/-) and indentation (1-9) indicators in either order
_BLOCK_HEADER_RE = re.compile(r"([|>])([+-]?)([1-9]?)([+-]?)(?:[ \t]+#.*)?")


# ---------------------------------------------------------------------------
# Line cursor
# ---------------------------------------------------------------------------

class _Cursor:
    """Walks a document's lines, skipping blanks and comments on peek."""

    def __init__(self, lines: list[Line]) -> None:
        self.lines = list(lines)
        self.index = 0

    def peek(self) -> Line | None:
        while self.index < len(self.lines):
            line = self.lines[self.index]
            if line.is_blank or line.is_comment:
                self.index += 1
                continue
            if line.tab_indented:
                raise StructuralError("tab character used for indentation", line.number)
            return line
        return None

    def advance(self) -> None:
        self.index += 1

    def replace(self, line: Line) -> None:
        """Swap the current line, used to re-read the rest of ``- key: value``."""
        self.lines[self.index] = line


# ---------------------------------------------------------------------------
# Block parser
# ---------------------------------------------------------------------------

class BlockParser:
    """Parses the lines of a single document."""

    def __init__(self, lines: list[Line], options: ConverterOptions = DEFAULT_OPTIONS) -> None:
        self._cursor = _Cursor(lines)
        self.options = options

    def parse(self) -> object:
        """Return the document's raw value, or None when it has no content."""
        first = self._cursor.peek()
        if first is None:
            return None
        value = self._node(depth=1)
        leftover = self._cursor.peek()
        if leftover is not None:
            raise StructuralError(
                f"line is indented to column {leftover.indent} with no enclosing block to attach to",
                leftover.number,
            )
        return value

    # -- Nodes ----------------------------------------------------------

    def _node(self, depth: int) -> object:
        line = self._cursor.peek()
        if line is None:
            return None
        if depth > self.options.max_depth:
            raise StructuralError(f"nesting deeper than {self.options.max_depth} levels", line.number)
        if is_sequence_item(line.content):
            return self._sequence(line.indent, depth)
        if split_key(line.content, line.number) is not None:
            return self._mapping(line.indent, depth)
        self._cursor.advance()
        return self._value(line.content, line, line.indent - 1, depth, compact_sequence=False)

    def _nested(self, parent_indent: int, depth: int, compact_sequence: bool) -> object:
        """Value of a ``key:`` or ``-`` whose content starts on the next line."""
        nxt = self._cursor.peek()
        if nxt is None:
            return None
        if nxt.indent > parent_indent:
            return self._node(depth + 1)
        if compact_sequence and nxt.indent == parent_indent and is_sequence_item(nxt.content):
            return self._sequence(parent_indent, depth + 1, compact=True)
        return None

    def _mapping(self, indent: int, depth: int) -> dict[str, object]:
        entries: dict[str, object] = {}
        while True:
            line = self._cursor.peek()
            if line is None or line.indent < indent:
                break
            if line.indent > indent:
                raise StructuralError("unexpected indentation inside mapping", line.number)
            if is_sequence_item(line.content):
                raise StructuralError(
                    "sequence item mixed with mapping keys at the same indentation", line.number
                )
            pair = split_key(line.content, line.number)
            if pair is None:
                raise StructuralError(f"expected 'key: value', got {line.content!r}", line.number)
            key, rest = pair
            self._cursor.advance()
            entries[key] = self._value(rest, line, indent, depth, compact_sequence=True)
        return entries

    def _sequence(self, indent: int, depth: int, compact: bool = False) -> list[object]:
        items: list[object] = []
        while True:
            line = self._cursor.peek()
            if line is None or line.indent < indent:
                break
            if line.indent > indent:
                raise StructuralError("unexpected indentation inside sequence", line.number)
            if not is_sequence_item(line.content):
                # A sequence under ``key:`` at the key's own indentation ends here
                if compact:
                    break
                raise StructuralError(
                    "mapping key mixed with sequence items at the same indentation", line.number
                )

            after_dash = line.content[1:]
            body = after_dash.lstrip(" \t")
            if not body or body.startswith("#"):
                self._cursor.advance()
                items.append(self._nested(indent, depth, compact_sequence=False))
                continue

            if is_sequence_item(body) or split_key(body, line.number) is not None:
                item_indent = indent + 1 + len(after_dash) - len(body)
                self._cursor.replace(Line(line.number, item_indent, body, line.raw))
                items.append(self._node(depth + 1))
                continue

            self._cursor.advance()
            items.append(self._value(body, line, indent, depth, compact_sequence=False))
        return items

    # -- Scalars --------------------------------------------------------

    def _value(self, text: str, line: Line, parent_indent: int, depth: int, compact_sequence: bool) -> object:
        """Parse the text following ``key:`` or ``-``; the cursor is already past *line*."""
        if not text or text.startswith("#"):
            return self._nested(parent_indent, depth, compact_sequence)

        header = _BLOCK_HEADER_RE.fullmatch(text)
        if header is not None:
            return self._block_scalar(header, parent_indent, line)
        if text[0] in QUOTES:
            return parse_quoted_token(text, line.number)
        if text[0] in "[{":
            return parse_flow(text, line.number, self.options, depth)

        plain = strip_plain_comment(text)
        if plain == text.rstrip():
            plain = self._continue_plain(plain, parent_indent)
        return infer_scalar(plain, self.options.yaml11_booleans)

    def _continue_plain(self, text: str, parent_indent: int) -> str:
        """Fold more-indented continuation lines into a plain scalar."""
        parts = [text]
        while True:
            nxt = self._cursor.peek()
            if nxt is None or nxt.indent <= parent_indent:
                break
            if (
                is_sequence_item(nxt.content)
                or nxt.content.startswith(QUOTES)
                or split_key(nxt.content, nxt.number) is not None
            ):
                break
            piece = strip_plain_comment(nxt.content)
            parts.append(piece)
            self._cursor.advance()
            if piece != nxt.content:
                break
        return " ".join(parts)

    def _block_scalar(self, header: re.Match[str], parent_indent: int, line: Line) -> str:
        style, chomp_a, width, chomp_b = header.groups()
        if chomp_a and chomp_b:
            raise StructuralError("block scalar has two chomping indicators", line.number)
        chomp = chomp_a or chomp_b
        # a top-level scalar counts its indicator from column 0
        block_indent = max(parent_indent, 0) + int(width) if width else None

        lines = self._cursor.lines
        i = self._cursor.index
        body: list[str] = []
        while i < len(lines):
            raw = lines[i].raw
            if not raw.strip():
                body.append("")
                i += 1
                continue
            indent = len(raw) - len(raw.lstrip(" "))
            if block_indent is None:
                if indent <= parent_indent:
                    break
                block_indent = indent
            if indent < block_indent:
                break
            body.append(raw[block_indent:])
            i += 1
        self._cursor.index = i

        trailing = 0
        while body and body[-1] == "":
            body.pop()
            trailing += 1
        if not body:
            return "\n" * trailing if chomp == "+" else ""

        text = "\n".join(body) if style == "|" else _fold(body)
        if chomp == "-":
            return text
        if chomp == "+":
            return text + "\n" * (trailing + 1)
        return text + "\n"


def _fold(lines: list[str]) -> str:
    """Join folded block lines: breaks become spaces, blank lines become breaks."""
    out: list[str] = []
    prev: str | None = None
    for text in lines:
        if prev is None:
            out.append(text if text else "\n")
        elif not text:
            out.append("\n")
        elif not prev:
            out.append(text)
        elif text[0] in " \t" or prev[0] in " \t":
            out.append("\n" + text)
        else:
            out.append(" " + text)
        prev = text
    return "".join(out)


def parse_lines(lines: list[Line], options: ConverterOptions = DEFAULT_OPTIONS) -> object:
    """Parse one document's lines into a raw graph of dicts, lists and scalars."""
    return BlockParser(lines, options).parse()
