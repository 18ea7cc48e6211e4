"""Single-line flow collections: ``[a, b]`` and ``{key: value}``."""

from __future__ import annotations

from .errors import StructuralError
from .options import ConverterOptions
from .scalars import QUOTES, infer_scalar, read_quoted

_SEQ_STOP = ",[]{}"
_MAP_STOP = ",[]{}:"


class _FlowReader:
    def __init__(self, text: str, line: int | None, options: ConverterOptions) -> None:
        self.text = text
        self.pos = 0
        self.line = line
        self.options = options

    def error(self, message: str) -> StructuralError:
        return StructuralError(message, self.line)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in " \t":
            self.pos += 1

    # -- Values ---------------------------------------------------------

    def value(self, depth: int, stop: str) -> object:
        self.skip_ws()
        ch = self.peek()
        if ch == "[":
            return self.sequence(depth + 1)
        if ch == "{":
            return self.mapping(depth + 1)
        if ch in QUOTES:
            text, self.pos = read_quoted(self.text, self.pos, self.line)
            return text
        token = self.plain(stop)
        if not token:
            raise self.error(f"empty entry in flow collection at column {self.pos + 1}")
        return infer_scalar(token, self.options.yaml11_booleans)

    def plain(self, stop: str) -> str:
        start = self.pos
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch in stop:
                # ':' only ends a key when followed by a separator
                if ch != ":" or self.text[self.pos + 1 : self.pos + 2] in ("", " ", "\t", ",", "}", "]"):
                    break
            elif ch == "#" and self.pos > start and self.text[self.pos - 1] in " \t":
                break
            self.pos += 1
        return self.text[start : self.pos].strip()

    def key(self) -> str:
        self.skip_ws()
        if self.peek() in QUOTES:
            text, self.pos = read_quoted(self.text, self.pos, self.line)
            return text
        token = self.plain(_MAP_STOP)
        if not token:
            raise self.error(f"empty key in flow mapping at column {self.pos + 1}")
        return token

    # -- Collections ----------------------------------------------------

    def check_depth(self, depth: int) -> None:
        if depth > self.options.max_depth:
            raise self.error(f"nesting deeper than {self.options.max_depth} levels")

    def sequence(self, depth: int) -> list[object]:
        self.check_depth(depth)
        self.pos += 1
        items: list[object] = []
        while True:
            self.skip_ws()
            ch = self.peek()
            if not ch:
                raise self.error("unterminated flow sequence")
            if ch == "]":
                self.pos += 1
                return items
            items.append(self.value(depth, _SEQ_STOP))
            self.skip_ws()
            ch = self.peek()
            if ch == ",":
                self.pos += 1
            elif ch != "]":
                raise self.error(f"expected ',' or ']' in flow sequence at column {self.pos + 1}")

    def mapping(self, depth: int) -> dict[str, object]:
        self.check_depth(depth)
        self.pos += 1
        entries: dict[str, object] = {}
        while True:
            self.skip_ws()
            ch = self.peek()
            if not ch:
                raise self.error("unterminated flow mapping")
            if ch == "}":
                self.pos += 1
                return entries
            key = self.key()
            self.skip_ws()
            value: object = None
            if self.peek() == ":":
                self.pos += 1
                self.skip_ws()
                if self.peek() not in (",", "}"):
                    value = self.value(depth, _MAP_STOP[:-1])
            entries[key] = value
            self.skip_ws()
            ch = self.peek()
            if ch == ",":
                self.pos += 1
            elif ch != "}":
                raise self.error(f"expected ',' or '}}' in flow mapping at column {self.pos + 1}")


def parse_flow(text: str, line: int | None, options: ConverterOptions, depth: int = 0) -> object:
    """Parse a flow collection that occupies the rest of a line."""
    reader = _FlowReader(text, line, options)
    value = reader.value(depth, _SEQ_STOP)
    rest = text[reader.pos :].strip()
    if rest and not rest.startswith("#"):
        raise StructuralError(f"unexpected text after flow collection: {rest!r}", line)
    return value
