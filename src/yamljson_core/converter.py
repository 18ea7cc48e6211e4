"""Converter: YAML text → sequence of JSON Value trees."""

from __future__ import annotations

from logging import getLogger
from typing import Iterator, Union

from .errors import EncodingError, ParseError, StructuralError
from .normalizer import normalize
from .options import DEFAULT_OPTIONS, ConverterOptions
from .parser import parse_lines
from .reader import split_documents
from .values import Null, Value

_LOG = getLogger(__name__)

Source = Union[str, bytes, bytearray]


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def iter_documents(text: Source, options: ConverterOptions | None = None) -> Iterator[Value]:
    """Yield one Value per ``---``-delimited document of *text*, in order.

    A document that fails to parse raises before anything of it is yielded;
    documents before it have already been produced.
    """
    options = options or DEFAULT_OPTIONS
    sources = split_documents(decode(text))
    _LOG.debug("Split input into %d document(s)", len(sources))

    for source in sources:
        _LOG.debug("Parsing document %d starting at line %d", source.index, source.start_line)
        try:
            raw = parse_lines(source.lines, options)
        except ParseError as exc:
            exc.document = source.index
            raise
        yield normalize(raw)


def convert_all(text: Source, options: ConverterOptions | None = None) -> list[Value]:
    """Convert every document of *text*; empty input gives an empty list."""
    return list(iter_documents(text, options))


def convert(text: Source, options: ConverterOptions | None = None) -> Value:
    """Convert input that holds at most one document.

    Returns ``Null`` for empty input; more than one document is an error.
    """
    documents = convert_all(text, options)
    if not documents:
        return Null
    if len(documents) > 1:
        raise StructuralError(f"expected a single document, found {len(documents)}", document=1)
    return documents[0]


def decode(text: Source) -> str:
    """Return *text* as a str, decoding bytes as UTF-8 and dropping a BOM."""
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise EncodingError(f"input is not valid UTF-8: {exc}") from exc
    return text[1:] if text.startswith("\ufeff") else text


# ---------------------------------------------------------------------------
# YamlToJsonConverter class
# ---------------------------------------------------------------------------

class YamlToJsonConverter:
    """Holds a ConverterOptions and converts any number of inputs with it.

    Usage::

        converter = YamlToJsonConverter()
        docs = converter.convert_all("a: 1\\n---\\nb: two")
        docs[0]["a"]   # → VInt(1)

    No state is kept between calls, so one instance may be shared across threads.
    """

    def __init__(self, options: ConverterOptions | None = None) -> None:
        self.options = options or DEFAULT_OPTIONS

    def iter_documents(self, text: Source) -> Iterator[Value]:
        return iter_documents(text, self.options)

    def convert_all(self, text: Source) -> list[Value]:
        return convert_all(text, self.options)

    def convert(self, text: Source) -> Value:
        return convert(text, self.options)
