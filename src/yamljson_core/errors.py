"""Exceptions raised by yamljson_core."""

from __future__ import annotations


class YamlJsonError(Exception):
    """Base class for all yamljson_core errors."""


class ParseError(YamlJsonError, ValueError):
    """A document could not be converted.

    ``line`` is 1-based and counts from the start of the whole input, not the
    document. ``document`` is the 0-based index of the failing document; it is
    ``None`` until the converter knows which document the line belongs to.
    """

    def __init__(self, message: str, line: int | None = None, document: int | None = None) -> None:
        self.message = message
        self.line = line
        self.document = document
        super().__init__(message)

    def __str__(self) -> str:
        where = []
        if self.document is not None:
            where.append(f"document {self.document + 1}")
        if self.line is not None:
            where.append(f"line {self.line}")
        if not where:
            return self.message
        return f"{', '.join(where)}: {self.message}"


class StructuralError(ParseError):
    """Invalid indentation or block nesting."""


class UnterminatedScalarError(ParseError):
    """A quoted scalar has no closing quote on its line."""


class EncodingError(YamlJsonError, ValueError):
    """Input bytes are not valid UTF-8."""


class PathError(YamlJsonError, KeyError):
    """A dotted path could not be resolved or written."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
