"""Reader layer: splits raw text into documents and indexed lines."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

DOCUMENT_MARKER = "---"

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class Line:
    number: int  # 1-based, counted over the whole input
    indent: int
    content: str  # text after the leading spaces, trailing whitespace removed
    raw: str

    @classmethod
    def from_raw(cls, number: int, raw: str) -> Line:
        body = raw.lstrip(" ")
        return cls(number=number, indent=len(raw) - len(body), content=body.rstrip(), raw=raw)

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()

    @property
    def is_comment(self) -> bool:
        return self.content.lstrip().startswith("#")

    @property
    def tab_indented(self) -> bool:
        return self.content.startswith("\t")


@dataclass(slots=True)
class DocumentSource:
    """The lines of one ``---``-delimited document."""

    index: int
    start_line: int
    lines: list[Line] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return all(line.is_blank or line.is_comment for line in self.lines)


def split_lines(text: str) -> list[str]:
    """Split on any newline convention; a trailing newline adds no line."""
    lines = _NEWLINE_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def is_document_marker(raw: str) -> bool:
    return raw.strip() == DOCUMENT_MARKER


def split_documents(text: str) -> list[DocumentSource]:
    """Split *text* into documents on lines consisting solely of ``---``.

    - Empty or whitespace-only input → no documents
    - Content before the first marker that is only blanks and comments is
      dropped, so a leading ``---`` does not produce an empty document
    - Every other section is a document, even when empty
    """
    if not text.strip():
        return []

    sections: list[DocumentSource] = [DocumentSource(index=0, start_line=1)]
    for number, raw in enumerate(split_lines(text), start=1):
        if is_document_marker(raw):
            sections.append(DocumentSource(index=len(sections), start_line=number + 1))
            continue
        sections[-1].lines.append(Line.from_raw(number, raw))

    if len(sections) > 1 and sections[0].is_empty:
        sections.pop(0)
        for i, section in enumerate(sections):
            section.index = i
    return sections
