"""Suggestions for correcting spans of documentation, and sets of them per file."""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Iterable, Iterator, Optional, Sequence, Union

from spellmend.display import (
    Detector,
    condition_display_content,
    format_replacements,
    get_terminal_size,
)

log = logging.getLogger(__name__)

Origin = Union[str, "os.PathLike[str]"]
# A span is `((start line, start column), (end line, end column))`, lines
# starting at 1, columns at 0, with an inclusive end.
SpanT = tuple[tuple[int, int], tuple[int, int]]


def _covered_lines(content: str, char_range: range) -> list[range]:
    """Char ranges of the lines in `content` overlapping `char_range`."""
    covered = []
    start = 0
    for line in content.split("\n"):
        end = start + len(line)
        if start < char_range.stop and char_range.start < end:
            covered.append(range(start, end))
        start = end + 1
    return covered


@functools.total_ordering
@dataclass(frozen=True)
class Suggestion:
    """A proposed fix for an offending span of a chunk of documentation.

    `chunk` is the text of the chunk the suggestion refers to, `range` the
    char range inside it, and `span` the location inside the file. Suggestions
    order by span start, then span end.
    """

    detector: Detector
    origin: Origin
    chunk: str
    span: SpanT
    range: range
    replacements: tuple[str, ...] = field(default=())
    description: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "replacements", tuple(self.replacements))
        (sl, sc), (el, ec) = self.span
        object.__setattr__(self, "span", ((sl, sc), (el, ec)))

    def __lt__(self, other: "Suggestion") -> bool:
        if not isinstance(other, Suggestion):
            return NotImplemented
        return self.span < other.span

    def _one_line_len(self) -> Optional[int]:
        (start_line, start_col), (end_line, end_col) = self.span
        if start_line != end_line:
            return None
        return end_col + 1 - start_col

    def _render(self, terminal_size: int) -> str:
        (start_line, start_col), _end = self.span
        indent = 3 + len(str(start_line))
        bar = "|".rjust(indent)

        out = [f"error: spellcheck({self.detector})\n"]
        out.append(f"{'-->'.rjust(indent + 1)} {os.fspath(self.origin)}:{start_line}\n")
        out.append(bar + "\n")
        out.append(f"{str(start_line).rjust(indent - 2)} |")

        marker_size = self._one_line_len()
        if marker_size is None:
            marker_size = max(len(self.chunk) - start_col, 0)

        lines = _covered_lines(self.chunk, self.range)
        if not lines:
            raise ValueError("Lines covered must exist")
        line_range = lines[0]
        start_of_line_offset = max(self.range.start - line_range.start, 0)
        intra_line = range(
            start_of_line_offset,
            min(start_of_line_offset + len(self.range), len(line_range)),
        )
        relevant_line = self.chunk[line_range.start:line_range.stop]

        formatted, offset, marker_size = condition_display_content(
            terminal_size, indent, relevant_line, intra_line, indent + 2, marker_size
        )
        out.append(f" {formatted}\n")

        if marker_size > 0:
            out.append(bar + " " + " " * offset + "^" * marker_size + "\n")
        else:
            log.warning("marker_size=%d span %r >> %r <<", marker_size, self.span, self)

        out.append(bar)
        out.append(format_replacements(self.replacements))
        if self.replacements:
            out.append("\n" + "|\n".rjust(indent + 1))
            out.append(bar)
        if self.description is not None:
            out.append(f"   {self.description}\n")
        return "".join(out)

    def __format__(self, spec: str) -> str:
        """Render for a terminal; a numeric `spec` sets the terminal width."""
        width = int(spec) if spec else get_terminal_size()
        return self._render(width)

    def __str__(self) -> str:
        return self._render(get_terminal_size())


class SuggestionSet:
    """Suggestions clustered per file, in insertion order of the files."""

    def __init__(self) -> None:
        self._per_file: dict[Origin, list[Suggestion]] = {}

    def __iter__(self) -> Iterator[tuple[Origin, list[Suggestion]]]:
        return iter(self._per_file.items())

    def __len__(self) -> int:
        """Number of files in the set."""
        return len(self._per_file)

    def __repr__(self) -> str:
        return f"SuggestionSet({self._per_file!r})"

    def add(self, origin: Origin, suggestion: Suggestion) -> None:
        self._per_file.setdefault(origin, []).append(suggestion)

    def append(self, origin: Origin, suggestions: Sequence[Suggestion]) -> None:
        self._per_file.setdefault(origin, []).extend(suggestions)

    def extend(self, origin: Origin, suggestions: Iterable[Suggestion]) -> None:
        self._per_file.setdefault(origin, []).extend(suggestions)

    def files(self) -> Iterator[Origin]:
        return iter(self._per_file)

    def suggestions(self, origin: Origin) -> Iterator[Suggestion]:
        """Iterate the suggestions of `origin`; raises KeyError if it is unknown."""
        try:
            return iter(self._per_file[origin])
        except KeyError:
            raise KeyError(f"origin must exist: {origin!r}") from None

    def join(self, other: Iterable[tuple[Origin, Iterable[Suggestion]]]) -> None:
        """Merge `(origin, suggestions)` pairs, such as another set, into this one."""
        for origin, suggestions in other:
            self._per_file.setdefault(origin, []).extend(suggestions)

    def sort(self) -> None:
        """Sort files by path, and each file's suggestions by span."""
        for suggestions in self._per_file.values():
            suggestions.sort(key=lambda s: s.span)
        self._per_file = dict(
            sorted(self._per_file.items(), key=lambda item: PurePath(os.fspath(item[0])))
        )

    def total_count(self) -> int:
        return sum(len(v) for v in self._per_file.values())